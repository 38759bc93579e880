from . import dimensions
from .dimension import Dimension
from .dimensions import (
    Acceleration,
    Area,
    Duration,
    ElectricCharge,
    ElectricCurrent,
    ElectricPotentialDifference,
    ElectricResistance,
    Energy,
    Force,
    Length,
    Mass,
    Power,
    Speed,
    Volume,
)
from .measurement import Measurement, IncompatibleUnitsError
from .product import MappingError, UnitMapping, UnitProduct, register
from .units import ureg, Unit, Quantity


# M and Q are shorter than Measurement and Quantity, and users will type them a lot.
M = Measurement
Q = ureg.Quantity
