from numbers import Number

import numpy as np

from .dimension import Dimension
from .product import find_division, find_multiplication
from .units import Quantity

# Relative tolerance for equality of measurements
REL_TOL = 1e-9


class IncompatibleUnitsError(TypeError):
    def __init__(self, a, b, msg):
        msg = (
            f"Cannot {msg} {type(a).__name__} and {type(b).__name__}: "
            "they are different categories of quantity."
        )
        super().__init__(msg)


def _is_scalar(obj):
    return isinstance(obj, (Number, np.ndarray))


def _isclose(a, b):
    return np.isclose(a, b, rtol=REL_TOL, atol=0)


class Measurement:
    """Immutable numeric value expressed in a unit of some `Dimension`

    `value` may be a number or a numpy array.  Multiplying or dividing measurements
    of different categories uses the products registered in `unitproduct.product`;
    a pair of categories with no registered product raises `TypeError`.

    """

    # Make numpy defer to our reflected operators instead of broadcasting over us
    __array_ufunc__ = None

    def __init__(self, value, unit: Dimension):
        if not isinstance(unit, Dimension):
            raise TypeError(
                f"Expected unit of type {Dimension}, but was given {unit!r} "
                f"of type {type(unit)}"
            )
        self._value = value
        self._unit = unit

    @classmethod
    def from_quantity(cls, quantity: Quantity, unit: Dimension):
        """Return Measurement in `unit` equal to a pint Quantity"""
        return cls(quantity.to(unit.unit).magnitude, unit)

    @property
    def value(self):
        return self._value

    @property
    def unit(self) -> Dimension:
        return self._unit

    @property
    def dimension(self):
        return type(self._unit)

    @property
    def base_value(self):
        return self._value * self._unit.coefficient

    @property
    def quantity(self) -> Quantity:
        return Quantity(self._value, self._unit.unit)

    def converted(self, unit: Dimension) -> "Measurement":
        if unit is self._unit:
            return self
        if type(unit) is not self.dimension:
            raise IncompatibleUnitsError(self._unit, unit, "convert between")
        return type(self)(self.base_value / unit.coefficient, unit)

    def _common_values(self, other: "Measurement", action):
        """Return (unit, self value, other value) in a shared unit"""
        if other.dimension is not self.dimension:
            raise IncompatibleUnitsError(self._unit, other.unit, action)
        if other.unit is self._unit:
            return self._unit, self._value, other.value
        return self.dimension.base_unit(), self.base_value, other.base_value

    def __repr__(self):
        return f"{self.__class__.__name__}({self._value!r}, {self.dimension.__name__}.{self._unit.name})"

    def __str__(self):
        return f"{self._value} {self._unit.symbol}"

    def __format__(self, format_spec):
        return f"{format(self._value, format_spec)} {self._unit.symbol}"

    # Comparisons return a single bool.  For array values, the comparison must hold
    # for every element.

    def _compare(self, other, op):
        _, a, b = self._common_values(other, "compare")
        return bool(np.all(op(a, b)))

    def __eq__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        if other.dimension is not self.dimension:
            return False
        return self._compare(other, _isclose)

    def __lt__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return self._compare(other, np.less)

    def __le__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return self._compare(other, lambda a, b: np.less(a, b) | _isclose(a, b))

    def __gt__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return self._compare(other, np.greater)

    def __ge__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return self._compare(other, lambda a, b: np.greater(a, b) | _isclose(a, b))

    def __neg__(self):
        return type(self)(-self._value, self._unit)

    def __pos__(self):
        return self

    def __abs__(self):
        return type(self)(abs(self._value), self._unit)

    def __add__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        unit, a, b = self._common_values(other, "add")
        return type(self)(a + b, unit)

    def __sub__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        unit, a, b = self._common_values(other, "subtract")
        return type(self)(a - b, unit)

    def __mul__(self, other):
        if isinstance(other, Measurement):
            multiply = find_multiplication(self.dimension, other.dimension)
            if multiply is None:
                return NotImplemented
            return multiply(self, other)
        if _is_scalar(other):
            return type(self)(self._value * other, self._unit)
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return type(self)(other * self._value, self._unit)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Measurement):
            if other.dimension is self.dimension:
                _, a, b = self._common_values(other, "divide")
                return a / b
            divide = find_division(self.dimension, other.dimension)
            if divide is None:
                return NotImplemented
            return divide(self, other)
        if _is_scalar(other):
            return type(self)(self._value / other, self._unit)
        return NotImplemented
