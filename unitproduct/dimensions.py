"""Built-in categories of physical quantity and the products between them"""
from .dimension import Dimension
from .product import UnitProduct, register


class Length(Dimension):
    meters = "meter"
    kilometers = "kilometer"
    centimeters = "centimeter"
    millimeters = "millimeter"
    miles = "mile"
    yards = "yard"
    feet = "foot"
    inches = "inch"
    nautical_miles = "nautical_mile"


class Duration(Dimension):
    seconds = "second"
    milliseconds = "millisecond"
    minutes = "minute"
    hours = "hour"


class Speed(Dimension):
    meters_per_second = "meter / second"
    kilometers_per_hour = "kilometer / hour"
    miles_per_hour = "mile / hour"
    knots = "knot"


class Acceleration(Dimension):
    meters_per_second_squared = "meter / second ** 2"
    gravity = "standard_gravity"


class Area(Dimension):
    square_meters = "meter ** 2"
    square_kilometers = "kilometer ** 2"
    square_centimeters = "centimeter ** 2"
    square_millimeters = "millimeter ** 2"
    square_miles = "mile ** 2"
    square_yards = "yard ** 2"
    square_feet = "foot ** 2"
    square_inches = "inch ** 2"
    hectares = "hectare"


class Volume(Dimension):
    cubic_meters = "meter ** 3"
    cubic_kilometers = "kilometer ** 3"
    cubic_centimeters = "centimeter ** 3"
    cubic_millimeters = "millimeter ** 3"
    cubic_feet = "foot ** 3"
    cubic_inches = "inch ** 3"
    liters = "liter"
    milliliters = "milliliter"


class Mass(Dimension):
    kilograms = "kilogram"
    grams = "gram"
    metric_tons = "metric_ton"
    pounds = "pound"


class Force(Dimension):
    newtons = "newton"
    kilonewtons = "kilonewton"


class Energy(Dimension):
    joules = "joule"
    kilojoules = "kilojoule"
    watt_hours = "watt * hour"
    kilowatt_hours = "kilowatt * hour"
    calories = "calorie"
    kilocalories = "kilocalorie"


class Power(Dimension):
    watts = "watt"
    milliwatts = "milliwatt"
    kilowatts = "kilowatt"
    megawatts = "megawatt"
    horsepower = "horsepower"


class ElectricCurrent(Dimension):
    amperes = "ampere"
    milliamperes = "milliampere"


class ElectricCharge(Dimension):
    coulombs = "coulomb"
    ampere_hours = "ampere * hour"
    milliampere_hours = "milliampere * hour"


class ElectricPotentialDifference(Dimension):
    volts = "volt"
    millivolts = "millivolt"
    kilovolts = "kilovolt"


class ElectricResistance(Dimension):
    ohms = "ohm"
    kiloohms = "kiloohm"
    megaohms = "megaohm"


# distance = speed × time
LENGTH = register(
    UnitProduct(
        (Speed.meters_per_second, Duration.seconds, Length.meters),
        [
            (Speed.kilometers_per_hour, Duration.hours, Length.kilometers),
            (Speed.miles_per_hour, Duration.hours, Length.miles),
            (Speed.knots, Duration.hours, Length.nautical_miles),
        ],
    )
)

# speed = acceleration × time
SPEED = register(
    UnitProduct(
        (Acceleration.meters_per_second_squared, Duration.seconds, Speed.meters_per_second)
    )
)

AREA = register(
    UnitProduct(
        (Length.meters, Length.meters, Area.square_meters),
        [
            (Length.kilometers, Length.kilometers, Area.square_kilometers),
            (Length.centimeters, Length.centimeters, Area.square_centimeters),
            (Length.millimeters, Length.millimeters, Area.square_millimeters),
            (Length.miles, Length.miles, Area.square_miles),
            (Length.yards, Length.yards, Area.square_yards),
            (Length.feet, Length.feet, Area.square_feet),
            (Length.inches, Length.inches, Area.square_inches),
        ],
    )
)

VOLUME = register(
    UnitProduct(
        (Area.square_meters, Length.meters, Volume.cubic_meters),
        [
            (Area.square_kilometers, Length.kilometers, Volume.cubic_kilometers),
            (Area.square_centimeters, Length.centimeters, Volume.cubic_centimeters),
            (Area.square_millimeters, Length.millimeters, Volume.cubic_millimeters),
            (Area.square_feet, Length.feet, Volume.cubic_feet),
            (Area.square_inches, Length.inches, Volume.cubic_inches),
        ],
    )
)

# F = m a
FORCE = register(
    UnitProduct(
        (Mass.kilograms, Acceleration.meters_per_second_squared, Force.newtons),
        [(Mass.metric_tons, Acceleration.meters_per_second_squared, Force.kilonewtons)],
    )
)

# E = P t
ENERGY = register(
    UnitProduct(
        (Power.watts, Duration.seconds, Energy.joules),
        [
            (Power.watts, Duration.hours, Energy.watt_hours),
            (Power.kilowatts, Duration.hours, Energy.kilowatt_hours),
        ],
    )
)

# W = F s
WORK = register(
    UnitProduct(
        (Force.newtons, Length.meters, Energy.joules),
        [(Force.kilonewtons, Length.meters, Energy.kilojoules)],
    )
)

# P = I U
POWER = register(
    UnitProduct(
        (ElectricCurrent.amperes, ElectricPotentialDifference.volts, Power.watts),
        [
            (
                ElectricCurrent.milliamperes,
                ElectricPotentialDifference.volts,
                Power.milliwatts,
            ),
            (
                ElectricCurrent.amperes,
                ElectricPotentialDifference.kilovolts,
                Power.kilowatts,
            ),
        ],
    )
)

# U = R I
POTENTIAL_DIFFERENCE = register(
    UnitProduct(
        (
            ElectricResistance.ohms,
            ElectricCurrent.amperes,
            ElectricPotentialDifference.volts,
        ),
        [
            (
                ElectricResistance.kiloohms,
                ElectricCurrent.milliamperes,
                ElectricPotentialDifference.volts,
            ),
            (
                ElectricResistance.ohms,
                ElectricCurrent.milliamperes,
                ElectricPotentialDifference.millivolts,
            ),
        ],
    )
)

# Q = I t
CHARGE = register(
    UnitProduct(
        (ElectricCurrent.amperes, Duration.seconds, ElectricCharge.coulombs),
        [
            (ElectricCurrent.amperes, Duration.hours, ElectricCharge.ampere_hours),
            (
                ElectricCurrent.milliamperes,
                Duration.hours,
                ElectricCharge.milliampere_hours,
            ),
        ],
    )
)
