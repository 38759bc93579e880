from enum import Enum

from .units import Unit, conversion_coefficient, format_unit


class Dimension(Enum):
    """A unit of measure belonging to one category of physical quantity

    Each category is a subclass of `Dimension` and its members are the units of that
    category.  Each member is declared with a unit expression that the pint registry in
    `unitproduct.units` understands; pint is only used to derive the linear
    conversion coefficient between a unit and the category's base unit.

    Example:

        class Length(Dimension):
            meters = "meter"
            kilometers = "kilometer"

    Units are compared by identity.  Two members with the same coefficient, even
    the same expression, convert into each other exactly but are distinct units for
    the purpose of unit mappings (see `unitproduct.product`).  The member's value is
    therefore `(expression, position)` rather than the bare expression, so that no
    member becomes an alias of another; the expression is `member.expression`.

    """

    def __new__(cls, expression: str):
        obj = object.__new__(cls)
        obj._value_ = (expression, len(cls._member_map_))
        obj.expression = expression
        return obj

    @classmethod
    def base_unit(cls):
        """Return the unit that values of this category are normalized to

        Defaults to the first member.  Override in a subclass to choose another one.

        """
        return next(iter(cls))

    @property
    def unit(self) -> Unit:
        return Unit(self.expression)

    @property
    def symbol(self) -> str:
        return format_unit(self.unit)

    @property
    def coefficient(self) -> float:
        """Factor that converts a value in this unit to the base unit"""
        return conversion_coefficient(self.expression, self.base_unit().expression)

    def __str__(self):
        return self.symbol
