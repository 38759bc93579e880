"""Multiplication and division between measurements of different categories

A `UnitProduct` declares that one `Dimension` category is the product of two others,
e.g. length = speed × duration, and which unit the result is expressed in.  It
carries one default unit mapping and an ordered list of preferred mappings:

    UnitProduct(
        (Speed.meters_per_second, Duration.seconds, Length.meters),
        [(Speed.kilometers_per_hour, Duration.hours, Length.kilometers)],
    )

When two measurements are multiplied, the first preferred mapping whose factor units
are exactly (by identity) the operands' units decides the result unit.  Otherwise the
default mapping is used, whatever the operands' units are.  Division works the same
way, matching on the product unit and the divisor's unit.

`register` makes a product available to `Measurement`'s `*` and `/` operators.

"""
from collections import namedtuple
from math import isclose
from typing import Callable, Dict, Iterable, Optional, Tuple, Type
from warnings import warn

from .dimension import Dimension

# Relative tolerance for checking that a mapping's units are coherent
REL_TOL = 1e-9


class MappingError(ValueError):
    def __init__(self, mapping, msg):
        msg = f"Unit mapping ({', '.join(str(u) for u in mapping)}): {msg}"
        super().__init__(msg)


class UnitMapping(namedtuple("UnitMapping", ["factor1", "factor2", "product"])):
    """Triple of units: factor1 unit × factor2 unit = product unit"""

    __slots__ = ()

    def __str__(self):
        return f"{self.factor1} × {self.factor2} = {self.product}"


class UnitProduct:
    def __init__(self, default: Iterable[Dimension], preferred=()):
        self._default = UnitMapping(*default)
        self._preferred = tuple(UnitMapping(*m) for m in preferred)
        for u in self._default:
            if not isinstance(u, Dimension):
                raise MappingError(
                    self._default, f"{u!r} is not a unit of a {Dimension.__name__}"
                )
        self.factor1, self.factor2, self.product = (type(u) for u in self._default)
        for mapping in (self._default,) + self._preferred:
            self._check(mapping)

    def __repr__(self):
        return (
            f"{self.__class__.__name__}({tuple(self._default)!r}, "
            f"{[tuple(m) for m in self._preferred]!r})"
        )

    def __str__(self):
        return (
            f"{self.product.__name__} = "
            f"{self.factor1.__name__} × {self.factor2.__name__}"
        )

    def _check(self, mapping: UnitMapping):
        categories = (self.factor1, self.factor2, self.product)
        for u, category in zip(mapping, categories):
            if type(u) is not category:
                raise MappingError(
                    mapping,
                    f"{u!r} is not a unit of {category.__name__}, as required by "
                    f"the default mapping {self._default}.",
                )
        c1, c2, cp = (u.coefficient for u in mapping)
        if not isclose(c1 * c2, cp, rel_tol=REL_TOL):
            raise MappingError(
                mapping,
                f"Units are not coherent: 1 {mapping.factor1} × 1 {mapping.factor2} "
                f"= {c1 * c2 / cp} {mapping.product}, not 1 {mapping.product}.",
            )

    def default_mapping(self) -> UnitMapping:
        return self._default

    def preferred_mappings(self) -> Tuple[UnitMapping, ...]:
        return self._preferred

    def select(self, factor1=None, factor2=None, product=None) -> UnitMapping:
        """Return the unit mapping to use given some known units

        Returns the first preferred mapping whose components are identical to all
        of the given units, or the default mapping if none is.  With no units given,
        the default mapping is returned.

        """
        known = [
            (i, u) for i, u in enumerate((factor1, factor2, product)) if u is not None
        ]
        if not known:
            return self._default
        for mapping in self._preferred:
            if all(mapping[i] is u for i, u in known):
                return mapping
        return self._default

    def multiply(self, a, b):
        """Return a × b, for `a` in factor1 units and `b` in factor2 units"""
        mapping = self.select(factor1=a.unit, factor2=b.unit)
        value = a.converted(mapping.factor1).value * b.converted(mapping.factor2).value
        return type(a)(value, mapping.product)

    def divide_by_factor1(self, p, a):
        """Return p / a, for `p` in product units and `a` in factor1 units"""
        mapping = self.select(factor1=a.unit, product=p.unit)
        value = p.converted(mapping.product).value / a.converted(mapping.factor1).value
        return type(p)(value, mapping.factor2)

    def divide_by_factor2(self, p, b):
        """Return p / b, for `p` in product units and `b` in factor2 units"""
        mapping = self.select(factor2=b.unit, product=p.unit)
        value = p.converted(mapping.product).value / b.converted(mapping.factor2).value
        return type(p)(value, mapping.factor1)


# Operations keyed by the categories of the (left, right) operands.  Populated at
# import time by `register` and only read afterwards.
_multiplications: Dict[Tuple[Type[Dimension], Type[Dimension]], Callable] = {}
_divisions: Dict[Tuple[Type[Dimension], Type[Dimension]], Callable] = {}


def _add(table, key, operation, symbol):
    if key in table:
        warn(
            f"Redefining {key[0].__name__} {symbol} {key[1].__name__}.  "
            "The earlier definition will no longer be used."
        )
    table[key] = operation


def register(product: UnitProduct) -> UnitProduct:
    """Make `product` available to the `*` and `/` operators of measurements"""
    f1, f2, p = product.factor1, product.factor2, product.product

    def multiply_reversed(b, a):
        return product.multiply(a, b)

    _add(_multiplications, (f1, f2), product.multiply, "×")
    _add(_divisions, (p, f1), product.divide_by_factor1, "/")
    if f1 is not f2:
        _add(_multiplications, (f2, f1), multiply_reversed, "×")
        _add(_divisions, (p, f2), product.divide_by_factor2, "/")
    return product


def find_multiplication(
    left: Type[Dimension], right: Type[Dimension]
) -> Optional[Callable]:
    return _multiplications.get((left, right))


def find_division(left: Type[Dimension], right: Type[Dimension]) -> Optional[Callable]:
    return _divisions.get((left, right))
