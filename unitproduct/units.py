from contextlib import contextmanager
from functools import lru_cache

import pint


@contextmanager
def redefinitions_ignored(ureg: pint.registry.ApplicationRegistry):
    """Temporarily let `ureg.define` replace existing definitions silently"""
    # We have to use the _registry attribute due to
    # https://github.com/hgrecco/pint/pull/1403.
    on_redefinition = ureg._registry._on_redefinition
    ureg._registry._on_redefinition = "ignore"
    try:
        yield ureg
    finally:
        ureg._registry._on_redefinition = on_redefinition


def fix_pint_registry(ureg: pint.registry.ApplicationRegistry):
    """Update pint ApplicationRegistry with some fixes"""
    with redefinitions_ignored(ureg):
        # Use "h" for hours, not for the Planck constant.  There's an open debate on
        # this upstream: https://github.com/hgrecco/pint/issues/719
        ureg.define("@alias hour = h")
        # Accept both the micro sign and the greek small letter mu as the micro
        # prefix.  https://github.com/hgrecco/pint/pull/1347.
        ureg.define("micro- = 1e-6  = µ- = μ- = u-")
    return ureg


def format_unit(unit):
    long = f"{unit}"
    short = f"{unit:~}"
    if long == "dimensionless":
        return "1"
    return short


@lru_cache(maxsize=None)
def conversion_coefficient(unit: str, base: str) -> float:
    """Return coefficient c such that (value in `unit`) * c = (value in `base`)

    Both arguments are unit expressions understood by the registry.  Only linear
    (multiplicative) units are meaningful here.

    """
    return float(Quantity(1, unit).to(base).magnitude)


# noinspection PyTypeChecker
ureg = fix_pint_registry(pint.get_application_registry())
Quantity = ureg.Quantity
Unit = ureg.Unit
