"""Unit handling for hydrostate.

The library works in IF97 units (MPa, K, kJ/kg).  A shared pint registry
converts those to SI where an SI-based backend is involved.
"""

from __future__ import annotations

from functools import lru_cache

import pint

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()
_ureg.default_format = "~P"  # short pretty format

Q_ = _ureg.Quantity

# Units of each IF97 property name
IF97_UNITS: dict[str, str] = {
    "p": "MPa",
    "T": "K",
    "rho": "kg/m**3",
    "v": "m**3/kg",
    "u": "kJ/kg",
    "h": "kJ/kg",
    "s": "kJ/(kg*K)",
    "x": "dimensionless",
}

# Matching SI units
SI_UNITS: dict[str, str] = {
    "p": "Pa",
    "T": "K",
    "rho": "kg/m**3",
    "v": "m**3/kg",
    "u": "J/kg",
    "h": "J/kg",
    "s": "J/(kg*K)",
    "x": "dimensionless",
}


def get_unit_registry() -> pint.UnitRegistry:
    """Return the shared pint UnitRegistry instance."""
    return _ureg


@lru_cache(maxsize=64)
def _factor(from_unit: str, to_unit: str) -> float:
    return Q_(1.0, from_unit).to(to_unit).magnitude


def to_si(prop: str, value: float) -> float:
    """Convert an IF97-unit value of property *prop* to SI.

    Args:
        prop: Property name ("p", "h", "s", ...).
        value: Value in IF97 units.

    Returns:
        Value in SI units.
    """
    return value * _factor(IF97_UNITS[prop], SI_UNITS[prop])


def from_si(prop: str, value: float) -> float:
    """Convert an SI value of property *prop* to IF97 units."""
    return value * _factor(SI_UNITS[prop], IF97_UNITS[prop])


def unit_of(prop: str) -> str:
    """Return the display unit of an IF97 property, e.g. ``"kJ/kg"``."""
    return f"{_ureg.Unit(IF97_UNITS[prop]):~P}"
