"""Property dispatch over the region of a State.

Each region maps to a ``RegionFunctions`` record holding one function of the
State's two native coordinates per property.  The table is built once at
import and is read-only afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import TYPE_CHECKING

from hydrostate.core import equations as eq
from hydrostate.core.errors import OutOfRangeError, UnsupportedError
from hydrostate.core.regions import Region

if TYPE_CHECKING:
    from hydrostate.core.state import State

PropertyFunction = Callable[[float, float], float]

# Queryable property names, in display order
PROPERTIES: tuple[str, ...] = ("p", "T", "x", "rho", "v", "u", "h", "s")


@dataclass(frozen=True)
class RegionFunctions:
    """Property implementations of one region, each f(a, b) of the native pair."""

    p: PropertyFunction
    T: PropertyFunction
    x: PropertyFunction
    rho: PropertyFunction
    v: PropertyFunction
    u: PropertyFunction
    h: PropertyFunction
    s: PropertyFunction


def _first(a: float, b: float) -> float:
    return a


def _second(a: float, b: float) -> float:
    return b


def _liquid(a: float, b: float) -> float:
    return 0.0


def _vapour(a: float, b: float) -> float:
    return 1.0


def _no_quality(a: float, b: float) -> float:
    raise UnsupportedError("Vapour quality is not defined in region 3")


def _inverse(func: PropertyFunction) -> PropertyFunction:
    def inverse(a: float, b: float) -> float:
        return 1.0 / func(a, b)

    return inverse


def _inverse_first(a: float, b: float) -> float:
    return 1.0 / a


def _pT_region(
    quality: PropertyFunction,
    v: PropertyFunction,
    u: PropertyFunction,
    h: PropertyFunction,
    s: PropertyFunction,
) -> RegionFunctions:
    """Functions of a region whose native pair is (p, T)."""
    return RegionFunctions(
        p=_first, T=_second, x=quality, rho=_inverse(v), v=v, u=u, h=h, s=s
    )


_TABLE: Mapping[Region, RegionFunctions] = MappingProxyType(
    {
        Region.R1: _pT_region(_liquid, eq.region1_v, eq.region1_u, eq.region1_h, eq.region1_s),
        Region.R2: _pT_region(_vapour, eq.region2_v, eq.region2_u, eq.region2_h, eq.region2_s),
        Region.R3: RegionFunctions(
            p=eq.region3_p,
            T=_second,
            x=_no_quality,
            rho=_first,
            v=_inverse_first,
            u=eq.region3_u,
            h=eq.region3_h,
            s=eq.region3_s,
        ),
        Region.R4: RegionFunctions(
            p=eq.region4_p,
            T=_first,
            x=_second,
            rho=_inverse(eq.region4_v),
            v=eq.region4_v,
            u=eq.region4_u,
            h=eq.region4_h,
            s=eq.region4_s,
        ),
        Region.R5: _pT_region(_vapour, eq.region5_v, eq.region5_u, eq.region5_h, eq.region5_s),
    }
)

_missing = set(Region) - {Region.OUT_OF_RANGE} - set(_TABLE)
if _missing:
    raise RuntimeError(f"Property table has no entry for {sorted(r.name for r in _missing)}")
if tuple(f.name for f in fields(RegionFunctions)) != PROPERTIES:
    raise RuntimeError("RegionFunctions fields and PROPERTIES disagree")


def functions_for(region: Region) -> RegionFunctions:
    """Return the property functions of *region*.

    Raises:
        OutOfRangeError: If *region* is ``Region.OUT_OF_RANGE``.
    """
    try:
        return _TABLE[region]
    except KeyError:
        raise OutOfRangeError(f"No properties for a state in region {region.name}") from None


def get(state: State, prop: str) -> float:
    """Evaluate property *prop* of *state*.

    Args:
        state: A constructed State.
        prop: One of ``PROPERTIES``.

    Returns:
        The property value in IF97 units.

    Raises:
        OutOfRangeError: If the state carries no valid region.
        UnsupportedError: If *prop* is unknown or undefined in the region.
    """
    funcs = functions_for(state.region)
    if prop not in PROPERTIES:
        raise UnsupportedError(f"Unknown property '{prop}'. Available: {list(PROPERTIES)}")
    a, b = state.coordinates
    return getattr(funcs, prop)(a, b)
