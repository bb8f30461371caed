"""Region resolution for every supported input pair.

``resolve(kind, a, b)`` classifies a coordinate pair into exactly one IF97
region or ``Region.OUT_OF_RANGE``.  Resolution never raises for numeric
input; turning OUT_OF_RANGE into an error is the caller's job.

Boundaries used, by pair:

- (p, T): saturation curve, B13 isotherm (623.15 K), B23 curve, the
  1073.15 K isotherm (2/5) and the absolute limits.
- (p, h) and (p, s): the same boundaries mapped onto the enthalpy or
  entropy axis at fixed pressure.
- (h, s): saturation line, triple-line chord, B13 curve h13(s) and the B23
  zone test of IAPWS SR4.
- (rho, T): region-3 envelope only.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from hydrostate.core import equations as eq
from hydrostate.core.errors import OutOfRangeError
from hydrostate.core.regions import InputPair, Region
from hydrostate.utils.constants import (
    H_B23_MAX,
    H_B23_MIN,
    P_CRITICAL,
    P_MAX,
    P_MAX_R5,
    P_MIN,
    S_13,
    S_B23_MAX,
    S_B23_MIN,
    S_LIQUID_623,
    S_LIQUID_TRIPLE,
    S_VAPOUR_TRIPLE,
    T_13,
    T_B23_MAX,
    T_CRITICAL,
    T_MAX,
    T_MAX_R5,
    T_MIN,
)

logger = logging.getLogger(__name__)

# Saturation pressure at the upper end of the region-1/2 saturation boundary
P_SAT_623 = eq.p_sat(T_13)  # MPa — saturation pressure at the B13 isotherm

# End points of the triple line in the h-s plane (lower limit of region 4)
_TRIPLE_LIQUID = (eq.region1_h(P_MIN, T_MIN), eq.region1_s(P_MIN, T_MIN))
_TRIPLE_VAPOUR = (eq.region2_h(P_MIN, T_MIN), eq.region2_s(P_MIN, T_MIN))


def _finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


# --- (p, T) ---


def region_pT(p: float, T: float) -> Region:
    """Region of a pressure-temperature pair."""
    if not _finite(p, T) or p <= 0:
        return Region.OUT_OF_RANGE

    if T_MAX < T <= T_MAX_R5:
        return Region.R5 if p <= P_MAX_R5 else Region.OUT_OF_RANGE
    if not T_MIN <= T <= T_MAX:
        return Region.OUT_OF_RANGE

    if p < P_MIN:
        # Below the triple-point pressure only vapour exists
        return Region.R2
    if p <= P_SAT_623:
        return Region.R1 if T <= eq.T_sat(p) else Region.R2
    if p <= P_MAX:
        if T <= T_13:
            return Region.R1
        if T < eq.T_b23(p):
            return Region.R3
        return Region.R2
    return Region.OUT_OF_RANGE


# --- (T, x) and (p, x) ---


def region_Tx(T: float, x: float) -> Region:
    """Region of a temperature-quality pair: region 4 or out of range."""
    if not _finite(T, x):
        return Region.OUT_OF_RANGE
    if T_MIN <= T <= T_CRITICAL and 0.0 <= x <= 1.0:
        return Region.R4
    return Region.OUT_OF_RANGE


def region_px(p: float, x: float) -> Region:
    """Region of a pressure-quality pair: region 4 or out of range."""
    if not _finite(p, x):
        return Region.OUT_OF_RANGE
    if P_MIN <= p <= P_CRITICAL and 0.0 <= x <= 1.0:
        return Region.R4
    return Region.OUT_OF_RANGE


# --- (p, h) and (p, s) ---


def _region_p_property(
    p: float,
    value: float,
    region1: Callable[[float, float], float],
    region2: Callable[[float, float], float],
    region5: Callable[[float, float], float],
    attr: str,
) -> Region:
    """Partition the *attr* axis (``"h"`` or ``"s"``) at fixed pressure.

    *region1*, *region2* and *region5* evaluate the property from (p, T) in
    the respective region.
    """
    if not _finite(p, value) or not 0 < p <= P_MAX:
        return Region.OUT_OF_RANGE

    if p < P_MIN:
        lower = region2(p, T_MIN)
    else:
        lower = region1(p, T_MIN)
    if value < lower:
        return Region.OUT_OF_RANGE

    upper_2 = region2(p, T_MAX)
    if value > upper_2:
        if p <= P_MAX_R5 and value <= region5(p, T_MAX_R5):
            return Region.R5
        return Region.OUT_OF_RANGE

    if p < P_MIN:
        return Region.R2

    if p < P_CRITICAL:
        T_s = eq.T_sat(p)
        liquid = getattr(eq.saturated_liquid(T_s), attr)
        vapour = getattr(eq.saturated_vapour(T_s), attr)
    else:
        liquid = vapour = None

    if p <= P_SAT_623:
        if value <= liquid:
            return Region.R1
        if value < vapour:
            return Region.R4
        return Region.R2

    if value <= region1(p, T_13):
        return Region.R1
    if value >= region2(p, eq.T_b23(p)):
        return Region.R2
    if liquid is not None and liquid < value < vapour:
        return Region.R4
    return Region.R3


def region_ph(p: float, h: float) -> Region:
    """Region of a pressure-enthalpy pair."""
    return _region_p_property(p, h, eq.region1_h, eq.region2_h, eq.region5_h, "h")


def region_ps(p: float, s: float) -> Region:
    """Region of a pressure-entropy pair."""
    return _region_p_property(p, s, eq.region1_s, eq.region2_s, eq.region5_s, "s")


# --- (h, s) ---


def _triple_line_h(s: float) -> float:
    (h_l, s_l), (h_v, s_v) = _TRIPLE_LIQUID, _TRIPLE_VAPOUR
    return h_l + (s - s_l) / (s_v - s_l) * (h_v - h_l)


def _single_phase_hs(h: float, s: float) -> Region:
    """Single-phase region of a point on or above the saturation line."""
    if s <= S_13:
        return Region.R1
    if s <= S_LIQUID_623:
        return Region.R1 if h < eq.h_b13_s(s) else Region.R3
    if s < S_B23_MIN:
        return Region.R3
    if s <= S_B23_MAX:
        if h < H_B23_MIN:
            return Region.R3
        if h > H_B23_MAX:
            return Region.R2
        p_boundary = eq.p_b23(eq.T_b23_hs(h, s))
        return Region.R2 if eq.region2_p_hs(h, s) <= p_boundary else Region.R3
    return Region.R2


_HS_PRESSURE = {
    Region.R1: eq.region1_p_hs,
    Region.R2: eq.region2_p_hs,
    Region.R3: eq.region3_p_hs,
}


def region_hs(h: float, s: float) -> Region:
    """Region of an enthalpy-entropy pair (regions 1-4 only)."""
    if not _finite(h, s):
        return Region.OUT_OF_RANGE

    if S_LIQUID_TRIPLE <= s <= S_VAPOUR_TRIPLE and h < eq.h_saturation_s(s):
        if h >= _triple_line_h(s):
            return Region.R4
        return Region.OUT_OF_RANGE

    try:
        region = _single_phase_hs(h, s)

        # Pressure limit everywhere, temperature limits of regions 1 and 2
        p = _HS_PRESSURE[region](h, s)
        if not _finite(p) or not 0 < p <= P_MAX:
            return Region.OUT_OF_RANGE
        if region == Region.R1:
            if eq.region1_T_ps(p, s) < T_MIN:
                return Region.OUT_OF_RANGE
        elif region == Region.R2:
            if not T_MIN <= eq.region2_T_ps(p, s) <= T_MAX:
                return Region.OUT_OF_RANGE
    except OutOfRangeError:
        return Region.OUT_OF_RANGE
    return region


# --- (rho, T) ---


def region_rhoT(rho: float, T: float) -> Region:
    """Region 3 if (rho, T) lies inside its envelope, otherwise out of range."""
    if not _finite(rho, T) or rho <= 0 or not T_13 <= T <= T_B23_MAX:
        return Region.OUT_OF_RANGE
    if T < T_CRITICAL:
        rho_vapour = 1.0 / eq.saturated_vapour(T).v
        rho_liquid = 1.0 / eq.saturated_liquid(T).v
        if rho_vapour < rho < rho_liquid:
            return Region.OUT_OF_RANGE
    p = eq.region3_p(rho, T)
    if eq.p_b23(T) <= p <= P_MAX:
        return Region.R3
    return Region.OUT_OF_RANGE


_RESOLVERS: dict[InputPair, Callable[[float, float], Region]] = {
    InputPair.PT: region_pT,
    InputPair.TX: region_Tx,
    InputPair.PX: region_px,
    InputPair.PH: region_ph,
    InputPair.PS: region_ps,
    InputPair.HS: region_hs,
    InputPair.RHOT: region_rhoT,
}


def resolve(kind: InputPair, a: float, b: float) -> Region:
    """Classify the pair (a, b) of input kind *kind* into an IF97 region.

    Args:
        kind: Input-pair kind, fixing the meaning of *a* and *b*.
        a: First coordinate (e.g. pressure for ``InputPair.PT``).
        b: Second coordinate.

    Returns:
        The region tag, or ``Region.OUT_OF_RANGE``.
    """
    try:
        region = _RESOLVERS[kind](a, b)
    except OutOfRangeError as exc:
        logger.debug("Boundary evaluation failed for %s pair (%g, %g): %s", kind, a, b, exc)
        region = Region.OUT_OF_RANGE
    logger.debug("Resolved %s pair (%g, %g) to %s", kind, a, b, region.name)
    return region
