"""Region equation set wrapping the IAPWS-IF97 routines of ``iapws``.

Every function here is a pure function of plain floats in IF97 units
(MPa, K, kg/m³, kJ/kg, kJ/(kg·K)).  The rest of hydrostate talks to the
formulation only through this module, so the forward/backward equations,
the saturation curve and the boundary curves are all named here:

- forward:   ``region{1,2,5}_{v,u,h,s}(p, T)``, ``region3_{p,u,h,s}(rho, T)``,
  ``region4_{v,u,h,s}(T, x)``
- backward:  ``region{1,2,3}_T_ph``, ``region{1,2,3}_T_ps``,
  ``region3_v_ph``, ``region3_v_ps``, ``region{1,2,3}_p_hs``,
  ``region4_T_hs``
- saturation: ``p_sat``, ``T_sat``, ``saturated_liquid``,
  ``saturated_vapour``, ``region4_x_Th``, ``region4_x_Ts``
- boundaries: ``p_b23``, ``T_b23``, ``h_b13_s``, ``T_b23_hs``,
  ``h_liquid_s``, ``h_vapour_s``

Internal energy is not returned by ``iapws``; it follows from u = h - p·v
(with the factor 1000 between MPa·m³/kg and kJ/kg).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps

from iapws.iapws97 import (
    _Backward1_P_hs,
    _Backward1_T_Ph,
    _Backward1_T_Ps,
    _Backward2a_T_Ph,
    _Backward2a_T_Ps,
    _Backward2_P_hs,
    _Backward2_T_Ph,
    _Backward2_T_Ps,
    _Backward3_P_hs,
    _Backward3_T_Ph,
    _Backward3_T_Ps,
    _Backward3_v_Ph,
    _Backward3_v_Ps,
    _Backward4_T_hs,
    _h1_s,
    _h2ab_s,
    _h2c3b_s,
    _h3a_s,
    _h13_s,
    _P23_T,
    _PSat_T,
    _Region1,
    _Region2,
    _Region3,
    _Region4,
    _Region5,
    _t_hs,
    _t_P,
    _TSat_P,
)
from scipy.optimize import brentq

from hydrostate.core.errors import OutOfRangeError
from hydrostate.utils.constants import (
    P_CRITICAL,
    P_MIN,
    S_CRITICAL,
    S_LIQUID_623,
    S_2BC,
    S_VAPOUR_623,
    T_13,
    T_CRITICAL,
    T_MIN,
)

# Upper bracket for the tie-line root search; the saturation routines
# degenerate at the critical point itself.
_T_TIE_LINE_MAX = T_CRITICAL - 1e-3


def _bounded(func: Callable[..., float]) -> Callable[..., float]:
    """Re-raise the out-of-bound NotImplementedError of iapws as OutOfRangeError."""

    @wraps(func)
    def wrapper(*args: float) -> float:
        try:
            return func(*args)
        except NotImplementedError as exc:
            raise OutOfRangeError(f"{func.__name__}{args} out of range: {exc}") from exc

    return wrapper


def _internal_energy(p: float, v: float, h: float) -> float:
    return h - 1e3 * p * v


# --- Region 1: compressed liquid, native (p, T) ---


def region1_v(p: float, T: float) -> float:
    return _Region1(T, p)["v"]


def region1_u(p: float, T: float) -> float:
    props = _Region1(T, p)
    return _internal_energy(p, props["v"], props["h"])


def region1_h(p: float, T: float) -> float:
    return _Region1(T, p)["h"]


def region1_s(p: float, T: float) -> float:
    return _Region1(T, p)["s"]


@_bounded
def region1_T_ph(p: float, h: float) -> float:
    return _Backward1_T_Ph(p, h)


@_bounded
def region1_T_ps(p: float, s: float) -> float:
    return _Backward1_T_Ps(p, s)


@_bounded
def region1_p_hs(h: float, s: float) -> float:
    return _Backward1_P_hs(h, s)


# --- Region 2: superheated vapour, native (p, T) ---


def region2_v(p: float, T: float) -> float:
    return _Region2(T, p)["v"]


def region2_u(p: float, T: float) -> float:
    props = _Region2(T, p)
    return _internal_energy(p, props["v"], props["h"])


def region2_h(p: float, T: float) -> float:
    return _Region2(T, p)["h"]


def region2_s(p: float, T: float) -> float:
    return _Region2(T, p)["s"]


@_bounded
def region2_T_ph(p: float, h: float) -> float:
    # Below the triple-point pressure there is no saturation temperature to clamp to
    if p < P_MIN:
        return _Backward2a_T_Ph(p, h)
    return _Backward2_T_Ph(p, h)


@_bounded
def region2_T_ps(p: float, s: float) -> float:
    if p < P_MIN:
        return _Backward2a_T_Ps(p, s)
    return _Backward2_T_Ps(p, s)


@_bounded
def region2_p_hs(h: float, s: float) -> float:
    return _Backward2_P_hs(h, s)


# --- Region 3: near-critical, native (rho, T) ---


def region3_p(rho: float, T: float) -> float:
    return _Region3(rho, T)["P"]


def region3_u(rho: float, T: float) -> float:
    props = _Region3(rho, T)
    return _internal_energy(props["P"], 1.0 / rho, props["h"])


def region3_h(rho: float, T: float) -> float:
    return _Region3(rho, T)["h"]


def region3_s(rho: float, T: float) -> float:
    return _Region3(rho, T)["s"]


@_bounded
def region3_T_ph(p: float, h: float) -> float:
    return _Backward3_T_Ph(p, h)


@_bounded
def region3_v_ph(p: float, h: float) -> float:
    return _Backward3_v_Ph(p, h)


@_bounded
def region3_T_ps(p: float, s: float) -> float:
    return _Backward3_T_Ps(p, s)


@_bounded
def region3_v_ps(p: float, s: float) -> float:
    return _Backward3_v_Ps(p, s)


@_bounded
def region3_p_hs(h: float, s: float) -> float:
    return _Backward3_P_hs(h, s)


# --- Region 5: high-temperature vapour, native (p, T) ---


def region5_v(p: float, T: float) -> float:
    return _Region5(T, p)["v"]


def region5_u(p: float, T: float) -> float:
    props = _Region5(T, p)
    return _internal_energy(p, props["v"], props["h"])


def region5_h(p: float, T: float) -> float:
    return _Region5(T, p)["h"]


def region5_s(p: float, T: float) -> float:
    return _Region5(T, p)["s"]


# --- Region 4: saturation, native (T, x) ---


@dataclass(frozen=True)
class SaturationPoint:
    """Properties of saturated liquid or vapour at one temperature."""

    T: float  # K
    p: float  # MPa
    v: float  # m³/kg
    h: float  # kJ/kg
    s: float  # kJ/(kg·K)


@_bounded
def p_sat(T: float) -> float:
    """Saturation pressure [MPa] at temperature T [K].

    Capped at the critical pressure, which the saturation equation overshoots
    by round-off at T_c.
    """
    return min(_PSat_T(T), P_CRITICAL)


@_bounded
def T_sat(p: float) -> float:
    """Saturation temperature [K] at pressure p [MPa], capped at T_c."""
    return min(_TSat_P(p), T_CRITICAL)


@_bounded
def _saturation_point(T: float, x: int) -> SaturationPoint:
    p = p_sat(T)
    if T <= T_13:
        props = _Region1(T, p) if x == 0 else _Region2(T, p)
    else:
        # Region-3 saturated densities above 623.15 K
        props = _Region4(p, x)
    return SaturationPoint(T=T, p=p, v=props["v"], h=props["h"], s=props["s"])


def saturated_liquid(T: float) -> SaturationPoint:
    """Saturated liquid (x = 0) at temperature T."""
    return _saturation_point(T, 0)


def saturated_vapour(T: float) -> SaturationPoint:
    """Saturated vapour (x = 1) at temperature T."""
    return _saturation_point(T, 1)


def _mix(T: float, x: float, attr: str) -> float:
    liquid = getattr(saturated_liquid(T), attr)
    vapour = getattr(saturated_vapour(T), attr)
    return liquid + x * (vapour - liquid)


def region4_p(T: float, x: float) -> float:
    return p_sat(T)


def region4_v(T: float, x: float) -> float:
    return _mix(T, x, "v")


def region4_u(T: float, x: float) -> float:
    return _internal_energy(p_sat(T), _mix(T, x, "v"), _mix(T, x, "h"))


def region4_h(T: float, x: float) -> float:
    return _mix(T, x, "h")


def region4_s(T: float, x: float) -> float:
    return _mix(T, x, "s")


def region4_x_Th(T: float, h: float) -> float:
    """Vapour quality from temperature and enthalpy on the saturation dome."""
    liquid = saturated_liquid(T)
    vapour = saturated_vapour(T)
    return (h - liquid.h) / (vapour.h - liquid.h)


def region4_x_Ts(T: float, s: float) -> float:
    """Vapour quality from temperature and entropy on the saturation dome."""
    liquid = saturated_liquid(T)
    vapour = saturated_vapour(T)
    return (s - liquid.s) / (vapour.s - liquid.s)


def _tie_line_residual(T: float, h: float, s: float) -> float:
    # Zero where enthalpy and entropy give the same vapour quality at T
    return region4_x_Th(T, h) - region4_x_Ts(T, s)


@_bounded
def region4_T_hs(h: float, s: float) -> float:
    """Saturation temperature of a two-phase point given by (h, s).

    Uses the IF97 backward equation where it is defined
    (s >= s''(623.15 K)); on the liquid side of the dome the temperature is
    the root of x(T, h) = x(T, s), the isotherm whose tie line holds both.

    Raises:
        OutOfRangeError: If no tie-line through (h, s) exists.
    """
    if s >= S_VAPOUR_623:
        return _Backward4_T_hs(h, s)
    try:
        return brentq(_tie_line_residual, T_MIN, _T_TIE_LINE_MAX, args=(h, s), xtol=1e-10)
    except ValueError as exc:
        raise OutOfRangeError(f"No saturation temperature for h={h}, s={s}: {exc}") from exc


# --- Boundary curves ---


@_bounded
def p_b23(T: float) -> float:
    """Pressure [MPa] on the region 2-3 boundary at temperature T."""
    return _P23_T(T)


@_bounded
def T_b23(p: float) -> float:
    """Temperature [K] on the region 2-3 boundary at pressure p."""
    return _t_P(p)


@_bounded
def T_b23_hs(h: float, s: float) -> float:
    """Temperature on the region 2-3 boundary within the B23 zone of the h-s plane."""
    return _t_hs(h, s)


@_bounded
def h_b13_s(s: float) -> float:
    """Enthalpy on the region 1-3 boundary, 3.397782955 <= s <= 3.778281340."""
    return _h13_s(s)


@_bounded
def h_liquid_s(s: float) -> float:
    """Saturated-liquid enthalpy as a function of entropy (s <= s_c)."""
    if s <= S_LIQUID_623:
        return _h1_s(s)
    return _h3a_s(s)


@_bounded
def h_vapour_s(s: float) -> float:
    """Saturated-vapour enthalpy as a function of entropy (s >= s_c)."""
    if s < S_2BC:
        return _h2c3b_s(s)
    return _h2ab_s(s)


def h_saturation_s(s: float) -> float:
    """Enthalpy of the saturation line at entropy s, either branch."""
    if s <= S_CRITICAL:
        return h_liquid_s(s)
    return h_vapour_s(s)
