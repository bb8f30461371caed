"""Immutable water/steam state built from one of seven input pairs.

A State stores its region and two canonical coordinates:

    R1, R2, R5   (p, T)
    R3           (rho, T)
    R4           (T, x)

Every other property is evaluated on demand by the property dispatcher and
is never cached.  States are created through the ``from_*`` factories::

    State.from_pT(3.0, 300.0).h       # 115.331273 kJ/kg
    State.from_ph(20.0, 1700.0).T     # 629.3083892 K (region 3)
    State.from_Tx(300.0, 1.0).p       # 3.53658941e-3 MPa
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from hydrostate.core import dispatch
from hydrostate.core import equations as eq
from hydrostate.core.errors import OutOfRangeError, UnsupportedError
from hydrostate.core.regions import InputPair, Region
from hydrostate.core.resolver import resolve

logger = logging.getLogger(__name__)

Func = Callable[[float, float], float]

# Backward equations per region: (v(p, y) or None, T(p, y)) for y = h or s
_BACKWARD_PH: dict[Region, tuple[Func | None, Func]] = {
    Region.R1: (None, eq.region1_T_ph),
    Region.R2: (None, eq.region2_T_ph),
    Region.R3: (eq.region3_v_ph, eq.region3_T_ph),
}
_BACKWARD_PS: dict[Region, tuple[Func | None, Func]] = {
    Region.R1: (None, eq.region1_T_ps),
    Region.R2: (None, eq.region2_T_ps),
    Region.R3: (eq.region3_v_ps, eq.region3_T_ps),
}

# Auxiliary pressure of the h,s pipeline for single-phase regions
_PRESSURE_HS: dict[Region, Func] = {
    Region.R1: eq.region1_p_hs,
    Region.R2: eq.region2_p_hs,
    Region.R3: eq.region3_p_hs,
}


def _require_region(kind: InputPair, a: float, b: float) -> Region:
    """Resolve (a, b) and raise OutOfRangeError if no region covers it."""
    region = resolve(kind, a, b)
    if region == Region.OUT_OF_RANGE:
        name_a, name_b = kind.arguments
        raise OutOfRangeError(f"State out of range for {name_a}={a}, {name_b}={b}")
    return region


@dataclass(frozen=True)
class State:
    """Thermodynamic state of water or steam.

    Use the ``from_*`` factories.  The constructor is internal: it stores an
    already-resolved region and its native coordinate pair, checking only
    that the coordinates are finite and positive (and, in region 4, that
    (T, x) lies on the saturation dome).

    Attributes:
        region: IF97 region of the state.
        coordinates: The region's native coordinate pair
            (see ``Region.native_coordinates``).
    """

    region: Region
    coordinates: tuple[float, float]

    def __post_init__(self) -> None:
        if self.region == Region.OUT_OF_RANGE:
            raise OutOfRangeError("A State cannot be constructed out of range")
        a, b = self.coordinates
        if self.region == Region.R4:
            valid = resolve(InputPair.TX, a, b) == Region.R4
        else:
            valid = math.isfinite(a) and math.isfinite(b) and a > 0 and b > 0
        if not valid:
            name_a, name_b = self.region.native_coordinates
            raise OutOfRangeError(
                f"Invalid coordinates for region {self.region.name}: {name_a}={a}, {name_b}={b}"
            )

    # --- Factories ---

    @classmethod
    def from_pT(cls, p: float, T: float) -> State:
        """State from pressure [MPa] and temperature [K].

        Only regions 1, 2 and 5 are served; region-3 pairs raise
        UnsupportedError since that region is native in density.
        """
        region = _require_region(InputPair.PT, p, T)
        if region not in (Region.R1, Region.R2, Region.R5):
            raise UnsupportedError(
                f"(p, T) construction is not supported in region {region.name} "
                f"(p={p}, T={T}); use from_rhoT"
            )
        return cls(region, (p, T))

    @classmethod
    def from_Tx(cls, T: float, x: float) -> State:
        """Two-phase state from temperature [K] and vapour quality [-]."""
        _require_region(InputPair.TX, T, x)
        return cls(Region.R4, (T, x))

    @classmethod
    def from_px(cls, p: float, x: float) -> State:
        """Two-phase state from pressure [MPa] and vapour quality [-]."""
        _require_region(InputPair.PX, p, x)
        return cls(Region.R4, (eq.T_sat(p), x))

    @classmethod
    def _from_p_property(
        cls,
        kind: InputPair,
        p: float,
        value: float,
        backward: dict[Region, tuple[Func | None, Func]],
        quality: Func,
    ) -> State:
        region = _require_region(kind, p, value)

        if region == Region.R4:
            T = eq.T_sat(p)
            return cls.from_Tx(T, quality(T, value))
        if region not in backward:
            raise UnsupportedError(
                f"No backward equation for {kind} in region {region.name} "
                f"(p={p}, {kind.arguments[1]}={value})"
            )

        v_func, T_func = backward[region]
        T = T_func(p, value)
        if v_func is not None:
            return cls(region, (1.0 / v_func(p, value), T))
        return cls(region, (p, T))

    @classmethod
    def from_ph(cls, p: float, h: float) -> State:
        """State from pressure [MPa] and specific enthalpy [kJ/kg].

        Region 4 becomes (T_sat(p), x); regions 1 and 2 use the backward
        T(p, h) equations; region 3 uses v(p, h) and T(p, h).
        """
        return cls._from_p_property(InputPair.PH, p, h, _BACKWARD_PH, eq.region4_x_Th)

    @classmethod
    def from_ps(cls, p: float, s: float) -> State:
        """State from pressure [MPa] and specific entropy [kJ/(kg·K)]."""
        return cls._from_p_property(InputPair.PS, p, s, _BACKWARD_PS, eq.region4_x_Ts)

    @classmethod
    def from_hs(cls, h: float, s: float) -> State:
        """State from specific enthalpy [kJ/kg] and entropy [kJ/(kg·K)].

        Two stages: ``hs_auxiliary`` turns (h, s) into a pressure (regions
        1-3) or a saturation temperature (region 4); the state is then built
        by ``from_ps`` or ``from_Tx``.  The chained backward equations agree
        less closely with the inputs than single-hop paths, by orders of
        magnitude in region 3.
        """
        region, auxiliary = hs_auxiliary(h, s)
        if region == Region.R4:
            return cls.from_Tx(auxiliary, eq.region4_x_Th(auxiliary, h))
        return cls.from_ps(auxiliary, s)

    @classmethod
    def from_rhoT(cls, rho: float, T: float) -> State:
        """Region-3 state from density [kg/m³] and temperature [K].

        Raises:
            UnsupportedError: If (rho, T) does not lie in region 3.
        """
        if resolve(InputPair.RHOT, rho, T) != Region.R3:
            raise UnsupportedError(f"(rho, T) construction only serves region 3 (rho={rho}, T={T})")
        return cls(Region.R3, (rho, T))

    @classmethod
    def from_pair(cls, kind: InputPair, a: float, b: float) -> State:
        """Build a State from any supported input pair."""
        return getattr(cls, _FACTORIES[kind])(a, b)

    # --- Properties ---

    def get(self, prop: str) -> float:
        """Property by name: one of p, T, x, rho, v, u, h, s."""
        return dispatch.get(self, prop)

    @property
    def p(self) -> float:
        """Pressure [MPa]."""
        return dispatch.get(self, "p")

    @property
    def T(self) -> float:
        """Temperature [K]."""
        return dispatch.get(self, "T")

    @property
    def x(self) -> float:
        """Vapour quality [-]; 0 in region 1, 1 in regions 2 and 5."""
        return dispatch.get(self, "x")

    @property
    def rho(self) -> float:
        """Density [kg/m³]."""
        return dispatch.get(self, "rho")

    @property
    def v(self) -> float:
        """Specific volume [m³/kg]."""
        return dispatch.get(self, "v")

    @property
    def u(self) -> float:
        """Specific internal energy [kJ/kg]."""
        return dispatch.get(self, "u")

    @property
    def h(self) -> float:
        """Specific enthalpy [kJ/kg]."""
        return dispatch.get(self, "h")

    @property
    def s(self) -> float:
        """Specific entropy [kJ/(kg·K)]."""
        return dispatch.get(self, "s")

    def as_dict(self) -> dict[str, float]:
        """All properties defined for this state (quality left out in region 3)."""
        result = {}
        for prop in dispatch.PROPERTIES:
            if prop == "x" and self.region == Region.R3:
                continue
            result[prop] = dispatch.get(self, prop)
        return result

    def __repr__(self) -> str:
        name_a, name_b = self.region.native_coordinates
        a, b = self.coordinates
        return f"State({self.region.name}, {name_a}={a!r}, {name_b}={b!r})"


def hs_auxiliary(h: float, s: float) -> tuple[Region, float]:
    """First stage of (h, s) construction.

    Returns:
        ``(region, pressure)`` for regions 1-3, or ``(Region.R4, T_sat)``.

    Raises:
        OutOfRangeError: If (h, s) lies outside regions 1-4.
    """
    region = _require_region(InputPair.HS, h, s)
    if region == Region.R4:
        T = eq.region4_T_hs(h, s)
        logger.debug("h,s pair (%g, %g) reduced to T_sat=%g", h, s, T)
        return region, T
    p = _PRESSURE_HS[region](h, s)
    logger.debug("h,s pair (%g, %g) in %s reduced to p=%g", h, s, region.name, p)
    return region, p


_FACTORIES: dict[InputPair, str] = {
    InputPair.PT: "from_pT",
    InputPair.TX: "from_Tx",
    InputPair.PX: "from_px",
    InputPair.PH: "from_ph",
    InputPair.PS: "from_ps",
    InputPair.HS: "from_hs",
    InputPair.RHOT: "from_rhoT",
}
