"""IAPWS-95 reference comparison through CoolProp.

IF97 is an industrial fit to the scientific IAPWS-95 formulation.  This
module evaluates IAPWS-95 (CoolProp's HEOS backend for water) at the
pressure and temperature of a State and reports the deviations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import CoolProp.CoolProp as CP

from hydrostate.core.errors import SteamPropertyError
from hydrostate.core.regions import Region
from hydrostate.core.state import State
from hydrostate.utils.units import from_si, to_si

logger = logging.getLogger(__name__)

# Properties compared, with the AbstractState accessor returning them in SI
_ACCESSORS = {
    "rho": "rhomass",
    "u": "umass",
    "h": "hmass",
    "s": "smass",
}


@dataclass
class Deviation:
    """IF97 value against the reference value of one property."""

    prop: str
    if97: float
    reference: float

    @property
    def absolute(self) -> float:
        return self.if97 - self.reference

    @property
    def relative(self) -> float:
        if self.reference == 0.0:
            return float("nan")
        return self.absolute / abs(self.reference)


class ReferenceFluid:
    """IAPWS-95 water through CoolProp's low-level AbstractState.

    Args:
        backend: CoolProp backend string.  ``"HEOS"`` for built-in,
                 ``"REFPROP"`` if RefProp is installed.
    """

    def __init__(self, backend: str = "HEOS"):
        self.backend = backend
        try:
            self._state = CP.AbstractState(backend, "Water")
        except Exception as exc:
            raise SteamPropertyError(
                f"Cannot create reference water with backend '{backend}': {exc}"
            ) from exc

    def props_at_pT(self, p: float, T: float) -> dict[str, float]:
        """Reference properties at p [MPa], T [K], in IF97 units."""
        try:
            self._state.update(CP.PT_INPUTS, to_si("p", p), T)
        except Exception as exc:
            raise SteamPropertyError(f"Reference state update failed at p={p}, T={T}: {exc}") from exc
        return {
            prop: from_si(prop, getattr(self._state, accessor)())
            for prop, accessor in _ACCESSORS.items()
        }

    def compare(self, state: State) -> list[Deviation]:
        """Compare a single-phase State against IAPWS-95 at its (p, T).

        Raises:
            SteamPropertyError: For two-phase states, where (p, T) does not
                fix the state, or if the backend fails.
        """
        if state.region == Region.R4:
            raise SteamPropertyError("Two-phase states cannot be compared at fixed (p, T)")
        p, T = state.p, state.T
        reference = self.props_at_pT(p, T)
        logger.debug("Reference properties at p=%g, T=%g: %s", p, T, reference)
        return [Deviation(prop, state.get(prop), value) for prop, value in reference.items()]

    def __repr__(self) -> str:
        return f"ReferenceFluid(backend='{self.backend}')"
