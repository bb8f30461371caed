"""Throttle valve component.

Models an isenthalpic pressure drop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hydrostate.core.state import State
from hydrostate.cycle.components.base import CycleComponent
from hydrostate.cycle.expansion import expand


@dataclass
class ValveResult:
    """Valve analysis result."""

    inlet: State
    outlet: State
    pressure_drop: float = 0.0  # MPa


class Valve(CycleComponent):
    """Throttle valve with a fixed pressure drop.

    Args:
        name: Component name.
        dp: Pressure drop [MPa].
    """

    component_type = "valve"

    def __init__(self, name: str = "valve", dp: float = 0.1):
        self.name = name
        self._dp = dp
        self._result: ValveResult | None = None

    def compute(self, inlet: State, **kwargs: Any) -> State:
        """Compute valve outlet state (isenthalpic throttling).

        Args:
            inlet: Inlet state.

        Returns:
            Outlet state at the reduced pressure and the inlet enthalpy.
        """
        outlet = expand(inlet, inlet.p - self._dp, efficiency=0.0)
        self._result = ValveResult(inlet=inlet, outlet=outlet, pressure_drop=self._dp)
        return outlet

    def power(self) -> float:
        """Valves consume no shaft power."""
        return 0.0

    def summary(self) -> dict[str, Any]:
        d = super().summary()
        if self._result:
            d["pressure_drop_MPa"] = self._result.pressure_drop
            d["outlet_temperature_K"] = self._result.outlet.T
        return d
