"""Steam turbine component.

Expands steam through a pressure ratio with an isentropic efficiency.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hydrostate.core.state import State
from hydrostate.cycle.components.base import CycleComponent
from hydrostate.cycle.expansion import expand


@dataclass
class TurbineResult:
    """Turbine analysis result."""

    inlet: State
    outlet: State
    outlet_isentropic: State
    pressure_ratio: float = 0.0  # p_in / p_out
    specific_work: float = 0.0  # kJ/kg (positive = produced)
    shaft_power: float = 0.0  # kW (positive = produced)
    efficiency: float = 0.0


class Turbine(CycleComponent):
    """Steam turbine with isentropic efficiency.

        h_out = h_in - η · (h_in - h_out,s)
        W = ṁ · (h_in - h_out)

    Args:
        name: Component name.
        efficiency: Isentropic efficiency (0–1).
    """

    component_type = "turbine"

    def __init__(self, name: str = "turbine", efficiency: float = 0.85):
        self.name = name
        self._efficiency = efficiency
        self._result: TurbineResult | None = None

    def compute(
        self,
        inlet: State,
        outlet_pressure: float = 0.0,
        mass_flow: float = 1.0,
        **kwargs: Any,
    ) -> State:
        """Compute turbine outlet state.

        Args:
            inlet: Inlet steam state.
            outlet_pressure: Exhaust pressure [MPa].
            mass_flow: Steam mass flow [kg/s].

        Returns:
            Outlet state.
        """
        ideal = expand(inlet, outlet_pressure)
        h_in = inlet.h
        h_out = h_in - self._efficiency * (h_in - ideal.h)
        outlet = State.from_ph(outlet_pressure, h_out)
        w = h_in - h_out

        self._result = TurbineResult(
            inlet=inlet,
            outlet=outlet,
            outlet_isentropic=ideal,
            pressure_ratio=inlet.p / outlet_pressure,
            specific_work=w,
            shaft_power=w * mass_flow,
            efficiency=self._efficiency,
        )
        return outlet

    @property
    def result(self) -> TurbineResult | None:
        return self._result

    def power(self) -> float:
        """Shaft power [kW] (negative convention: produced)."""
        return -(self._result.shaft_power) if self._result else 0.0

    def summary(self) -> dict[str, Any]:
        d = super().summary()
        if self._result:
            d["pressure_ratio"] = self._result.pressure_ratio
            d["efficiency"] = self._result.efficiency
            d["specific_work_kJ_kg"] = self._result.specific_work
            d["outlet_quality"] = self._result.outlet.x
        return d
