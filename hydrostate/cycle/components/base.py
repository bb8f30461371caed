"""Base class for cycle components.

Every component takes an inlet State and produces an outlet State, along
with its shaft power.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from hydrostate.core.state import State


class CycleComponent(ABC):
    """Abstract base class for a cycle component."""

    name: str = ""
    component_type: str = ""

    @abstractmethod
    def compute(self, inlet: State, **kwargs: Any) -> State:
        """Run the component model.

        Args:
            inlet: Inlet state.
            **kwargs: Component-specific parameters.

        Returns:
            Outlet state.
        """
        ...

    @abstractmethod
    def power(self) -> float:
        """Net power [kW] consumed (positive) or produced (negative)."""
        ...

    def summary(self) -> dict[str, Any]:
        """Return a summary dictionary of the component state."""
        return {
            "name": self.name,
            "type": self.component_type,
            "power_kW": self.power(),
        }
