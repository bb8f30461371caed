"""Cycle component models built on the expansion model."""

from hydrostate.cycle.components.base import CycleComponent
from hydrostate.cycle.components.turbine import Turbine
from hydrostate.cycle.components.valve import Valve

__all__ = ["CycleComponent", "Turbine", "Valve"]
