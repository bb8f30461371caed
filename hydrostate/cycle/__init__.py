"""Expansion processes and cycle components for hydrostate.

Provides the expansion model (isentropic and efficiency-corrected) and the
turbine and throttle-valve components built on it.
"""

from hydrostate.cycle.expansion import expand

__all__ = ["expand"]
