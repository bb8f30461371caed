"""Utility modules for hydrostate."""

from hydrostate.utils.constants import P_CRITICAL, R_WATER, T_CRITICAL
from hydrostate.utils.units import get_unit_registry, to_si

__all__ = ["P_CRITICAL", "R_WATER", "T_CRITICAL", "get_unit_registry", "to_si"]
