"""Expansion of a state to a lower pressure.

The isentropic end state keeps the source entropy; a real expansion with
isentropic efficiency η realises only the fraction η of the ideal enthalpy
drop:

    h_out = h_in - η · (h_in - h_out,s)
"""

from __future__ import annotations

import logging

from hydrostate.core.errors import UnsupportedError
from hydrostate.core.regions import Region
from hydrostate.core.state import State

logger = logging.getLogger(__name__)


def expand(state: State, p_out: float, efficiency: float | None = None) -> State:
    """Expand *state* to pressure *p_out*.

    Args:
        state: Source state.
        p_out: Outlet pressure [MPa].
        efficiency: Isentropic efficiency.  ``None`` gives the isentropic
            end state; other values interpolate (or extrapolate, outside
            [0, 1]) the enthalpy drop.  0 is isenthalpic throttling.

    Returns:
        The outlet state.

    Raises:
        UnsupportedError: If the source state is in region 5.
        OutOfRangeError: If the outlet state lies outside the formulation.
    """
    if state.region == Region.R5:
        raise UnsupportedError("Expansion from region 5 is not supported")

    h_in = state.h
    ideal = State.from_ps(p_out, state.s)
    if efficiency is None:
        logger.debug("Isentropic expansion %r -> %r", state, ideal)
        return ideal

    h_out = h_in - efficiency * (h_in - ideal.h)
    outlet = State.from_ph(p_out, h_out)
    logger.debug("Expansion with efficiency %g: %r -> %r", efficiency, state, outlet)
    return outlet
