"""hydrostate — water and steam properties after IAPWS-IF97.

Typical use::

    from hydrostate import State

    state = State.from_ph(20.0, 1700.0)
    state.region, state.T, state.v
"""

__app_name__ = "hydrostate"
__version__ = "0.3.0"

from hydrostate.core.errors import OutOfRangeError, SteamPropertyError, UnsupportedError  # noqa: E402
from hydrostate.core.regions import InputPair, Region  # noqa: E402
from hydrostate.core.state import State  # noqa: E402
from hydrostate.cycle.expansion import expand  # noqa: E402

__all__ = [
    "InputPair",
    "OutOfRangeError",
    "Region",
    "State",
    "SteamPropertyError",
    "UnsupportedError",
    "expand",
]
