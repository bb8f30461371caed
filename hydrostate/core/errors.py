"""Exception types raised by hydrostate."""


class SteamPropertyError(Exception):
    """Base class for property calculation failures."""


class OutOfRangeError(SteamPropertyError):
    """Raised when a coordinate pair lies outside every region for its input kind."""


class UnsupportedError(SteamPropertyError):
    """Raised when a physically valid request is not implemented.

    Examples are quality in region 3, region-3 states requested by (p, T) and
    expansions starting in region 5.
    """
