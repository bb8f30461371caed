"""Region tags and input-pair kinds."""

from __future__ import annotations

from enum import Enum


class Region(Enum):
    """IAPWS-IF97 region tag."""

    OUT_OF_RANGE = 0
    R1 = 1
    R2 = 2
    R3 = 3
    R4 = 4
    R5 = 5

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def native_coordinates(self) -> tuple[str, str]:
        """Names of the two coordinates a State stores in this region."""
        return _NATIVE[self]


_DESCRIPTIONS = {
    Region.OUT_OF_RANGE: "out of range",
    Region.R1: "compressed liquid",
    Region.R2: "superheated vapour",
    Region.R3: "near-critical",
    Region.R4: "two-phase saturation",
    Region.R5: "high-temperature vapour",
}

_NATIVE = {
    Region.OUT_OF_RANGE: ("", ""),
    Region.R1: ("p", "T"),
    Region.R2: ("p", "T"),
    Region.R3: ("rho", "T"),
    Region.R4: ("T", "x"),
    Region.R5: ("p", "T"),
}


class InputPair(Enum):
    """Kind of the property pair a State is built from."""

    PT = ("p", "T")
    TX = ("T", "x")
    PX = ("p", "x")
    PH = ("p", "h")
    PS = ("p", "s")
    HS = ("h", "s")
    RHOT = ("rho", "T")

    @property
    def arguments(self) -> tuple[str, str]:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> InputPair:
        """Look up a pair by name, case-insensitively (``"pT"``, ``"rhoT"``, ...).

        Raises:
            KeyError: If *name* is not a known pair.
        """
        key = name.upper()
        if key in cls.__members__:
            return cls[key]
        raise KeyError(f"Unknown input pair '{name}'. Available: {[m.name for m in cls]}")

    def __str__(self) -> str:
        return "".join(self.value)
