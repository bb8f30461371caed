"""State point files for hydrostate.

A state point file stores named input pairs (not computed properties), so
loading it rebuilds every State through its factory and re-validates it.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from hydrostate.core.regions import InputPair
from hydrostate.core.state import State

logger = logging.getLogger(__name__)


# --- Project metadata ---


@dataclass
class ProjectMeta:
    """Top-level file metadata."""

    name: str = "Untitled"
    description: str = ""
    author: str = ""
    version: str = "0.1.0"
    created: str = ""
    modified: str = ""

    def touch(self) -> None:
        """Update the modified timestamp."""
        now = datetime.now(timezone.utc).isoformat()
        if not self.created:
            self.created = now
        self.modified = now


@dataclass
class StatePoint:
    """A labelled input pair, e.g. ``StatePoint("turbine inlet", "PT", 3.0, 700.0)``."""

    label: str
    kind: str
    a: float
    b: float

    def input_pair(self) -> InputPair:
        return InputPair.from_name(self.kind)

    def build(self) -> State:
        """Construct the State this point describes."""
        return State.from_pair(self.input_pair(), self.a, self.b)


@dataclass
class StatePointSet:
    """Collection of state points persisted together."""

    meta: ProjectMeta = field(default_factory=ProjectMeta)
    points: list[StatePoint] = field(default_factory=list)

    def add(self, label: str, kind: InputPair | str, a: float, b: float) -> StatePoint:
        """Append a point; *kind* is validated immediately."""
        name = kind.name if isinstance(kind, InputPair) else InputPair.from_name(kind).name
        point = StatePoint(label=label, kind=name, a=float(a), b=float(b))
        self.points.append(point)
        return point

    def states(self) -> dict[str, State]:
        """Build every point, keyed by label."""
        return {point.label: point.build() for point in self.points}


# --- JSON serialization ---


def save_state_points(point_set: StatePointSet, path: str | Path) -> None:
    """Save a state point set to a JSON file."""
    path = Path(path)
    point_set.meta.touch()

    with open(path, "w") as f:
        json.dump(asdict(point_set), f, indent=2)

    logger.info("Saved %d state points to %s", len(point_set.points), path)


def load_state_points(path: str | Path) -> StatePointSet:
    """Load a state point set from a JSON file.

    Raises:
        KeyError: If a point names an unknown input pair.
    """
    path = Path(path)
    with open(path) as f:
        data: dict[str, Any] = json.load(f)

    meta = ProjectMeta(**data.get("meta", {}))
    point_set = StatePointSet(meta=meta)
    for entry in data.get("points", []):
        point_set.add(entry["label"], entry["kind"], entry["a"], entry["b"])

    logger.info("Loaded %d state points from %s", len(point_set.points), path)
    return point_set
