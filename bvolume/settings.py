"""
Bounds settings — tunable thresholds of the fitting pipeline.

Settings are plain data and are passed explicitly to the fitting functions.
They can be stored in a JSON file (e.g. project_settings/bounds.json).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from bvolume import log


@dataclass(frozen=True)
class BoundsSettings:
    """
    Thresholds used by the eigen solver and the bounds selector.

    - eigen_epsilon: off-diagonal magnitude below which Jacobi iteration stops
    - eigen_max_sweeps: maximum number of Jacobi sweeps
    - flat_epsilon: smallest PCA extent below which special shapes are skipped
    - special_volume_ratio: a special shape must be smaller than ratio * best volume
    - special_volume_epsilon: ... and smaller by more than this absolute amount
    - line_segment_ratio: extent0 >= ratio * extent1 selects the line segment box test
    - aabb_volume_ratio: ratio * AABB volume <= box volume selects the AABB test
    """

    eigen_epsilon: float = 1.0e-10
    eigen_max_sweeps: int = 32
    flat_epsilon: float = 1.0e-5
    special_volume_ratio: float = 0.99
    special_volume_epsilon: float = 1.0e-4
    line_segment_ratio: float = 4.0
    aabb_volume_ratio: float = 0.99

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return asdict(self)

    @staticmethod
    def from_dict(data: dict) -> "BoundsSettings":
        """Deserialize from dictionary. Unknown keys are ignored, missing keys keep defaults."""
        known = {f.name for f in fields(BoundsSettings)}
        unknown = set(data) - known
        if unknown:
            log.warn(f"[BoundsSettings] Ignoring unknown keys: {sorted(unknown)}")
        values = {key: data[key] for key in data if key in known}
        settings = BoundsSettings(**values)
        settings.validate()
        return settings

    def validate(self) -> None:
        """Raise ValueError if thresholds are out of range."""
        if self.eigen_max_sweeps < 1:
            raise ValueError("eigen_max_sweeps must be at least 1")
        if self.eigen_epsilon <= 0.0:
            raise ValueError("eigen_epsilon must be positive")
        if self.flat_epsilon < 0.0 or self.special_volume_epsilon < 0.0:
            raise ValueError("epsilons must be non-negative")
        if not 0.0 < self.special_volume_ratio <= 1.0:
            raise ValueError("special_volume_ratio must be in (0, 1]")
        if not 0.0 < self.aabb_volume_ratio <= 1.0:
            raise ValueError("aabb_volume_ratio must be in (0, 1]")
        if self.line_segment_ratio < 1.0:
            raise ValueError("line_segment_ratio must be at least 1")

    @staticmethod
    def load(path: Path) -> "BoundsSettings":
        """
        Load settings from a JSON file.

        A missing file yields default settings; a malformed file raises.
        """
        path = Path(path)
        if not path.exists():
            log.debug(f"[BoundsSettings] {path} not found, using defaults")
            return BoundsSettings()

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        settings = BoundsSettings.from_dict(data)
        log.info(f"[BoundsSettings] Loaded from {path}")
        return settings

    def save(self, path: Path) -> None:
        """Save settings to a JSON file, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        log.info(f"[BoundsSettings] Saved to {path}")


DEFAULT_SETTINGS = BoundsSettings()
