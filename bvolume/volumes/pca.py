from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class PCAAxis:
    """
    Главная ось набора точек.

    direction: единичный вектор оси
    extent: полный размер набора точек вдоль оси (max - min проекций)
    """

    direction: np.ndarray
    extent: float

    def __post_init__(self):
        object.__setattr__(self, "direction", np.asarray(self.direction, dtype=np.float64).reshape(3))
        object.__setattr__(self, "extent", float(self.extent))

    def scaled(self) -> np.ndarray:
        """Вектор оси, длина которого равна размеру."""
        return self.direction * self.extent

    def transform_by(self, rotation: np.ndarray, scale: float = 1.0) -> "PCAAxis":
        return PCAAxis(np.asarray(rotation, dtype=np.float64) @ self.direction, self.extent * scale)

    def __eq__(self, other):
        if not isinstance(other, PCAAxis):
            return NotImplemented
        return bool(np.array_equal(self.direction, other.direction)) and self.extent == other.extent

    def __repr__(self):
        return f"PCAAxis(direction={self.direction}, extent={self.extent})"
