"""BoundingSphere — ограничивающая сфера."""

import math

import numpy as np

from bvolume.volumes.types import BoundingVolumeType


class BoundingSphere:
    """
    Сфера с центром и радиусом.

    Параметры:
        center: Центр
        radius: Радиус (>= 0)
    """

    kind = BoundingVolumeType.SPHERE

    __slots__ = ("center", "radius")

    def __init__(self, center: np.ndarray = None, radius: float = 0.0):
        if center is None:
            center = np.zeros(3)
        self.center = np.asarray(center, dtype=np.float64).reshape(3)
        self.radius = float(radius)

    def volume(self) -> float:
        return 4.0 / 3.0 * math.pi * self.radius * self.radius * self.radius

    def contains_point(self, point: np.ndarray, eps: float = 0.0) -> bool:
        """Точка внутри сферы (включая границу, с допуском eps)."""
        d = np.asarray(point, dtype=np.float64) - self.center
        return float(np.dot(d, d)) <= (self.radius + eps) ** 2

    def transform_by(self, rotation: np.ndarray, translation: np.ndarray, scale: float = 1.0) -> "BoundingSphere":
        """Return a new BoundingSphere rotated, uniformly scaled and translated."""
        new_center = np.asarray(rotation, dtype=np.float64) @ (self.center * scale) + translation
        return BoundingSphere(new_center, self.radius * scale)

    def copy(self) -> "BoundingSphere":
        return BoundingSphere(self.center.copy(), self.radius)

    def __eq__(self, other):
        if not isinstance(other, BoundingSphere):
            return NotImplemented
        return bool(np.array_equal(self.center, other.center)) and self.radius == other.radius

    def __repr__(self):
        return f"BoundingSphere(center={self.center}, radius={self.radius})"
