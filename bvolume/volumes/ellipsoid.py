"""Ellipsoid — ограничивающий эллипсоид, полученный аффинным преобразованием сферы."""

import math

import numpy as np

from bvolume.volumes.types import BoundingVolumeType


class Ellipsoid:
    """
    Параметры:
        center: Центр
        axes: Матрица 3x3, строки — полуоси (длина вектора = длина полуоси)
    """

    kind = BoundingVolumeType.ELLIPSOID

    __slots__ = ("center", "axes")

    def __init__(self, center: np.ndarray, axes: np.ndarray):
        self.center = np.asarray(center, dtype=np.float64).reshape(3)
        self.axes = np.asarray(axes, dtype=np.float64).reshape(3, 3)

    def semi_axis_lengths(self) -> np.ndarray:
        return np.linalg.norm(self.axes, axis=1)

    def volume(self) -> float:
        r = self.semi_axis_lengths()
        return 4.0 / 3.0 * math.pi * float(r[0] * r[1] * r[2])

    def contains_point(self, point: np.ndarray, eps: float = 0.0) -> bool:
        d = np.asarray(point, dtype=np.float64) - self.center
        lengths_sq = np.einsum("ij,ij->i", self.axes, self.axes)
        if np.any(lengths_sq == 0.0):
            return False
        coords = (self.axes @ d) / lengths_sq
        return float(np.dot(coords, coords)) <= (1.0 + eps) ** 2

    def support_radius(self, direction: np.ndarray) -> float:
        """Максимум dot(direction, P - center) по точкам эллипсоида."""
        return math.sqrt(float(np.sum((self.axes @ direction) ** 2)))

    def transform_by(self, rotation: np.ndarray, translation: np.ndarray, scale: float = 1.0) -> "Ellipsoid":
        rot = np.asarray(rotation, dtype=np.float64)
        return Ellipsoid(rot @ (self.center * scale) + translation, (self.axes * scale) @ rot.T)

    def __repr__(self):
        return f"Ellipsoid(center={self.center}, semi_axes={self.semi_axis_lengths()})"
