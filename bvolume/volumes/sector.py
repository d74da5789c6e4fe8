"""
Объёмы источников света: сферический сектор, бесконечный конус,
бесконечная пирамида и полубесконечный цилиндр.
"""

from __future__ import annotations

import math

import numpy as np

from bvolume.geombase.utils import as_point, as_points, normalize
from bvolume.volumes.types import BoundingVolumeType


class SphericalSector:
    """
    Сферический сектор (объём прожектора).

    Параметры:
        center: Вершина конуса (позиция источника)
        axis: Единичное направление оси
        radius: Радиус сферы (дальность света)
        cos_half_angle, sin_half_angle: Половинный угол раскрытия конуса
    """

    kind = BoundingVolumeType.SPHERICAL_SECTOR

    __slots__ = ("center", "axis", "radius", "cos_half_angle", "sin_half_angle")

    def __init__(self, center: np.ndarray, axis: np.ndarray, radius: float,
                 cos_half_angle: float, sin_half_angle: float = None):
        self.center = as_point(center)
        self.axis = normalize(as_point(axis))
        self.radius = float(radius)
        self.cos_half_angle = float(cos_half_angle)
        if sin_half_angle is None:
            sin_half_angle = math.sqrt(max(0.0, 1.0 - self.cos_half_angle ** 2))
        self.sin_half_angle = float(sin_half_angle)

    @staticmethod
    def from_angle(center: np.ndarray, axis: np.ndarray, radius: float, half_angle: float) -> "SphericalSector":
        """Построить сектор по половинному углу в радианах."""
        return SphericalSector(center, axis, radius, math.cos(half_angle), math.sin(half_angle))

    def half_angle(self) -> float:
        return math.atan2(self.sin_half_angle, self.cos_half_angle)

    def contains_point(self, point: np.ndarray) -> bool:
        d = as_point(point) - self.center
        dist_sq = float(np.dot(d, d))
        if dist_sq > self.radius * self.radius:
            return False
        if dist_sq == 0.0:
            return True
        return float(np.dot(d, self.axis)) >= self.cos_half_angle * math.sqrt(dist_sq)

    def transform_by(self, rotation: np.ndarray, translation: np.ndarray, scale: float = 1.0) -> "SphericalSector":
        rot = np.asarray(rotation, dtype=np.float64)
        return SphericalSector(rot @ (self.center * scale) + translation, rot @ self.axis,
                               self.radius * scale, self.cos_half_angle, self.sin_half_angle)

    def __repr__(self):
        return (f"SphericalSector(center={self.center}, axis={self.axis}, radius={self.radius}, "
                f"half_angle={math.degrees(self.half_angle()):.3f}deg)")


class InfiniteSphericalSector:
    """Конус от вершины center вдоль axis до бесконечности."""

    __slots__ = ("center", "axis")

    def __init__(self, center: np.ndarray, axis: np.ndarray):
        self.center = as_point(center)
        self.axis = normalize(as_point(axis))

    def __repr__(self):
        return f"InfiniteSphericalSector(center={self.center}, axis={self.axis})"


class InfinitePyramidBase:
    """
    Бесконечная проекция выпуклого многоугольника от вершины apex.

    base_vertices — вершины основания (многоугольника), лежащего перед apex.
    Объём — множество точек apex + t*(b - apex), t >= 1, где b пробегает основание.
    """

    __slots__ = ("apex", "base_vertices")

    def __init__(self, apex: np.ndarray, base_vertices: np.ndarray):
        self.apex = as_point(apex)
        self.base_vertices = as_points(base_vertices)
        if self.base_vertices.shape[0] < 3:
            raise ValueError("Pyramid base requires at least three vertices.")

    @property
    def nu_vertices(self) -> int:
        return self.base_vertices.shape[0]

    def base_center(self) -> np.ndarray:
        return np.mean(self.base_vertices, axis=0)

    def axis(self) -> np.ndarray:
        """Направление от вершины к центру основания."""
        return normalize(self.base_center() - self.apex)

    def __repr__(self):
        return f"InfinitePyramidBase(apex={self.apex}, nu_vertices={self.nu_vertices})"


class HalfCylinder:
    """
    Цилиндр, начинающийся в endpoint и уходящий вдоль axis в бесконечность
    (теневой объём направленного света).
    """

    kind = BoundingVolumeType.HALF_CYLINDER

    __slots__ = ("endpoint", "axis", "radius")

    def __init__(self, endpoint: np.ndarray, axis: np.ndarray, radius: float):
        self.endpoint = as_point(endpoint)
        self.axis = normalize(as_point(axis))
        self.radius = float(radius)

    def contains_point(self, point: np.ndarray) -> bool:
        v = as_point(point) - self.endpoint
        h = float(np.dot(v, self.axis))
        if h < 0.0:
            return False
        radial = v - h * self.axis
        return float(np.dot(radial, radial)) <= self.radius * self.radius

    def __repr__(self):
        return f"HalfCylinder(endpoint={self.endpoint}, axis={self.axis}, radius={self.radius})"
