"""
Box — ориентированный параллелепипед (OBB).

Оси параллелепипеда — главные оси набора точек (PCA), размер вдоль оси i
равен axes[i].extent.
"""

from __future__ import annotations

import numpy as np

from bvolume.volumes.pca import PCAAxis
from bvolume.volumes.convex_hull import ConvexHull
from bvolume.volumes.types import BoundingVolumeType


class Box:
    """
    Параметры:
        center: Центр в мировых координатах
        axes: Три ортогональные оси PCAAxis (направление + полный размер)
    """

    kind = BoundingVolumeType.BOX

    __slots__ = ("center", "axes")

    def __init__(self, center: np.ndarray, axes):
        self.center = np.asarray(center, dtype=np.float64).reshape(3)
        self.axes = tuple(axes)
        if len(self.axes) != 3:
            raise ValueError("Box requires exactly three axes.")

    @staticmethod
    def from_aabb(aabb) -> "Box":
        dims = aabb.dimensions()
        axes = (
            PCAAxis(np.array([1.0, 0.0, 0.0]), dims[0]),
            PCAAxis(np.array([0.0, 1.0, 0.0]), dims[1]),
            PCAAxis(np.array([0.0, 0.0, 1.0]), dims[2]),
        )
        return Box(aabb.center(), axes)

    def directions(self) -> np.ndarray:
        """Матрица 3x3, строки — направления осей."""
        return np.array([a.direction for a in self.axes])

    def half_extents(self) -> np.ndarray:
        return np.array([a.extent * 0.5 for a in self.axes])

    def volume(self) -> float:
        return self.axes[0].extent * self.axes[1].extent * self.axes[2].extent

    def local_point(self, point: np.ndarray) -> np.ndarray:
        """Координаты точки в базисе осей относительно центра."""
        return self.directions() @ (np.asarray(point, dtype=np.float64) - self.center)

    def contains_point(self, point: np.ndarray) -> bool:
        return bool(np.all(np.abs(self.local_point(point)) <= self.half_extents()))

    def projection_radius(self, direction: np.ndarray) -> float:
        """Половина ширины проекции параллелепипеда на единичное направление."""
        return float(np.sum(np.abs(self.directions() @ direction) * self.half_extents()))

    def support(self, direction: np.ndarray) -> np.ndarray:
        """Самая дальняя в направлении direction точка (вершина) параллелепипеда."""
        dirs = self.directions()
        signs = np.where(dirs @ direction < 0.0, -1.0, 1.0)
        return self.center + (signs * self.half_extents()) @ dirs

    def corners(self) -> np.ndarray:
        dirs = self.directions()
        h = self.half_extents()
        result = []
        for sx in (-1.0, 1.0):
            for sy in (-1.0, 1.0):
                for sz in (-1.0, 1.0):
                    result.append(self.center + sx * h[0] * dirs[0] + sy * h[1] * dirs[1] + sz * h[2] * dirs[2])
        return np.array(result)

    def planes(self) -> ConvexHull:
        """Шесть плоскостей с внутренними нормалями."""
        planes = []
        h = self.half_extents()
        for i, axis in enumerate(self.axes):
            n = axis.direction
            c = float(np.dot(n, self.center))
            planes.append([n[0], n[1], n[2], -c + h[i]])
            planes.append([-n[0], -n[1], -n[2], c + h[i]])
        return ConvexHull(np.array(planes))

    def transform_by(self, rotation: np.ndarray, translation: np.ndarray, scale: float = 1.0) -> "Box":
        """Return a new Box rotated, uniformly scaled and translated."""
        rot = np.asarray(rotation, dtype=np.float64)
        return Box(rot @ (self.center * scale) + translation,
                   [a.transform_by(rot, scale) for a in self.axes])

    def __repr__(self):
        return f"Box(center={self.center}, extents={[a.extent for a in self.axes]})"
