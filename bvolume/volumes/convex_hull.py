"""
Выпуклые оболочки, заданные плоскостями.

Плоскость хранится как (nx, ny, nz, d). Точка P лежит с внутренней стороны
плоскости K, если dot(K[:3], P) + K[3] >= 0. Нормали единичные и направлены внутрь.
"""

from __future__ import annotations

import numpy as np

from bvolume.geombase.utils import as_points
from bvolume.volumes.types import BoundingVolumeType


def plane_from_point_normal(point: np.ndarray, normal: np.ndarray) -> np.ndarray:
    """Плоскость с внутренней нормалью normal, проходящая через point."""
    n = np.asarray(normal, dtype=np.float64)
    n = n / np.linalg.norm(n)
    return np.array([n[0], n[1], n[2], -float(np.dot(n, point))])


class ConvexHull:
    """Выпуклая оболочка как пересечение полупространств."""

    kind = BoundingVolumeType.CONVEX_HULL

    __slots__ = ("planes",)

    def __init__(self, planes: np.ndarray):
        planes = np.asarray(planes, dtype=np.float64)
        if planes.ndim != 2 or planes.shape[1] != 4:
            raise ValueError("Planes must be a Mx4 array.")
        self.planes = planes

    @property
    def nu_planes(self) -> int:
        return self.planes.shape[0]

    def signed_distances(self, point: np.ndarray) -> np.ndarray:
        """Расстояния от точки до всех плоскостей (положительные — внутри)."""
        return self.planes[:, :3] @ np.asarray(point, dtype=np.float64) + self.planes[:, 3]

    def contains_point(self, point: np.ndarray) -> bool:
        return bool(np.all(self.signed_distances(point) >= 0.0))

    @staticmethod
    def from_points(points: np.ndarray) -> "ConvexHullWithVertices":
        """
        Построить выпуклую оболочку точек (scipy.spatial.ConvexHull).

        Возвращает оболочку вместе с вершинами, лежащими на ней.
        """
        from scipy.spatial import ConvexHull as _QHull

        pts = as_points(points)
        qhull = _QHull(pts)
        # scipy: normal·x + offset <= 0 внутри, нормали наружу
        planes = -np.asarray(qhull.equations, dtype=np.float64)
        vertices = pts[qhull.vertices]
        return ConvexHullWithVertices(ConvexHull(planes), Hull(vertices))

    def __repr__(self):
        return f"ConvexHull(nu_planes={self.nu_planes})"


class Hull:
    """Оболочка (выпуклая или нет), заданная только вершинами."""

    __slots__ = ("vertices",)

    def __init__(self, vertices: np.ndarray):
        self.vertices = as_points(vertices)

    @property
    def nu_vertices(self) -> int:
        return self.vertices.shape[0]

    def __repr__(self):
        return f"Hull(nu_vertices={self.nu_vertices})"


class ConvexHullWithVertices:
    """Выпуклая оболочка с явным списком вершин для ускорения тестов пересечения."""

    kind = BoundingVolumeType.CONVEX_HULL

    __slots__ = ("hull", "vertices")

    def __init__(self, hull: ConvexHull, vertices: Hull):
        self.hull = hull
        self.vertices = vertices

    def __repr__(self):
        return f"ConvexHullWithVertices(nu_planes={self.hull.nu_planes}, nu_vertices={self.vertices.nu_vertices})"


class ConvexHullFull:
    """
    Выпуклая оболочка с плоскостями, вершинами, центром и радиусом.

    center — центр вершин, radius — радиус описанной вокруг center сферы,
    plane_radius[i] — расстояние от center до плоскости i (вписанный размер вдоль нормали).
    """

    kind = BoundingVolumeType.CONVEX_HULL

    __slots__ = ("hull", "vertices", "center", "radius", "plane_radius")

    def __init__(self, hull: ConvexHull, vertices: Hull, center: np.ndarray = None):
        self.hull = hull
        self.vertices = vertices
        if center is None:
            center = np.mean(vertices.vertices, axis=0)
        self.center = np.asarray(center, dtype=np.float64).reshape(3)
        diff = vertices.vertices - self.center
        self.radius = float(np.sqrt(np.max(np.einsum("ij,ij->i", diff, diff))))
        self.plane_radius = hull.signed_distances(self.center)

    @staticmethod
    def from_convex_hull_with_vertices(ch: ConvexHullWithVertices) -> "ConvexHullFull":
        return ConvexHullFull(ch.hull, ch.vertices)

    def __repr__(self):
        return (f"ConvexHullFull(nu_planes={self.hull.nu_planes}, "
                f"nu_vertices={self.vertices.nu_vertices}, radius={self.radius})")
