"""
Frustum — усечённая пирамида видимости камеры.

Шесть плоскостей с нормалями внутрь: near, far, left, right, bottom, top.
Восемь вершин: сначала четыре на ближней плоскости, затем четыре на дальней.
"""

from __future__ import annotations

import math

import numpy as np

from bvolume.geombase.utils import as_point, magnitude, normalize
from bvolume.volumes.convex_hull import ConvexHull, ConvexHullFull, Hull, plane_from_point_normal


class Frustum:
    """
    Параметры:
        hull: ConvexHullFull (плоскости, вершины, центр, радиус)
    """

    __slots__ = ("hull",)

    def __init__(self, hull: ConvexHullFull):
        self.hull = hull

    @property
    def planes(self) -> np.ndarray:
        return self.hull.hull.planes

    @property
    def vertices(self) -> np.ndarray:
        return self.hull.vertices.vertices

    @staticmethod
    def from_perspective(position, direction, up, fov_y: float, aspect: float,
                         near: float, far: float) -> "Frustum":
        """
        Построить пирамиду видимости перспективной камеры.

        fov_y — полный вертикальный угол обзора в радианах.
        """
        if not 0.0 < near < far:
            raise ValueError("Frustum requires 0 < near < far.")
        position = as_point(position)
        forward = normalize(as_point(direction))
        side = np.cross(forward, normalize(as_point(up)))
        if magnitude(side) < 1.0e-9:
            raise ValueError("Frustum requires a nonzero direction not parallel to up.")
        right = normalize(side)
        true_up = np.cross(right, forward)

        tan_y = math.tan(fov_y * 0.5)
        tan_x = tan_y * aspect

        vertices = []
        for dist in (near, far):
            c = position + forward * dist
            hy = tan_y * dist
            hx = tan_x * dist
            vertices.append(c - right * hx - true_up * hy)
            vertices.append(c + right * hx - true_up * hy)
            vertices.append(c + right * hx + true_up * hy)
            vertices.append(c - right * hx + true_up * hy)
        vertices = np.array(vertices)

        planes = [
            plane_from_point_normal(position + forward * near, forward),
            plane_from_point_normal(position + forward * far, -forward),
            # боковые плоскости проходят через позицию камеры
            plane_from_point_normal(position, forward * tan_x + right),
            plane_from_point_normal(position, forward * tan_x - right),
            plane_from_point_normal(position, forward * tan_y + true_up),
            plane_from_point_normal(position, forward * tan_y - true_up),
        ]
        hull = ConvexHullFull(ConvexHull(np.array(planes)), Hull(vertices))
        return Frustum(hull)

    def contains_point(self, point: np.ndarray) -> bool:
        return self.hull.hull.contains_point(point)

    def __repr__(self):
        return f"Frustum(center={self.hull.center}, radius={self.hull.radius})"
