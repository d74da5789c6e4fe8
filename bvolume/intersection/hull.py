"""
Проверки объёмов против выпуклой оболочки (пирамиды видимости, теневого объёма).

Объём считается снаружи, если он целиком лежит с внешней стороны хотя бы
одной плоскости. Это консервативно: объём, пересекающий каждое полупространство
по отдельности, но не их пересечение, будет признан пересекающим.
"""

from __future__ import annotations

import math

import numpy as np

from bvolume.geombase.aabb import AABB
from bvolume.volumes.box import Box
from bvolume.volumes.convex_hull import ConvexHull, ConvexHullFull, ConvexHullWithVertices, Hull
from bvolume.volumes.cylinder import Cylinder
from bvolume.volumes.ellipsoid import Ellipsoid
from bvolume.volumes.sector import HalfCylinder, SphericalSector
from bvolume.volumes.sphere import BoundingSphere


def max_cone_dot(normal: np.ndarray, axis: np.ndarray, cos_half_angle: float, sin_half_angle: float) -> float:
    """
    Максимум dot(normal, d) по единичным направлениям d внутри конуса.

    Если normal попадает в конус, максимум равен 1, иначе это косинус
    угла между normal и ближайшей образующей.
    """
    cos_a = float(np.dot(normal, axis))
    if cos_a >= cos_half_angle:
        return 1.0
    sin_a = math.sqrt(max(0.0, 1.0 - cos_a * cos_a))
    return cos_a * cos_half_angle + sin_a * sin_half_angle


def _normals(ch: ConvexHull) -> np.ndarray:
    return ch.planes[:, :3]


def intersects_sphere_convex_hull(sphere: BoundingSphere, ch: ConvexHull) -> bool:
    return bool(np.all(ch.signed_distances(sphere.center) > -sphere.radius))


def intersects_aabb_convex_hull(aabb: AABB, ch: ConvexHull) -> bool:
    """Проверка по p-вершине: самой дальней вдоль нормали вершине AABB."""
    center = aabb.center()
    half = aabb.dimensions() * 0.5
    reach = np.abs(_normals(ch)) @ half
    return bool(np.all(ch.signed_distances(center) + reach >= 0.0))


def intersects_box_convex_hull(box: Box, ch: ConvexHull) -> bool:
    reach = np.abs(_normals(ch) @ box.directions().T) @ box.half_extents()
    return bool(np.all(ch.signed_distances(box.center) + reach > 0.0))


def intersects_line_segment_box_convex_hull(box: Box, ch: ConvexHull) -> bool:
    """
    Вытянутый параллелепипед как отрезок вдоль главной оси с толщиной,
    равной половине диагонали поперечного сечения.
    """
    half = box.half_extents()
    direction = box.axes[0].direction * half[0]
    thickness = math.sqrt(half[1] * half[1] + half[2] * half[2])
    f1 = ch.signed_distances(box.center - direction)
    f2 = ch.signed_distances(box.center + direction)
    return bool(np.all(np.maximum(f1, f2) + thickness > 0.0))


def intersects_ellipsoid_convex_hull(ellipsoid: Ellipsoid, ch: ConvexHull) -> bool:
    support = np.sqrt(np.sum((_normals(ch) @ ellipsoid.axes.T) ** 2, axis=1))
    return bool(np.all(ch.signed_distances(ellipsoid.center) + support > 0.0))


def intersects_cylinder_convex_hull(cylinder: Cylinder, ch: ConvexHull) -> bool:
    d = _normals(ch) @ cylinder.axis
    reach = cylinder.length * 0.5 * np.abs(d) + cylinder.radius * np.sqrt(np.maximum(0.0, 1.0 - d * d))
    return bool(np.all(ch.signed_distances(cylinder.center) + reach > 0.0))


def intersects_half_cylinder_convex_hull(hc: HalfCylinder, ch: ConvexHull) -> bool:
    """
    Полубесконечный цилиндр снаружи плоскости, только если он уходит от неё
    (dot(n, axis) <= 0) и торцевой диск лежит снаружи.
    """
    f = ch.signed_distances(hc.endpoint)
    for i in range(ch.nu_planes):
        n = ch.planes[i, :3]
        d = float(np.dot(n, hc.axis))
        if d > 0.0:
            continue
        if f[i] + hc.radius * math.sqrt(max(0.0, 1.0 - d * d)) <= 0.0:
            return False
    return True


def intersects_spherical_sector_convex_hull(sector: SphericalSector, ch: ConvexHull) -> bool:
    f = ch.signed_distances(sector.center)
    for i in range(ch.nu_planes):
        m = max_cone_dot(ch.planes[i, :3], sector.axis, sector.cos_half_angle, sector.sin_half_angle)
        if f[i] + sector.radius * max(0.0, m) <= 0.0:
            return False
    return True


def intersects_hull_convex_hull(hull: Hull, ch: ConvexHull) -> bool:
    """Оболочка снаружи, если все её вершины снаружи одной плоскости."""
    f = hull.vertices @ _normals(ch).T + ch.planes[:, 3]
    return not bool(np.any(np.all(f < 0.0, axis=0)))


def intersects_convex_hull_with_vertices_convex_hull(ch1: ConvexHullWithVertices, ch2: ConvexHull) -> bool:
    return intersects_hull_convex_hull(ch1.vertices, ch2)


def intersects_convex_hull_full_convex_hull(ch1: ConvexHullFull, ch2: ConvexHull) -> bool:
    """Сначала описанная сфера, затем вершины."""
    if not intersects_sphere_convex_hull(BoundingSphere(ch1.center, ch1.radius), ch2):
        return False
    return intersects_hull_convex_hull(ch1.vertices, ch2)
