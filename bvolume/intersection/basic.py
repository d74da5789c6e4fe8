"""
Точные проверки для AABB, сфер и точек.

Соприкосновение граней AABB и касание сфер пересечением не считаются.
Точка на границе AABB считается внутри, точка на границе сферы — снаружи.
"""

import numpy as np

from bvolume.geombase.aabb import AABB
from bvolume.volumes.convex_hull import ConvexHull
from bvolume.volumes.sphere import BoundingSphere


def intersects_aabb_aabb(a: AABB, b: AABB) -> bool:
    if np.any(a.min_point >= b.max_point) or np.any(a.max_point <= b.min_point):
        return False
    return True


def intersects_point_aabb(point: np.ndarray, aabb: AABB) -> bool:
    return bool(np.all(point >= aabb.min_point) and np.all(point <= aabb.max_point))


def intersects_point_convex_hull(point: np.ndarray, ch: ConvexHull) -> bool:
    return bool(np.all(ch.signed_distances(point) >= 0.0))


def intersects_sphere_sphere(s1: BoundingSphere, s2: BoundingSphere) -> bool:
    d = s1.center - s2.center
    r = s1.radius + s2.radius
    return float(np.dot(d, d)) < r * r


def intersects_point_sphere(point: np.ndarray, sphere: BoundingSphere) -> bool:
    d = np.asarray(point, dtype=np.float64) - sphere.center
    return float(np.dot(d, d)) < sphere.radius * sphere.radius


def intersects_sphere_aabb(sphere: BoundingSphere, aabb: AABB) -> bool:
    """Расстояние от центра сферы до ближайшей точки AABB меньше радиуса."""
    d = sphere.center - aabb.project_point(sphere.center)
    return float(np.dot(d, d)) < sphere.radius * sphere.radius


def is_completely_inside_aabb(inner: AABB, outer: AABB) -> bool:
    """inner целиком внутри outer (границы могут совпадать)."""
    return bool(np.all(inner.min_point >= outer.min_point) and np.all(inner.max_point <= outer.max_point))


def is_sphere_completely_inside_sphere(inner: BoundingSphere, outer: BoundingSphere) -> bool:
    d = inner.center - outer.center
    if inner.radius > outer.radius:
        return False
    r = outer.radius - inner.radius
    return float(np.dot(d, d)) <= r * r
