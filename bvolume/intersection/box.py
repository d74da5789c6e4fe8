"""
Проверки ориентированного параллелепипеда и цилиндра.

Параллелепипед проверяется в собственной системе координат, где он
становится AABB с центром в нуле.
"""

from __future__ import annotations

import math

import numpy as np

from bvolume.geombase.gjk import gjk_intersects
from bvolume.intersection.result import BoundsCheckResult
from bvolume.volumes.box import Box
from bvolume.volumes.cylinder import Cylinder
from bvolume.volumes.sphere import BoundingSphere


def intersects_point_box(point: np.ndarray, box: Box) -> bool:
    """Точка внутри параллелепипеда, граница включительно."""
    return box.contains_point(point)


def intersects_box_sphere(box: Box, sphere: BoundingSphere) -> bool:
    """
    Переносим центр сферы в локальные координаты коробки и ищем
    ближайшую к нему точку коробки.
    """
    local = box.local_point(sphere.center)
    h = box.half_extents()
    closest = np.minimum(np.maximum(local, -h), h)
    d = local - closest
    return float(np.dot(d, d)) < sphere.radius * sphere.radius


def intersects_box_cylinder(box: Box, cylinder: Cylinder) -> bool:
    """
    Точная проверка: GJK по опорным точкам коробки и цилиндра.

    Сначала отбрасываем явно разделённые пары по осям коробки и оси
    цилиндра, остальное решает GJK. Касание считается пересечением.
    """
    delta = cylinder.center - box.center
    for direction in [axis.direction for axis in box.axes] + [cylinder.axis]:
        distance = abs(float(np.dot(delta, direction)))
        if distance > box.projection_radius(direction) + cylinder.projection_radius(direction):
            return False

    scale = float(np.sum(box.half_extents())) + cylinder.length + cylinder.radius
    return gjk_intersects(box.support, cylinder.support, -delta, scale)


def query_sphere_cylinder(sphere: BoundingSphere, cylinder: Cylinder) -> BoundsCheckResult:
    """
    Положение сферы относительно цилиндра.

    Returns:
        COMPLETELY_OUTSIDE, если сфера не пересекает цилиндр,
        COMPLETELY_INSIDE, если сфера целиком внутри цилиндра,
        иначе PARTIALLY_INSIDE.
    """
    v = sphere.center - cylinder.center
    h = float(np.dot(v, cylinder.axis))
    radial_v = v - h * cylinder.axis
    radial = math.sqrt(float(np.dot(radial_v, radial_v)))
    half_length = cylinder.length * 0.5
    r = sphere.radius

    # расстояние до цилиндра: по оси, по радиусу, или до кромки торца
    dh = max(abs(h) - half_length, 0.0)
    dr = max(radial - cylinder.radius, 0.0)
    if dh * dh + dr * dr >= r * r:
        return BoundsCheckResult.COMPLETELY_OUTSIDE
    if abs(h) + r <= half_length and radial + r <= cylinder.radius:
        return BoundsCheckResult.COMPLETELY_INSIDE
    return BoundsCheckResult.PARTIALLY_INSIDE


def intersects_sphere_cylinder(sphere: BoundingSphere, cylinder: Cylinder) -> bool:
    return query_sphere_cylinder(sphere, cylinder) != BoundsCheckResult.COMPLETELY_OUTSIDE
