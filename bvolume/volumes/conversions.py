"""
Построение ограничивающего объёма одного типа вокруг объёма другого типа.

Все функции возвращают объём, содержащий исходный (консервативно).
"""

from __future__ import annotations

import math

import numpy as np

from bvolume.geombase.aabb import AABB
from bvolume.volumes.cylinder import Cylinder
from bvolume.volumes.sector import SphericalSector
from bvolume.volumes.sphere import BoundingSphere

_COS_45 = math.sqrt(0.5)


def aabb_of_sphere(sphere: BoundingSphere) -> AABB:
    r = np.full(3, sphere.radius)
    return AABB(sphere.center - r, sphere.center + r)


def aabb_of_cylinder(cylinder: Cylinder) -> AABB:
    """AABB цилиндра: вклад оси плюс вклад торцевого диска по каждой мировой оси."""
    half = (cylinder.length * 0.5) * np.abs(cylinder.axis) + cylinder.radius * cylinder.axis_coefficients
    return AABB(cylinder.center - half, cylinder.center + half)


def bounding_sphere_of_cylinder(cylinder: Cylinder) -> BoundingSphere:
    half_length = cylinder.length * 0.5
    return BoundingSphere(cylinder.center.copy(),
                          math.sqrt(half_length * half_length + cylinder.radius * cylinder.radius))


def bounding_sphere_of_sector(sector: SphericalSector) -> BoundingSphere:
    """
    Наименьшая сфера, содержащая сферический сектор.

    При половинном угле меньше 45 градусов сфера проходит через вершину и
    окружность основания конуса; до 90 градусов сфера описана вокруг
    окружности на конце конуса; при больших углах это сфера вокруг вершины.
    """
    cos_a = sector.cos_half_angle
    radius = sector.radius
    if cos_a > _COS_45:
        h = radius / (2.0 * cos_a)
        return BoundingSphere(sector.center + sector.axis * h, h)
    if cos_a > 0.0:
        return BoundingSphere(sector.center + sector.axis * (radius * cos_a),
                              radius * sector.sin_half_angle)
    return BoundingSphere(sector.center.copy(), radius)


def aabb_of_sector(sector: SphericalSector) -> AABB:
    """AABB ограничивающей сферы, обрезанный AABB сферы вокруг вершины."""
    aabb = aabb_of_sphere(bounding_sphere_of_sector(sector))
    apex_aabb = aabb_of_sphere(BoundingSphere(sector.center, sector.radius))
    return aabb.intersection(apex_aabb)


def bounding_cylinder_of_sector(sector: SphericalSector) -> Cylinder:
    """
    Цилиндр вдоль оси сектора длиной radius.

    Радиус равен radius * sin(half_angle). Цилиндр содержит сектор только
    при половинном угле не больше 90 градусов.
    """
    return Cylinder(sector.center + sector.axis * (sector.radius * 0.5), sector.axis,
                    sector.radius, sector.radius * sector.sin_half_angle)
