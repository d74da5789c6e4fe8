"""
Проверки уровня сцены: записи объёмов модели, узлы октодерева, источники света.

Каждая проверка сводится к проверкам отдельных объёмов. Сначала дешёвая
сфера, затем, если флаги записи это предписывают, более точные объёмы.
"""

from __future__ import annotations

import math

import numpy as np

from bvolume.bounds import BoundsFlags, BoundsRecord
from bvolume.geombase.aabb import AABB
from bvolume.intersection.basic import (
    intersects_sphere_aabb,
    intersects_sphere_sphere,
    is_completely_inside_aabb,
    is_sphere_completely_inside_sphere,
)
from bvolume.intersection.box import intersects_box_cylinder, intersects_box_sphere, query_sphere_cylinder
from bvolume.intersection.hull import (
    intersects_aabb_convex_hull,
    intersects_box_convex_hull,
    intersects_cylinder_convex_hull,
    intersects_ellipsoid_convex_hull,
    intersects_line_segment_box_convex_hull,
    intersects_sphere_convex_hull,
    intersects_spherical_sector_convex_hull,
)
from bvolume.intersection.result import BoundsCheckResult
from bvolume.volumes.box import Box
from bvolume.volumes.conversions import aabb_of_cylinder, aabb_of_sector, aabb_of_sphere
from bvolume.volumes.convex_hull import ConvexHull
from bvolume.volumes.frustum import Frustum
from bvolume.volumes.light import Light, LightKind
from bvolume.volumes.octree import OctreeNodeBounds
from bvolume.volumes.sector import SphericalSector
from bvolume.volumes.sphere import BoundingSphere
from bvolume.volumes.types import BoundingVolumeType

OUTSIDE = BoundsCheckResult.COMPLETELY_OUTSIDE
INSIDE = BoundsCheckResult.COMPLETELY_INSIDE
PARTIAL = BoundsCheckResult.PARTIALLY_INSIDE


# --- сфера и сферический сектор ---

def intersects_sphere_spherical_sector(sphere: BoundingSphere, sector: SphericalSector) -> bool:
    """Сфера пересекает сектор: пересекает сферу сектора и лежит в пределах угла конуса плюс угловой радиус."""
    if not intersects_sphere_sphere(sphere, BoundingSphere(sector.center, sector.radius)):
        return False
    v = sphere.center - sector.center
    dist_sq = float(np.dot(v, v))
    r = sphere.radius
    if dist_sq <= r * r:
        return True
    dist = math.sqrt(dist_sq)
    sin_d = r / dist
    cos_d = math.sqrt(max(0.0, 1.0 - sin_d * sin_d))
    # cos(half_angle + d)
    cos_limit = sector.cos_half_angle * cos_d - sector.sin_half_angle * sin_d
    if sector.sin_half_angle * cos_d + sector.cos_half_angle * sin_d < 0.0:
        # half_angle + d > pi
        return True
    return float(np.dot(v, sector.axis)) >= cos_limit * dist


def is_sphere_completely_inside_spherical_sector(sphere: BoundingSphere, sector: SphericalSector) -> bool:
    if not is_sphere_completely_inside_sphere(sphere, BoundingSphere(sector.center, sector.radius)):
        return False
    v = sphere.center - sector.center
    dist_sq = float(np.dot(v, v))
    r = sphere.radius
    if dist_sq <= r * r:
        return False
    dist = math.sqrt(dist_sq)
    sin_d = r / dist
    cos_d = math.sqrt(max(0.0, 1.0 - sin_d * sin_d))
    # угол до оси + угловой радиус <= half_angle
    sin_diff = sector.sin_half_angle * cos_d - sector.cos_half_angle * sin_d
    if sin_diff < 0.0:
        return False
    cos_limit = sector.cos_half_angle * cos_d + sector.sin_half_angle * sin_d
    return float(np.dot(v, sector.axis)) >= cos_limit * dist


# --- запись объёмов модели ---

def intersects_record_convex_hull(record: BoundsRecord, ch: ConvexHull) -> bool:
    """Консервативная проверка записи против выпуклой оболочки."""
    if not intersects_sphere_convex_hull(record.sphere, ch):
        return False
    flags = record.flags
    if flags & BoundsFlags.PREFER_AABB and not intersects_aabb_convex_hull(record.aabb, ch):
        return False
    if flags & BoundsFlags.PREFER_BOX_LINE_SEGMENT:
        if not intersects_line_segment_box_convex_hull(record.box(), ch):
            return False
    elif flags & BoundsFlags.PREFER_BOX:
        if not intersects_box_convex_hull(record.box(), ch):
            return False
    if flags & BoundsFlags.PREFER_SPECIAL and record.special is not None:
        if record.special.kind == BoundingVolumeType.ELLIPSOID:
            return intersects_ellipsoid_convex_hull(record.special, ch)
        if record.special.kind == BoundingVolumeType.CYLINDER:
            return intersects_cylinder_convex_hull(record.special, ch)
    return True


def intersects_record_frustum(record: BoundsRecord, frustum: Frustum) -> bool:
    return intersects_record_convex_hull(record, frustum.hull.hull)


def intersects_record_sphere(record: BoundsRecord, sphere: BoundingSphere) -> bool:
    if not intersects_sphere_sphere(record.sphere, sphere):
        return False
    flags = record.flags
    if flags & BoundsFlags.PREFER_AABB and not intersects_sphere_aabb(sphere, record.aabb):
        return False
    if flags & BoundsFlags.BOX_ANY and not intersects_box_sphere(record.box(), sphere):
        return False
    if (flags & BoundsFlags.PREFER_SPECIAL and record.special is not None
            and record.special.kind == BoundingVolumeType.CYLINDER):
        return query_sphere_cylinder(sphere, record.special) != OUTSIDE
    return True


def _corners_inside_sphere(corners: np.ndarray, sphere: BoundingSphere) -> bool:
    d = corners - sphere.center
    return bool(np.all(np.einsum("ij,ij->i", d, d) <= sphere.radius * sphere.radius))


def query_record_sphere(record: BoundsRecord, sphere: BoundingSphere) -> BoundsCheckResult:
    """Положение записи относительно сферы."""
    if not intersects_record_sphere(record, sphere):
        return OUTSIDE
    if is_sphere_completely_inside_sphere(record.sphere, sphere):
        return INSIDE
    if record.flags & BoundsFlags.PREFER_AABB and _corners_inside_sphere(record.aabb.get_corners(), sphere):
        return INSIDE
    if record.flags & BoundsFlags.BOX_ANY and _corners_inside_sphere(record.box().corners(), sphere):
        return INSIDE
    return PARTIAL


def _record_light_sphere(light: Light, use_worst_case_bounds: bool) -> BoundingSphere:
    if use_worst_case_bounds:
        return light.worst_case_sphere
    return light.sphere


def intersects_record_light(record: BoundsRecord, light: Light) -> bool:
    """Может ли источник осветить модель."""
    if light.kind == LightKind.DIRECTIONAL:
        return True
    if not intersects_record_sphere(record, light.sphere):
        return False
    if light.kind == LightKind.SPOT:
        return intersects_sphere_spherical_sector(record.sphere, light.sector)
    if light.kind == LightKind.BEAM:
        if query_sphere_cylinder(record.sphere, light.cylinder) == OUTSIDE:
            return False
        if record.flags & BoundsFlags.BOX_ANY:
            return intersects_box_cylinder(record.box(), light.cylinder)
    return True


def query_record_light(record: BoundsRecord, light: Light) -> BoundsCheckResult:
    """
    Положение модели относительно сферы влияния источника.

    Для направленного света модель всегда целиком внутри.
    """
    if light.kind == LightKind.DIRECTIONAL:
        return INSIDE
    return query_record_sphere(record, light.sphere)


def query_record_light_full(record: BoundsRecord, light: Light,
                            use_worst_case_bounds: bool = False) -> BoundsCheckResult:
    """
    Положение модели относительно объёма источника с учётом всех объёмов записи.

    При use_worst_case_bounds используется сфера, покрывающая источник при
    любых параметрах; специфичные для типа источника объёмы (сектор, цилиндр)
    тогда не применяются.
    """
    if light.kind == LightKind.DIRECTIONAL:
        return INSIDE
    light_sphere = _record_light_sphere(light, use_worst_case_bounds)
    result = query_record_sphere(record, light_sphere)
    if result == OUTSIDE or use_worst_case_bounds or light.kind == LightKind.POINT_SOURCE:
        return result

    if light.kind == LightKind.SPOT:
        if not intersects_sphere_spherical_sector(record.sphere, light.sector):
            return OUTSIDE
        if is_sphere_completely_inside_spherical_sector(record.sphere, light.sector):
            return INSIDE
        return PARTIAL

    # BEAM
    cylinder_result = query_sphere_cylinder(record.sphere, light.cylinder)
    if cylinder_result == PARTIAL and record.flags & BoundsFlags.BOX_ANY:
        if not intersects_box_cylinder(record.box(), light.cylinder):
            return OUTSIDE
    return cylinder_result


# --- узлы октодерева ---

def query_octree_convex_hull(node: OctreeNodeBounds, ch: ConvexHull) -> BoundsCheckResult:
    """Сначала описанная сфера узла, затем p- и n-вершины AABB."""
    f = ch.signed_distances(node.sphere.center)
    r = node.sphere.radius
    if np.any(f <= -r):
        return OUTSIDE
    if np.all(f >= r):
        return INSIDE

    center = node.aabb.center()
    reach = np.abs(ch.planes[:, :3]) @ (node.aabb.dimensions() * 0.5)
    fc = ch.signed_distances(center)
    if np.any(fc + reach < 0.0):
        return OUTSIDE
    if np.all(fc - reach >= 0.0):
        return INSIDE
    return PARTIAL


def query_octree_sphere(node: OctreeNodeBounds, sphere: BoundingSphere) -> BoundsCheckResult:
    if not intersects_sphere_sphere(node.sphere, sphere):
        return OUTSIDE
    if not intersects_sphere_aabb(sphere, node.aabb):
        return OUTSIDE
    # самый дальний от центра сферы угол AABB
    far = np.where(sphere.center < node.aabb.center(), node.aabb.max_point, node.aabb.min_point)
    d = far - sphere.center
    if float(np.dot(d, d)) <= sphere.radius * sphere.radius:
        return INSIDE
    return PARTIAL


def query_octree_light(node: OctreeNodeBounds, light: Light) -> BoundsCheckResult:
    if light.kind == LightKind.DIRECTIONAL:
        return INSIDE
    result = query_octree_sphere(node, light.sphere)
    if result == OUTSIDE or light.kind == LightKind.POINT_SOURCE:
        return result

    corners = node.aabb.get_corners()
    if light.kind == LightKind.SPOT:
        if not intersects_sphere_spherical_sector(node.sphere, light.sector):
            return OUTSIDE
        # сектор выпуклый только при половинном угле не больше 90 градусов
        if light.sector.cos_half_angle >= 0.0 and all(light.sector.contains_point(c) for c in corners):
            return INSIDE
        return PARTIAL

    # BEAM
    if query_sphere_cylinder(node.sphere, light.cylinder) == OUTSIDE:
        return OUTSIDE
    if not intersects_box_cylinder(Box.from_aabb(node.aabb), light.cylinder):
        return OUTSIDE
    if all(light.cylinder.contains_point(c) for c in corners):
        return INSIDE
    return PARTIAL


# --- источники света ---

def light_aabb(light: Light) -> AABB:
    """AABB области влияния источника (кроме направленного)."""
    if light.kind == LightKind.DIRECTIONAL:
        raise ValueError("Directional light has no bounded volume.")
    if light.kind == LightKind.SPOT:
        return aabb_of_sector(light.sector)
    if light.kind == LightKind.BEAM:
        return aabb_of_cylinder(light.cylinder)
    return aabb_of_sphere(light.sphere)


def intersects_light_convex_hull(light: Light, ch: ConvexHull) -> bool:
    if light.kind == LightKind.DIRECTIONAL:
        return True
    if not intersects_sphere_convex_hull(light.sphere, ch):
        return False
    if light.kind == LightKind.SPOT:
        return intersects_spherical_sector_convex_hull(light.sector, ch)
    if light.kind == LightKind.BEAM:
        return intersects_cylinder_convex_hull(light.cylinder, ch)
    return True


def is_light_completely_inside_aabb(light: Light, aabb: AABB) -> bool:
    """Область влияния источника целиком внутри aabb. Направленный свет — никогда."""
    if light.kind == LightKind.DIRECTIONAL:
        return False
    return is_completely_inside_aabb(light_aabb(light), aabb)
