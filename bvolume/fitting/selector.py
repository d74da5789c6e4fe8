"""
Выбор ограничивающих объёмов модели.

Базовый объём (параллелепипед или сфера) выбирается по меньшему объёму.
Специальный объём (эллипсоид или цилиндр) добавляется, только если он
заметно меньше лучшего базового. AABB вычисляется всегда.
"""

from __future__ import annotations

import math

import numpy as np

from bvolume import log
from bvolume.bounds import BoundsFlags, BoundsRecord
from bvolume.fitting.fitters import (
    calculate_aabb,
    fit_bounding_cylinder,
    fit_bounding_ellipsoid,
    fit_bounding_sphere,
)
from bvolume.fitting.principal_axes import calculate_principal_components
from bvolume.geombase.utils import as_points
from bvolume.settings import BoundsSettings, DEFAULT_SETTINGS
from bvolume.volumes.sphere import BoundingSphere


def _sphere_volume(radius: float) -> float:
    return 4.0 / 3.0 * math.pi * radius * radius * radius


def calculate_bounds(vertices: np.ndarray, settings: BoundsSettings = DEFAULT_SETTINGS) -> BoundsRecord:
    """
    Вычислить BoundsRecord для набора вершин.

    Raises:
        EmptyVertexSetError: если вершин нет
    """
    pca, box_center = calculate_principal_components(vertices, settings)
    v = as_points(vertices)
    extents = [axis.extent for axis in pca]
    log.debug(f"[BoundsSelector] Box center = {box_center}, "
              f"{extents[0]:g} x {extents[1]:g} x {extents[2]:g}")

    sphere = fit_bounding_sphere(v, pca)
    volume_box = extents[0] * extents[1] * extents[2]
    volume_sphere = sphere.volume()
    log.debug(f"[BoundsSelector] Bounding sphere: center {sphere.center}, radius {sphere.radius:g}")

    if volume_sphere > volume_box:
        box_radius = math.sqrt((extents[0] * 0.5) ** 2 + (extents[1] * 0.5) ** 2 + (extents[2] * 0.5) ** 2)
        if box_radius < sphere.radius:
            sphere = BoundingSphere(box_center.copy(), box_radius)
            volume_sphere = _sphere_volume(box_radius)
            log.debug(f"[BoundsSelector] Using bounding box for bounding sphere definition "
                      f"(radius = {box_radius:g})")

    if volume_box < volume_sphere:
        if extents[0] >= settings.line_segment_ratio * extents[1]:
            flags = BoundsFlags.PREFER_BOX_LINE_SEGMENT
        else:
            flags = BoundsFlags.PREFER_BOX
        best_volume = volume_box
    else:
        flags = BoundsFlags.PREFER_SPHERE
        best_volume = volume_sphere

    special = None
    # плоские модели (например, земля) не получают специального объёма
    if extents[2] > settings.flat_epsilon:
        ellipsoid = fit_bounding_ellipsoid(v, pca)
        volume_ellipsoid = ellipsoid.volume()
        cylinder = fit_bounding_cylinder(v, pca)
        volume_cylinder = cylinder.volume()
        log.debug(f"[BoundsSelector] Ellipsoid volume {volume_ellipsoid:g}, "
                  f"cylinder length {cylinder.length:g} radius {cylinder.radius:g} "
                  f"volume {volume_cylinder:g}, best volume {best_volume:g}")

        if _is_notably_smaller(volume_ellipsoid, best_volume, settings) and volume_ellipsoid <= volume_cylinder:
            special = ellipsoid
            best_volume = volume_ellipsoid
        elif _is_notably_smaller(volume_cylinder, best_volume, settings):
            special = cylinder
            best_volume = volume_cylinder

        if special is not None:
            flags |= BoundsFlags.PREFER_SPECIAL
            log.debug(f"[BoundsSelector] {special.kind.value} provides smallest bounding volume "
                      f"of {best_volume:g}")

    aabb = calculate_aabb(v)
    if settings.aabb_volume_ratio * aabb.volume() <= volume_box:
        flags |= BoundsFlags.PREFER_AABB

    record = BoundsRecord(pca, box_center, aabb, sphere, flags, special)
    log.debug(f"[BoundsSelector] Bounding volume selected: {record.describe()}")
    return record


def _is_notably_smaller(volume: float, best_volume: float, settings: BoundsSettings) -> bool:
    return (volume < settings.special_volume_ratio * best_volume
            and best_volume - volume > settings.special_volume_epsilon)
