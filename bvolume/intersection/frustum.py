"""
Бесконечные теневые объёмы против пирамиды видимости.

Оба теста получают косинус и синус наибольшего углового полуразмера объекта,
видимого из вершины (позиции источника света).
"""

from __future__ import annotations

import numpy as np

from bvolume.geombase.utils import normalize
from bvolume.intersection.hull import max_cone_dot
from bvolume.volumes.frustum import Frustum
from bvolume.volumes.sector import InfinitePyramidBase, InfiniteSphericalSector


def _outside_by_cone(apex: np.ndarray, axis: np.ndarray, frustum: Frustum,
                     cos_half_angle: float, sin_half_angle: float) -> bool:
    """Бесконечный конус из apex целиком снаружи одной из плоскостей frustum."""
    f = frustum.hull.hull.signed_distances(apex)
    for i, plane in enumerate(frustum.planes):
        # конус уходит от плоскости, и вершина снаружи
        if max_cone_dot(plane[:3], axis, cos_half_angle, sin_half_angle) <= 0.0 and f[i] <= 0.0:
            return True
    return False


def pyramid_planes(pyramid: InfinitePyramidBase) -> np.ndarray:
    """
    Плоскости пирамиды с нормалями внутрь: боковые через вершину и каждое
    ребро основания, затем плоскость основания.
    """
    apex = pyramid.apex
    base = pyramid.base_vertices
    inner = pyramid.base_center()
    planes = []
    n_vertices = pyramid.nu_vertices
    for j in range(n_vertices):
        b0 = base[j]
        b1 = base[(j + 1) % n_vertices]
        n = normalize(np.cross(b0 - apex, b1 - apex))
        if np.dot(n, inner - apex) < 0.0:
            n = -n
        planes.append([n[0], n[1], n[2], -float(np.dot(n, apex))])
    n = normalize(np.cross(base[1] - base[0], base[2] - base[0]))
    if np.dot(n, inner - apex) < 0.0:
        n = -n
    planes.append([n[0], n[1], n[2], -float(np.dot(n, base[0]))])
    return np.array(planes)


def intersects_infinite_pyramid_frustum(
    pyramid: InfinitePyramidBase, frustum: Frustum, cos_half_angle: float, sin_half_angle: float
) -> bool:
    """
    Пересекает ли бесконечная проекция основания пирамиды пирамиду видимости.

    Консервативно: возможны ложные срабатывания.
    """
    if _outside_by_cone(pyramid.apex, pyramid.axis(), frustum, cos_half_angle, sin_half_angle):
        return False

    # основание и все направления от вершины через основание снаружи плоскости
    base = pyramid.base_vertices
    directions = base - pyramid.apex
    for plane in frustum.planes:
        n = plane[:3]
        if np.all(base @ n + plane[3] <= 0.0) and np.all(directions @ n <= 0.0):
            return False

    # все вершины frustum снаружи одной из плоскостей пирамиды
    vertices = frustum.vertices
    for plane in pyramid_planes(pyramid):
        if np.all(vertices @ plane[:3] + plane[3] < 0.0):
            return False
    return True


def intersects_infinite_sector_frustum(
    sector: InfiniteSphericalSector, frustum: Frustum, cos_half_angle: float, sin_half_angle: float
) -> bool:
    """Пересекает ли бесконечный конус пирамиду видимости. Консервативно."""
    if _outside_by_cone(sector.center, sector.axis, frustum, cos_half_angle, sin_half_angle):
        return False
    # все вершины frustum позади вершины конуса
    behind = (frustum.vertices - sector.center) @ sector.axis
    if np.all(behind < 0.0) and cos_half_angle >= 0.0:
        return False
    return True
