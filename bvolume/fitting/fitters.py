"""
Подбор ограничивающих фигур по главным осям.

Сфера строится инкрементально: начальная сфера натянута на две вершины
с крайними проекциями на главную ось, затем один проход по вершинам
раздувает её до каждой вершины, оказавшейся снаружи. Результат зависит
от порядка вершин, но детерминирован.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from bvolume.geombase.aabb import AABB
from bvolume.geombase.utils import as_points
from bvolume.volumes.cylinder import Cylinder
from bvolume.volumes.ellipsoid import Ellipsoid
from bvolume.volumes.pca import PCAAxis
from bvolume.volumes.sphere import BoundingSphere


def _grow_sphere(points: np.ndarray, seed_axis: np.ndarray) -> Tuple[np.ndarray, float]:
    """
    Инкрементальная сфера вокруг points (N x 3).

    Возвращает (center, radius). Каждая вершина снаружи текущей сферы
    сдвигает центр к ней так, чтобы противоположная точка сферы осталась
    на новой границе.
    """
    projections = points @ seed_axis
    p_min = points[int(np.argmin(projections))]
    p_max = points[int(np.argmax(projections))]

    center = (p_min + p_max) * 0.5
    d = p_max - center
    radius_sq = float(np.dot(d, d))
    radius = math.sqrt(radius_sq)

    n = points.shape[0]
    i = 0
    while i < n:
        diff = points[i:] - center
        outside = np.nonzero(np.einsum("ij,ij->i", diff, diff) > radius_sq)[0]
        if len(outside) == 0:
            break
        j = i + int(outside[0])
        p = points[j]
        pc = p - center
        g = center - radius * pc / math.sqrt(float(np.dot(pc, pc)))
        center = (g + p) * 0.5
        d = p - center
        radius_sq = float(np.dot(d, d))
        radius = math.sqrt(radius_sq)
        i = j + 1

    return center, radius


def fit_bounding_sphere(vertices: np.ndarray, pca: Sequence[PCAAxis]) -> BoundingSphere:
    """Сфера, содержащая все вершины. Начальная пара — крайние вершины вдоль pca[0]."""
    center, radius = _grow_sphere(as_points(vertices), pca[0].direction)
    return BoundingSphere(center, radius)


def fit_bounding_ellipsoid(vertices: np.ndarray, pca: Sequence[PCAAxis]) -> Ellipsoid:
    """
    Эллипсоид вдоль главных осей.

    Вершины масштабируются так, что все размеры PCA становятся единичными,
    в этом пространстве строится сфера, затем она отображается обратно.
    Требует ненулевых размеров по всем трём осям.
    """
    v = as_points(vertices)
    r = np.array([axis.direction for axis in pca]).T
    extents = np.array([axis.extent for axis in pca])

    to_unit = r @ np.diag(1.0 / extents) @ r.T
    scaled = v @ to_unit.T
    center, radius = _grow_sphere(scaled, pca[0].direction)

    from_unit = r @ np.diag(extents) @ r.T
    axes = np.array([pca[i].direction * (extents[i] * radius) for i in range(3)])
    return Ellipsoid(from_unit @ center, axes)


def fit_bounding_cylinder(vertices: np.ndarray, pca: Sequence[PCAAxis]) -> Cylinder:
    """
    Цилиндр вдоль главной оси pca[0].

    Окружность строится по проекциям вершин на плоскость, перпендикулярную
    оси, начиная с крайних вершин вдоль pca[1]. Длина равна pca[0].extent.
    """
    v = as_points(vertices)
    axis = pca[0].direction
    along = v @ axis
    flat = v - np.outer(along, axis)
    circle_center, radius = _grow_sphere(flat, pca[1].direction)

    # окружность лежит в плоскости через начало координат
    circle_center = circle_center - float(np.dot(circle_center, axis)) * axis
    mid = (float(along.min()) + float(along.max())) * 0.5
    return Cylinder(circle_center + mid * axis, axis, pca[0].extent, radius)


def calculate_aabb(vertices: np.ndarray) -> AABB:
    """Выровненный по осям параллелепипед вершин."""
    aabb = AABB.empty()
    if np.size(vertices) == 0:
        return aabb
    v = as_points(vertices)
    aabb.extend(v.min(axis=0))
    aabb.extend(v.max(axis=0))
    return aabb
