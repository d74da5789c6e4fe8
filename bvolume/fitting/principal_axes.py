"""Главные оси набора вершин (PCA) и ориентированный параллелепипед вдоль них."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from bvolume.errors import EmptyVertexSetError
from bvolume.fitting.eigen import calculate_eigensystem
from bvolume.geombase.utils import as_points, normalize, sort3_descending
from bvolume.settings import BoundsSettings, DEFAULT_SETTINGS
from bvolume.volumes.pca import PCAAxis


def covariance_matrix(vertices: np.ndarray, mean: np.ndarray) -> np.ndarray:
    """Ковариационная матрица 3x3, нормированная на число вершин."""
    d = vertices - mean
    return (d.T @ d) / float(vertices.shape[0])


def calculate_principal_components(
    vertices: np.ndarray, settings: BoundsSettings = DEFAULT_SETTINGS
) -> Tuple[List[PCAAxis], np.ndarray]:
    """
    Вычислить три главные оси и центр ориентированного параллелепипеда.

    Оси отсортированы по убыванию размера (устойчиво при равенстве).

    Returns:
        (axes, box_center)

    Raises:
        EmptyVertexSetError: если вершин нет
    """
    if np.size(vertices) == 0:
        raise EmptyVertexSetError("Cannot compute principal components of an empty vertex set.")
    v = as_points(vertices)

    mean = np.mean(v, axis=0)
    _, r = calculate_eigensystem(covariance_matrix(v, mean), settings)

    directions = [normalize(r[:, i]) for i in range(3)]
    projections = v @ np.array(directions).T
    min_dot = projections.min(axis=0)
    max_dot = projections.max(axis=0)

    center = np.zeros(3)
    axes = []
    for i in range(3):
        center += (min_dot[i] + max_dot[i]) * 0.5 * directions[i]
        axes.append(PCAAxis(directions[i], max_dot[i] - min_dot[i]))

    return sort3_descending(axes, key=lambda a: a.extent), center
