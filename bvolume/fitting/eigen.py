"""
Собственные значения и векторы симметричной матрицы 3x3 методом Якоби.

Циклический обход: в каждом проходе по очереди зануляются элементы (0,1),
(0,2), (1,2) плоскими вращениями. Вращения накапливаются в матрице R,
столбцы которой и есть собственные векторы: R.T @ M @ R диагональна.
"""

from __future__ import annotations

import math

import numpy as np

from bvolume import log
from bvolume.settings import BoundsSettings, DEFAULT_SETTINGS


def _rotation_tangent(u: float) -> float:
    """Тангенс угла вращения, меньшего по модулю корня t^2 + 2ut - 1 = 0."""
    u2p1 = u * u + 1.0
    if u2p1 != u * u:
        t = math.sqrt(u2p1) - abs(u)
        return t if u >= 0.0 else -t
    return 0.5 / u


def _rotate(m: np.ndarray, r: np.ndarray, p: int, q: int, k: int) -> None:
    """
    Занулить m[p, q], k — оставшийся индекс.

    Работает на месте; m остаётся симметричной.
    """
    u = (m[q, q] - m[p, p]) * 0.5 / m[p, q]
    t = _rotation_tangent(u)
    c = 1.0 / math.sqrt(t * t + 1.0)
    s = c * t

    mpq = m[p, q]
    m[p, p] -= t * mpq
    m[q, q] += t * mpq
    m[p, q] = m[q, p] = 0.0

    mpk = m[p, k]
    mqk = m[q, k]
    m[p, k] = m[k, p] = c * mpk - s * mqk
    m[q, k] = m[k, q] = s * mpk + c * mqk

    col_p = r[:, p].copy()
    col_q = r[:, q].copy()
    r[:, p] = c * col_p - s * col_q
    r[:, q] = s * col_p + c * col_q


def calculate_eigensystem(m: np.ndarray, settings: BoundsSettings = DEFAULT_SETTINGS):
    """
    Разложить симметричную матрицу 3x3.

    Args:
        m: Симметричная матрица 3x3 (не изменяется)
        settings: Порог сходимости и предельное число проходов

    Returns:
        (eigenvalues, R): массив из трёх собственных значений и матрица 3x3,
        i-й столбец которой — собственный вектор для eigenvalues[i].
        При отсутствии сходимости возвращается текущее приближение.
    """
    a = np.array(m, dtype=np.float64).reshape(3, 3)
    r = np.identity(3)
    epsilon = settings.eigen_epsilon

    for _ in range(settings.eigen_max_sweeps):
        if abs(a[0, 1]) < epsilon and abs(a[0, 2]) < epsilon and abs(a[1, 2]) < epsilon:
            break
        if a[0, 1] != 0.0:
            _rotate(a, r, 0, 1, 2)
        if a[0, 2] != 0.0:
            _rotate(a, r, 0, 2, 1)
        if a[1, 2] != 0.0:
            _rotate(a, r, 1, 2, 0)
    else:
        if abs(a[0, 1]) >= epsilon or abs(a[0, 2]) >= epsilon or abs(a[1, 2]) >= epsilon:
            log.debug(f"[EigenSolver] No convergence after {settings.eigen_max_sweeps} sweeps, "
                      f"off-diagonal = ({a[0, 1]:g}, {a[0, 2]:g}, {a[1, 2]:g})")

    return np.array([a[0, 0], a[1, 1], a[2, 2]]), r
