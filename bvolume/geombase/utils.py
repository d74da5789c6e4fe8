"""Небольшие скалярные и векторные утилиты, общие для всех модулей."""

from __future__ import annotations

import math
from typing import Callable, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


def as_point(p) -> np.ndarray:
    """Привести вход к вектору float64 формы (3,)."""
    arr = np.asarray(p, dtype=np.float64).reshape(3)
    return arr


def as_points(points) -> np.ndarray:
    """Привести вход к массиву float64 формы (N, 3)."""
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim == 1 and arr.shape[0] == 3:
        arr = arr.reshape(1, 3)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"Points must be a Nx3 array, got shape {arr.shape}.")
    return arr


def magnitude(v: np.ndarray) -> float:
    return math.sqrt(float(np.dot(v, v)))


def normalize(v: np.ndarray) -> np.ndarray:
    """Единичный вектор того же направления. Нулевой вектор возвращается как есть."""
    n = magnitude(v)
    if n == 0.0:
        return np.array(v, dtype=np.float64)
    return np.asarray(v, dtype=np.float64) / n


def perpendicular_basis(axis: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Два единичных вектора, ортогональных axis и друг другу."""
    if abs(axis[0]) < 0.9:
        t1 = np.cross(axis, np.array([1.0, 0.0, 0.0]))
    else:
        t1 = np.cross(axis, np.array([0.0, 1.0, 0.0]))
    t1 = normalize(t1)
    t2 = np.cross(axis, t1)
    return t1, t2


def sort3_descending(items: Sequence[T], key: Callable[[T], float]) -> list[T]:
    """
    Отсортировать ровно три элемента по убыванию ключа.

    Три сравнения с обменом (пузырёк на трёх элементах). Обмен выполняется
    только при строгом неравенстве, поэтому порядок равных элементов сохраняется.
    """
    if len(items) != 3:
        raise ValueError("sort3_descending expects exactly three items")
    a = list(items)
    if key(a[0]) < key(a[1]):
        a[0], a[1] = a[1], a[0]
    if key(a[1]) < key(a[2]):
        a[1], a[2] = a[2], a[1]
    if key(a[0]) < key(a[1]):
        a[0], a[1] = a[1], a[0]
    return a
