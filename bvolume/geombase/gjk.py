"""
GJK: проверка пересечения двух выпуклых тел по их опорным функциям.

Тела пересекаются, когда начало координат лежит в разности Минковского
A - B. Алгоритм строит симплекс из опорных точек разности и на каждом шаге
заменяет его ближайшей к началу координат гранью. Если найдено направление
v, в котором вся разность лежит по одну сторону от нуля (v·w > 0 для
ближайшей опорной точки w), тела разделены.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

SupportFunction = Callable[[np.ndarray], np.ndarray]

_MAX_ITERATIONS = 64
_DEGENERATE_EPSILON = 1.0e-12


def _dot(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.dot(a, b))


def _closest_on_segment(a, b):
    ab = b - a
    denom = _dot(ab, ab)
    if denom <= 0.0:
        return a, [a]
    t = -_dot(a, ab) / denom
    if t <= 0.0:
        return a, [a]
    if t >= 1.0:
        return b, [b]
    return a + t * ab, [a, b]


def _closest_on_triangle(a, b, c):
    """Ближайшая к началу координат точка треугольника и его задействованные вершины."""
    ab = b - a
    ac = c - a
    n = np.cross(ab, ac)
    if _dot(n, n) <= _DEGENERATE_EPSILON * _dot(ab, ab) * _dot(ac, ac):
        candidates = [_closest_on_segment(a, b), _closest_on_segment(a, c), _closest_on_segment(b, c)]
        return min(candidates, key=lambda item: _dot(item[0], item[0]))

    d1 = -_dot(ab, a)
    d2 = -_dot(ac, a)
    if d1 <= 0.0 and d2 <= 0.0:
        return a, [a]

    d3 = -_dot(ab, b)
    d4 = -_dot(ac, b)
    if d3 >= 0.0 and d4 <= d3:
        return b, [b]

    vc = d1 * d4 - d3 * d2
    if vc <= 0.0 and d1 >= 0.0 and d3 <= 0.0:
        return a + (d1 / (d1 - d3)) * ab, [a, b]

    d5 = -_dot(ab, c)
    d6 = -_dot(ac, c)
    if d6 >= 0.0 and d5 <= d6:
        return c, [c]

    vb = d5 * d2 - d1 * d6
    if vb <= 0.0 and d2 >= 0.0 and d6 <= 0.0:
        return a + (d2 / (d2 - d6)) * ac, [a, c]

    va = d3 * d6 - d5 * d4
    if va <= 0.0 and d4 - d3 >= 0.0 and d5 - d6 >= 0.0:
        t = (d4 - d3) / ((d4 - d3) + (d5 - d6))
        return b + t * (c - b), [b, c]

    denom = va + vb + vc
    return a + ab * (vb / denom) + ac * (vc / denom), [a, b, c]


def _closest_on_tetrahedron(a, b, c, d):
    """Пустой список вершин не возвращается: при нуле внутри остаётся весь тетраэдр."""
    faces = ((a, b, c, d), (a, c, d, b), (a, d, b, c), (b, d, c, a))
    scale = max(_dot(b - a, b - a), _dot(c - a, c - a), _dot(d - a, d - a))
    volume = _dot(b - a, np.cross(c - a, d - a))
    degenerate = volume * volume <= _DEGENERATE_EPSILON * scale ** 3

    best = None
    inside = True
    for p0, p1, p2, opposite in faces:
        if not degenerate:
            n = np.cross(p1 - p0, p2 - p0)
            # начало координат и противолежащая вершина по разные стороны грани
            if -_dot(p0, n) * _dot(opposite - p0, n) >= 0.0:
                continue
        inside = False
        candidate = _closest_on_triangle(p0, p1, p2)
        if best is None or _dot(candidate[0], candidate[0]) < _dot(best[0], best[0]):
            best = candidate

    if inside and not degenerate:
        return np.zeros(3), [a, b, c, d]
    return best


def _closest_on_simplex(simplex):
    if len(simplex) == 1:
        return simplex[0], simplex
    if len(simplex) == 2:
        return _closest_on_segment(*simplex)
    if len(simplex) == 3:
        return _closest_on_triangle(*simplex)
    return _closest_on_tetrahedron(*simplex)


def gjk_intersects(support_a: SupportFunction, support_b: SupportFunction,
                   initial_direction: np.ndarray, scale: float = 1.0) -> bool:
    """
    Пересекаются ли выпуклые тела A и B.

    Args:
        support_a, support_b: Опорные функции: direction -> самая дальняя точка тела
        initial_direction: Стартовое направление (например, между центрами)
        scale: Характерный размер тел, задаёт допуск касания

    Касание считается пересечением.
    """
    def support(direction):
        return support_a(direction) - support_b(-direction)

    direction = np.asarray(initial_direction, dtype=np.float64)
    if _dot(direction, direction) == 0.0:
        direction = np.array([1.0, 0.0, 0.0])

    tolerance = (_DEGENERATE_EPSILON * max(scale, 1.0)) ** 2
    v = support(direction)
    simplex = [v]
    for _ in range(_MAX_ITERATIONS):
        if _dot(v, v) <= tolerance:
            return True
        w = support(-v)
        if _dot(v, w) > 0.0:
            return False
        simplex.append(w)
        v, simplex = _closest_on_simplex(simplex)
        if len(simplex) == 4:
            return True
    return True
