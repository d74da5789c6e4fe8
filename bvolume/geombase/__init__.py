"""
Базовые геометрические классы (Geometric Base).

Содержит:
- AABB - ограничивающий параллелепипед, выровненный по осям
- утилиты: normalize, perpendicular_basis, sort3_descending
- gjk_intersects - проверка пересечения выпуклых тел по опорным функциям
"""

from .aabb import AABB
from .gjk import gjk_intersects
from .utils import (
    as_point,
    as_points,
    magnitude,
    normalize,
    perpendicular_basis,
    sort3_descending,
)

__all__ = [
    'AABB',
    'gjk_intersects',
    'as_point',
    'as_points',
    'magnitude',
    'normalize',
    'perpendicular_basis',
    'sort3_descending',
]
