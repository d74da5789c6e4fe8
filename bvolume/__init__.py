"""
bvolume - bounding-volume fitting and intersection classification.

Вычисляет для сетки набор ограничивающих объёмов (AABB, ориентированный
параллелепипед, сфера, эллипсоид, цилиндр), выбирает самый экономный для
проверок и предоставляет проверки пересечения между ними.
"""

__version__ = "0.1.0"

from bvolume.settings import BoundsSettings, DEFAULT_SETTINGS
from bvolume.errors import BoundsError, BoundsContractError, EmptyVertexSetError
from bvolume.geombase import AABB
from bvolume.bounds import BoundsFlags, BoundsRecord
from bvolume.fitting import calculate_bounds, calculate_principal_components, calculate_eigensystem
from bvolume.intersection import BoundsCheckResult

__all__ = [
    '__version__',
    'BoundsSettings',
    'DEFAULT_SETTINGS',
    'BoundsError',
    'BoundsContractError',
    'EmptyVertexSetError',
    'AABB',
    'BoundsFlags',
    'BoundsRecord',
    'calculate_bounds',
    'calculate_principal_components',
    'calculate_eigensystem',
    'BoundsCheckResult',
]
