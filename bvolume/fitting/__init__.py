"""
Подбор ограничивающих объёмов по вершинам модели.

Содержит:
- calculate_eigensystem - метод Якоби для симметричной матрицы 3x3
- calculate_principal_components - главные оси и ориентированный параллелепипед
- fit_bounding_sphere / fit_bounding_ellipsoid / fit_bounding_cylinder / calculate_aabb
- calculate_bounds - выбор объёмов и флагов предпочтения
"""

from .eigen import calculate_eigensystem
from .principal_axes import calculate_principal_components, covariance_matrix
from .fitters import fit_bounding_sphere, fit_bounding_ellipsoid, fit_bounding_cylinder, calculate_aabb
from .selector import calculate_bounds

__all__ = [
    'calculate_eigensystem',
    'calculate_principal_components',
    'covariance_matrix',
    'fit_bounding_sphere',
    'fit_bounding_ellipsoid',
    'fit_bounding_cylinder',
    'calculate_aabb',
    'calculate_bounds',
]
