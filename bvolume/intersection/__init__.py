"""
Проверки пересечения и классификация положения ограничивающих объёмов.

intersects_* возвращают bool, query_* — BoundsCheckResult.
Проверки против выпуклых оболочек консервативны: ложные срабатывания
возможны, пропуски — нет.
"""

from .result import BoundsCheckResult
from .basic import (
    intersects_aabb_aabb,
    intersects_point_aabb,
    intersects_point_convex_hull,
    intersects_sphere_sphere,
    intersects_point_sphere,
    intersects_sphere_aabb,
    is_completely_inside_aabb,
    is_sphere_completely_inside_sphere,
)
from .box import (
    intersects_point_box,
    intersects_box_sphere,
    intersects_box_cylinder,
    intersects_sphere_cylinder,
    query_sphere_cylinder,
)
from .hull import (
    max_cone_dot,
    intersects_sphere_convex_hull,
    intersects_aabb_convex_hull,
    intersects_box_convex_hull,
    intersects_line_segment_box_convex_hull,
    intersects_ellipsoid_convex_hull,
    intersects_cylinder_convex_hull,
    intersects_half_cylinder_convex_hull,
    intersects_spherical_sector_convex_hull,
    intersects_hull_convex_hull,
    intersects_convex_hull_with_vertices_convex_hull,
    intersects_convex_hull_full_convex_hull,
)
from .frustum import (
    pyramid_planes,
    intersects_infinite_pyramid_frustum,
    intersects_infinite_sector_frustum,
)
from .scene import (
    intersects_sphere_spherical_sector,
    is_sphere_completely_inside_spherical_sector,
    intersects_record_convex_hull,
    intersects_record_frustum,
    intersects_record_sphere,
    query_record_sphere,
    intersects_record_light,
    query_record_light,
    query_record_light_full,
    query_octree_convex_hull,
    query_octree_sphere,
    query_octree_light,
    light_aabb,
    intersects_light_convex_hull,
    is_light_completely_inside_aabb,
)

__all__ = [
    'BoundsCheckResult',
    'intersects_aabb_aabb',
    'intersects_point_aabb',
    'intersects_point_convex_hull',
    'intersects_sphere_sphere',
    'intersects_point_sphere',
    'intersects_sphere_aabb',
    'is_completely_inside_aabb',
    'is_sphere_completely_inside_sphere',
    'intersects_point_box',
    'intersects_box_sphere',
    'intersects_box_cylinder',
    'intersects_sphere_cylinder',
    'query_sphere_cylinder',
    'max_cone_dot',
    'intersects_sphere_convex_hull',
    'intersects_aabb_convex_hull',
    'intersects_box_convex_hull',
    'intersects_line_segment_box_convex_hull',
    'intersects_ellipsoid_convex_hull',
    'intersects_cylinder_convex_hull',
    'intersects_half_cylinder_convex_hull',
    'intersects_spherical_sector_convex_hull',
    'intersects_hull_convex_hull',
    'intersects_convex_hull_with_vertices_convex_hull',
    'intersects_convex_hull_full_convex_hull',
    'pyramid_planes',
    'intersects_infinite_pyramid_frustum',
    'intersects_infinite_sector_frustum',
    'intersects_sphere_spherical_sector',
    'is_sphere_completely_inside_spherical_sector',
    'intersects_record_convex_hull',
    'intersects_record_frustum',
    'intersects_record_sphere',
    'query_record_sphere',
    'intersects_record_light',
    'query_record_light',
    'query_record_light_full',
    'query_octree_convex_hull',
    'query_octree_sphere',
    'query_octree_light',
    'light_aabb',
    'intersects_light_convex_hull',
    'is_light_completely_inside_aabb',
]
