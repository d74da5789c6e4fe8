"""
Типы ограничивающих объёмов.

Каждая форма имеет атрибут класса ``kind`` (BoundingVolumeType), по которому
различаются варианты специального объёма в BoundsRecord.
"""

from .types import BoundingVolumeType
from .pca import PCAAxis
from .sphere import BoundingSphere
from .convex_hull import ConvexHull, Hull, ConvexHullWithVertices, ConvexHullFull, plane_from_point_normal
from .box import Box
from .ellipsoid import Ellipsoid
from .cylinder import Cylinder
from .capsule import Capsule
from .sector import SphericalSector, InfiniteSphericalSector, InfinitePyramidBase, HalfCylinder
from .frustum import Frustum
from .octree import OctreeNodeBounds
from .light import Light, LightKind
from .conversions import (
    aabb_of_sphere,
    aabb_of_cylinder,
    aabb_of_sector,
    bounding_sphere_of_cylinder,
    bounding_sphere_of_sector,
    bounding_cylinder_of_sector,
)

__all__ = [
    'BoundingVolumeType',
    'PCAAxis',
    'BoundingSphere',
    'ConvexHull',
    'Hull',
    'ConvexHullWithVertices',
    'ConvexHullFull',
    'plane_from_point_normal',
    'Box',
    'Ellipsoid',
    'Cylinder',
    'Capsule',
    'SphericalSector',
    'InfiniteSphericalSector',
    'InfinitePyramidBase',
    'HalfCylinder',
    'Frustum',
    'OctreeNodeBounds',
    'Light',
    'LightKind',
    'aabb_of_sphere',
    'aabb_of_cylinder',
    'aabb_of_sector',
    'bounding_sphere_of_cylinder',
    'bounding_sphere_of_sector',
    'bounding_cylinder_of_sector',
]
