"""Теги типов ограничивающих объёмов."""

from enum import Enum


class BoundingVolumeType(Enum):
    SPHERE = "sphere"
    BOX = "box"
    ELLIPSOID = "ellipsoid"
    CYLINDER = "cylinder"
    CAPSULE = "capsule"
    CONVEX_HULL = "convex_hull"
    SPHERICAL_SECTOR = "spherical_sector"
    HALF_CYLINDER = "half_cylinder"
