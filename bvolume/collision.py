"""
Описание форм столкновений, построенных по записи ограничивающих объёмов.

Сам физический движок здесь не воспроизводится: функции возвращают
параметры формы (размеры, масштаб, смещение центра) для передачи ему.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np

from bvolume.bounds import BoundsFlags, BoundsRecord
from bvolume.errors import BoundsContractError
from bvolume.geombase.utils import as_points
from bvolume.volumes.types import BoundingVolumeType


class CollisionShapeKind(str, Enum):
    STATIC_MESH = "static_mesh"
    SPHERE = "sphere"
    BOX = "box"
    CYLINDER = "cylinder"
    ELLIPSOID = "ellipsoid"
    CAPSULE = "capsule"
    CONVEX_HULL = "convex_hull"


@dataclass
class CollisionShapeSpec:
    """
    Параметры формы столкновений.

    - half_extents: полуразмеры (коробка, цилиндр вдоль Z)
    - radius, length: сфера, эллипсоид, капсула (ось X)
    - local_scaling: масштаб по локальным осям (эллипсоид, капсула)
    - center_offset: смещение центра формы от начала координат модели
    - points: вершины (выпуклая оболочка, статическая сетка)
    - is_static / is_absolute: форма неподвижна / задана в мировых координатах
    """

    kind: CollisionShapeKind
    half_extents: np.ndarray = field(default_factory=lambda: np.zeros(3))
    radius: float = 0.0
    length: float = 0.0
    local_scaling: np.ndarray = field(default_factory=lambda: np.ones(3))
    center_offset: np.ndarray = field(default_factory=lambda: np.zeros(3))
    points: Optional[np.ndarray] = None
    is_static: bool = False
    is_absolute: bool = False

    def __post_init__(self):
        check_placement(self.is_static, self.is_absolute)


def check_placement(is_static: bool, is_absolute: bool) -> None:
    """Форма в мировых координатах обязана быть статической."""
    if is_absolute and not is_static:
        raise BoundsContractError("Collision shape in absolute coordinates must be static.")


def _box_dimension(record: BoundsRecord, world_axis: int) -> float:
    """Размер вдоль мировой оси; главные оси считаются выровненными по мировым."""
    for axis in record.pca[:2]:
        if abs(axis.direction[world_axis]) > 0.5:
            return axis.extent
    return record.pca[2].extent


def _require_special(record: BoundsRecord, kind: BoundingVolumeType):
    if record.special is None or record.special.kind != kind:
        raise BoundsContractError(f"Bounds record has no {kind.value} special volume.")
    return record.special


def collision_shape_spec(
    record: BoundsRecord,
    kind: CollisionShapeKind,
    scaling: float = 1.0,
    vertices: Optional[np.ndarray] = None,
) -> CollisionShapeSpec:
    """
    Построить параметры формы столкновений из записи модели.

    Args:
        record: Объёмы модели в её собственных координатах
        kind: Требуемый тип формы
        scaling: Равномерный масштаб экземпляра
        vertices: Вершины модели (для CONVEX_HULL и STATIC_MESH)

    Raises:
        BoundsContractError: запись не содержит требуемого объёма
    """
    if kind in (CollisionShapeKind.CONVEX_HULL, CollisionShapeKind.STATIC_MESH):
        if vertices is None:
            raise BoundsContractError(f"{kind.value} collision shape requires vertices.")
        points = as_points(vertices) * scaling
        is_static = kind == CollisionShapeKind.STATIC_MESH
        return CollisionShapeSpec(kind, points=points, is_static=is_static, is_absolute=is_static)

    if kind == CollisionShapeKind.SPHERE:
        return CollisionShapeSpec(kind, radius=record.sphere.radius * scaling,
                                  center_offset=record.sphere.center * scaling)

    if kind == CollisionShapeKind.BOX:
        dims = np.array([_box_dimension(record, i) for i in range(3)]) * scaling
        return CollisionShapeSpec(kind, half_extents=dims * 0.5,
                                  center_offset=record.box_center * scaling)

    if kind == CollisionShapeKind.CYLINDER:
        cylinder = _require_special(record, BoundingVolumeType.CYLINDER)
        return CollisionShapeSpec(
            kind,
            half_extents=np.array([cylinder.radius, cylinder.radius, cylinder.length * 0.5]) * scaling,
            radius=cylinder.radius * scaling,
            length=cylinder.length * scaling,
            center_offset=cylinder.center * scaling,
        )

    if kind == CollisionShapeKind.ELLIPSOID:
        ellipsoid = _require_special(record, BoundingVolumeType.ELLIPSOID)
        radii = ellipsoid.semi_axis_lengths()
        return CollisionShapeSpec(
            kind,
            radius=float(radii[0]) * scaling,
            local_scaling=np.array([1.0, radii[1] / radii[0], radii[2] / radii[0]]),
            center_offset=ellipsoid.center * scaling,
        )

    if kind == CollisionShapeKind.CAPSULE:
        capsule = record.collision_shape
        if capsule is None or not record.flags & BoundsFlags.SPECIAL_IS_COLLISION_SHAPE:
            raise BoundsContractError("Bounds record has no capsule collision shape.")
        return CollisionShapeSpec(
            kind,
            radius=capsule.radius * scaling,
            length=capsule.length * scaling,
            local_scaling=np.array([1.0, capsule.radius_y, capsule.radius_z]),
        )

    raise ValueError(f"Unknown collision shape kind: {kind}")
