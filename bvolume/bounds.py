"""
BoundsRecord — набор ограничивающих объёмов одной модели и флаги предпочтения.

Флаги говорят потребителю (отсечению по видимости, свету, физике), какой
из объёмов дешевле и точнее всего проверять.
"""

from __future__ import annotations

from enum import IntFlag
from typing import Optional, Union

import numpy as np

from bvolume.geombase.aabb import AABB
from bvolume.volumes.box import Box
from bvolume.volumes.capsule import Capsule
from bvolume.volumes.cylinder import Cylinder
from bvolume.volumes.ellipsoid import Ellipsoid
from bvolume.volumes.pca import PCAAxis
from bvolume.volumes.sphere import BoundingSphere

SpecialVolume = Union[Ellipsoid, Cylinder]


class BoundsFlags(IntFlag):
    NONE = 0
    PREFER_BOX = 1
    PREFER_BOX_LINE_SEGMENT = 2
    PREFER_SPHERE = 4
    PREFER_AABB = 8
    PREFER_SPECIAL = 16
    SPECIAL_IS_COLLISION_SHAPE = 32

    # Любой из вариантов проверки параллелепипеда
    BOX_ANY = PREFER_BOX | PREFER_BOX_LINE_SEGMENT


class BoundsRecord:
    """
    Ограничивающие объёмы модели.

    Параметры:
        pca: Три главные оси, отсортированные по убыванию размера
        box_center: Центр ориентированного параллелепипеда
        aabb: Выровненный по осям параллелепипед
        sphere: Ограничивающая сфера
        flags: BoundsFlags
        special: Ellipsoid, Cylinder или None
        collision_shape: Capsule или None
    """

    __slots__ = ("pca", "box_center", "aabb", "sphere", "flags", "special", "collision_shape")

    def __init__(
        self,
        pca,
        box_center: np.ndarray,
        aabb: AABB,
        sphere: BoundingSphere,
        flags: BoundsFlags = BoundsFlags.NONE,
        special: Optional[SpecialVolume] = None,
        collision_shape: Optional[Capsule] = None,
    ):
        self.pca = tuple(pca)
        if len(self.pca) != 3:
            raise ValueError("BoundsRecord requires exactly three PCA axes.")
        self.box_center = np.asarray(box_center, dtype=np.float64).reshape(3)
        self.aabb = aabb
        self.sphere = sphere
        self.flags = BoundsFlags(flags)
        self.special = special
        self.collision_shape = collision_shape

    def box(self) -> Box:
        return Box(self.box_center, self.pca)

    def box_volume(self) -> float:
        return self.pca[0].extent * self.pca[1].extent * self.pca[2].extent

    def has(self, flag: BoundsFlags) -> bool:
        return bool(self.flags & flag)

    @property
    def special_kind(self):
        """Тип специального объёма или None."""
        if self.special is None:
            return None
        return self.special.kind

    def transform_by(self, rotation: np.ndarray, translation: np.ndarray, scale: float = 1.0) -> "BoundsRecord":
        """Объёмы экземпляра модели в мировых координатах."""
        rot = np.asarray(rotation, dtype=np.float64)
        translation = np.asarray(translation, dtype=np.float64)
        special = None
        if self.special is not None:
            special = self.special.transform_by(rot, translation, scale)
        return BoundsRecord(
            [axis.transform_by(rot, scale) for axis in self.pca],
            rot @ (self.box_center * scale) + translation,
            self.aabb.transform_by(rot, translation, scale),
            self.sphere.transform_by(rot, translation, scale),
            self.flags,
            special,
            self.collision_shape,
        )

    def describe(self) -> str:
        """Короткое описание выбранных объёмов для журнала."""
        if self.flags & BoundsFlags.PREFER_BOX_LINE_SEGMENT:
            basic = "Box (line segment test)"
        elif self.flags & BoundsFlags.PREFER_BOX:
            basic = "Box (box test)"
        else:
            basic = "Sphere"
        aabb = " (PREFER_AABB is set for box)" if self.flags & BoundsFlags.PREFER_AABB else ""
        if self.flags & BoundsFlags.PREFER_SPECIAL and self.special is not None:
            special = self.special.kind.value
        else:
            special = "none"
        return f"basic: {basic}{aabb}, special: {special}"

    def __repr__(self):
        return f"BoundsRecord({self.describe()})"


def obb_record_from_aabb(aabb: AABB, sphere: Optional[BoundingSphere] = None) -> BoundsRecord:
    """Запись, в которой ориентированный параллелепипед совпадает с AABB."""
    dims = aabb.dimensions()
    pca = (
        PCAAxis(np.array([1.0, 0.0, 0.0]), dims[0]),
        PCAAxis(np.array([0.0, 1.0, 0.0]), dims[1]),
        PCAAxis(np.array([0.0, 0.0, 1.0]), dims[2]),
    )
    if sphere is None:
        sphere = BoundingSphere(aabb.center(), float(np.linalg.norm(dims)) * 0.5)
    return BoundsRecord(pca, aabb.center(), aabb.copy(), sphere, BoundsFlags.PREFER_BOX)
