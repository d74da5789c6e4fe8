"""Ограничивающие объёмы источников света для отсечения."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from bvolume.geombase.utils import as_point, normalize
from bvolume.volumes.cylinder import Cylinder
from bvolume.volumes.sector import SphericalSector
from bvolume.volumes.sphere import BoundingSphere


class LightKind(str, Enum):
    """Типы источников, различающиеся формой освещаемого объёма."""

    DIRECTIONAL = "directional"
    POINT_SOURCE = "point_source"
    SPOT = "spot"
    BEAM = "beam"


@dataclass
class Light:
    """Источник света с ограничивающими объёмами области влияния.

    ``sphere`` — текущая сфера влияния, ``worst_case_sphere`` — сфера,
    покрывающая влияние при любых допустимых параметрах (для переменных
    источников). ``sector`` задан у прожекторов, ``cylinder`` у лучевых
    источников и прожекторов. Направленный свет влияет на всё пространство.
    """

    kind: LightKind
    sphere: Optional[BoundingSphere] = None
    worst_case_sphere: Optional[BoundingSphere] = None
    sector: Optional[SphericalSector] = None
    cylinder: Optional[Cylinder] = None
    direction: Optional[np.ndarray] = None

    def __post_init__(self):
        if self.direction is not None:
            self.direction = normalize(as_point(self.direction))
        if self.kind != LightKind.DIRECTIONAL and self.sphere is None:
            raise ValueError(f"{self.kind.value} light requires a bounding sphere.")
        if self.kind == LightKind.SPOT and self.sector is None:
            raise ValueError("Spot light requires a spherical sector.")
        if self.kind == LightKind.BEAM and self.cylinder is None:
            raise ValueError("Beam light requires a cylinder.")
        if self.worst_case_sphere is None:
            self.worst_case_sphere = self.sphere

    @property
    def is_directional(self) -> bool:
        return self.kind == LightKind.DIRECTIONAL

    @staticmethod
    def directional(direction) -> "Light":
        return Light(LightKind.DIRECTIONAL, direction=direction)

    @staticmethod
    def point_source(position, radius: float, worst_case_radius: float = None) -> "Light":
        sphere = BoundingSphere(as_point(position), radius)
        worst = None
        if worst_case_radius is not None:
            worst = BoundingSphere(as_point(position), max(radius, worst_case_radius))
        return Light(LightKind.POINT_SOURCE, sphere=sphere, worst_case_sphere=worst)

    @staticmethod
    def spot(position, direction, radius: float, half_angle: float,
             worst_case_radius: float = None) -> "Light":
        """Прожектор. half_angle — половинный угол конуса в радианах."""
        from bvolume.volumes.conversions import bounding_cylinder_of_sector, bounding_sphere_of_sector

        sector = SphericalSector.from_angle(position, direction, radius, half_angle)
        worst = None
        if worst_case_radius is not None:
            worst_sector = SphericalSector.from_angle(position, direction,
                                                      max(radius, worst_case_radius), half_angle)
            worst = bounding_sphere_of_sector(worst_sector)
        return Light(
            LightKind.SPOT,
            sphere=bounding_sphere_of_sector(sector),
            worst_case_sphere=worst,
            sector=sector,
            cylinder=bounding_cylinder_of_sector(sector),
            direction=direction,
        )

    @staticmethod
    def beam(position, direction, length: float, radius: float) -> "Light":
        """Лучевой источник: цилиндр, начинающийся в position."""
        from bvolume.volumes.conversions import bounding_sphere_of_cylinder

        axis = normalize(as_point(direction))
        cylinder = Cylinder(as_point(position) + axis * (length * 0.5), axis, length, radius)
        return Light(
            LightKind.BEAM,
            sphere=bounding_sphere_of_cylinder(cylinder),
            cylinder=cylinder,
            direction=axis,
        )

    def __repr__(self):
        if self.is_directional:
            return f"Light(kind={self.kind.value}, direction={self.direction})"
        return f"Light(kind={self.kind.value}, sphere={self.sphere})"
