"""Cylinder — ограничивающий цилиндр произвольной ориентации."""

import math

import numpy as np

from bvolume.volumes.types import BoundingVolumeType


class Cylinder:
    """
    Параметры:
        center: Центр (середина оси)
        axis: Единичный вектор оси
        length: Полная длина вдоль оси
        radius: Радиус

    axis_coefficients[i] = sqrt(1 - axis[i]^2) — половина ширины единичного
    диска, перпендикулярного оси, вдоль мировой оси i.
    """

    kind = BoundingVolumeType.CYLINDER

    __slots__ = ("center", "axis", "length", "radius", "axis_coefficients")

    def __init__(self, center: np.ndarray, axis: np.ndarray, length: float, radius: float):
        self.center = np.asarray(center, dtype=np.float64).reshape(3)
        self.axis = np.asarray(axis, dtype=np.float64).reshape(3)
        self.length = float(length)
        self.radius = float(radius)
        self.calculate_axis_coefficients()

    def calculate_axis_coefficients(self):
        self.axis_coefficients = np.sqrt(np.maximum(0.0, 1.0 - self.axis * self.axis))

    def volume(self) -> float:
        return math.pi * self.radius * self.radius * self.length

    def endpoints(self):
        half = self.axis * (self.length * 0.5)
        return self.center - half, self.center + half

    def projection_radius(self, direction: np.ndarray) -> float:
        """Половина ширины проекции цилиндра на единичное направление."""
        d = float(np.dot(self.axis, direction))
        return self.length * 0.5 * abs(d) + self.radius * math.sqrt(max(0.0, 1.0 - d * d))

    def support(self, direction: np.ndarray) -> np.ndarray:
        """Самая дальняя в направлении direction точка цилиндра (на кромке торца)."""
        direction = np.asarray(direction, dtype=np.float64)
        d = float(np.dot(self.axis, direction))
        half = self.length * 0.5 if d >= 0.0 else -self.length * 0.5
        point = self.center + half * self.axis
        radial = direction - d * self.axis
        n = math.sqrt(float(np.dot(radial, radial)))
        if n > 0.0:
            point = point + radial * (self.radius / n)
        return point

    def contains_point(self, point: np.ndarray, eps: float = 0.0) -> bool:
        v = np.asarray(point, dtype=np.float64) - self.center
        h = float(np.dot(v, self.axis))
        if abs(h) > self.length * 0.5 + eps:
            return False
        radial = v - h * self.axis
        return float(np.dot(radial, radial)) <= (self.radius + eps) ** 2

    def transform_by(self, rotation: np.ndarray, translation: np.ndarray, scale: float = 1.0) -> "Cylinder":
        rot = np.asarray(rotation, dtype=np.float64)
        return Cylinder(rot @ (self.center * scale) + translation, rot @ self.axis,
                        self.length * scale, self.radius * scale)

    def __repr__(self):
        return (f"Cylinder(center={self.center}, axis={self.axis}, "
                f"length={self.length}, radius={self.radius})")
