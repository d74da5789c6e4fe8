import math

from bvolume.volumes.types import BoundingVolumeType


class Capsule:
    """
    Капсула, назначаемая автором модели как форма столкновений.

    Никогда не подбирается автоматически. Ось капсулы — локальная ось X,
    radius_y и radius_z — коэффициенты масштаба поперечного сечения.
    """

    kind = BoundingVolumeType.CAPSULE

    __slots__ = ("radius", "length", "radius_y", "radius_z")

    def __init__(self, radius: float, length: float, radius_y: float = 1.0, radius_z: float = 1.0):
        if radius < 0.0 or length < 0.0:
            raise ValueError("Capsule radius and length must be non-negative.")
        self.radius = float(radius)
        self.length = float(length)
        self.radius_y = float(radius_y)
        self.radius_z = float(radius_z)

    def volume(self) -> float:
        r = self.radius
        scale = self.radius_y * self.radius_z
        return (math.pi * r * r * self.length + 4.0 / 3.0 * math.pi * r * r * r) * scale

    def total_length(self) -> float:
        """Длина вдоль оси вместе с полусферами."""
        return self.length + 2.0 * self.radius

    def __eq__(self, other):
        if not isinstance(other, Capsule):
            return NotImplemented
        return (self.radius, self.length, self.radius_y, self.radius_z) == \
            (other.radius, other.length, other.radius_y, other.radius_z)

    def __repr__(self):
        return (f"Capsule(radius={self.radius}, length={self.length}, "
                f"radius_y={self.radius_y}, radius_z={self.radius_z})")
