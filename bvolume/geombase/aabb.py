
import numpy
from bvolume.geombase.utils import as_points


class AABB:
    """Axis-Aligned Bounding Box in 3D space."""

    __slots__ = ("min_point", "max_point")

    def __init__(self, min_point: numpy.ndarray, max_point: numpy.ndarray):
        self.min_point = numpy.asarray(min_point, dtype=numpy.float64).reshape(3)
        self.max_point = numpy.asarray(max_point, dtype=numpy.float64).reshape(3)

    @staticmethod
    def empty() -> "AABB":
        """AABB seeded at +inf/-inf, ready to be extended."""
        return AABB(numpy.full(3, numpy.inf), numpy.full(3, -numpy.inf))

    @staticmethod
    def from_points(points: numpy.ndarray) -> "AABB":
        """Create an AABB that encompasses a set of points."""
        pts = as_points(points)
        if len(pts) == 0:
            return AABB.empty()
        min_point = numpy.min(pts, axis=0)
        max_point = numpy.max(pts, axis=0)
        return AABB(min_point, max_point)

    def copy(self) -> "AABB":
        return AABB(self.min_point.copy(), self.max_point.copy())

    def is_empty(self) -> bool:
        return bool(numpy.any(self.min_point > self.max_point))

    def extend(self, point: numpy.ndarray):
        """Extend the AABB to include the given point."""
        self.min_point = numpy.minimum(self.min_point, point)
        self.max_point = numpy.maximum(self.max_point, point)

    def merge(self, other: "AABB") -> "AABB":
        """Merge this AABB with another AABB and return the resulting AABB."""
        new_min = numpy.minimum(self.min_point, other.min_point)
        new_max = numpy.maximum(self.max_point, other.max_point)
        return AABB(new_min, new_max)

    def intersection(self, other: "AABB") -> "AABB":
        """Overlap region of two AABBs. May be empty (min > max on some axis)."""
        new_min = numpy.maximum(self.min_point, other.min_point)
        new_max = numpy.minimum(self.max_point, other.max_point)
        return AABB(new_min, new_max)

    def center(self) -> numpy.ndarray:
        return (self.min_point + self.max_point) * 0.5

    def dimensions(self) -> numpy.ndarray:
        return self.max_point - self.min_point

    def max_dimension(self) -> float:
        return float(numpy.max(self.dimensions()))

    def volume(self) -> float:
        d = self.dimensions()
        return float(d[0] * d[1] * d[2])

    def get_corners(self) -> numpy.ndarray:
        """Get the 8 corners of the AABB."""
        mn, mx = self.min_point, self.max_point
        return numpy.array([
            [mn[0], mn[1], mn[2]],
            [mn[0], mn[1], mx[2]],
            [mn[0], mx[1], mn[2]],
            [mn[0], mx[1], mx[2]],
            [mx[0], mn[1], mn[2]],
            [mx[0], mn[1], mx[2]],
            [mx[0], mx[1], mn[2]],
            [mx[0], mx[1], mx[2]],
        ])

    def project_point(self, point: numpy.ndarray) -> numpy.ndarray:
        """Project a point onto the AABB is performed with clamping."""
        return numpy.minimum(numpy.maximum(point, self.min_point), self.max_point)

    def transform_by(self, rotation: numpy.ndarray, translation: numpy.ndarray, scale: float = 1.0) -> "AABB":
        """AABB of the rotated, scaled and translated corners."""
        corners = self.get_corners() * scale
        transformed = corners @ numpy.asarray(rotation, dtype=numpy.float64).T + translation
        return AABB.from_points(transformed)

    def __eq__(self, other):
        if not isinstance(other, AABB):
            return NotImplemented
        return bool(numpy.array_equal(self.min_point, other.min_point)
                    and numpy.array_equal(self.max_point, other.max_point))

    def __repr__(self):
        return f"AABB(min_point={self.min_point}, max_point={self.max_point})"
