import math

from bvolume.geombase.aabb import AABB
from bvolume.volumes.sphere import BoundingSphere


class OctreeNodeBounds:
    """Границы узла октодерева: AABB и описанная вокруг него сфера."""

    __slots__ = ("aabb", "sphere")

    def __init__(self, aabb: AABB, sphere: BoundingSphere):
        self.aabb = aabb
        self.sphere = sphere

    @staticmethod
    def from_aabb(aabb: AABB) -> "OctreeNodeBounds":
        d = aabb.dimensions() * 0.5
        radius = math.sqrt(float(d[0] * d[0] + d[1] * d[1] + d[2] * d[2]))
        return OctreeNodeBounds(aabb, BoundingSphere(aabb.center(), radius))

    def __repr__(self):
        return f"OctreeNodeBounds(aabb={self.aabb}, sphere={self.sphere})"
