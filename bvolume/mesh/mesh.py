"""Mesh and LOD model classes: the vertex sources the bounds are fitted to."""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from bvolume import log
from bvolume.bounds import BoundsFlags, BoundsRecord, obb_record_from_aabb
from bvolume.errors import EmptyVertexSetError
from bvolume.fitting.fitters import calculate_aabb
from bvolume.fitting.selector import calculate_bounds
from bvolume.geombase.aabb import AABB
from bvolume.settings import BoundsSettings, DEFAULT_SETTINGS
from bvolume.volumes.capsule import Capsule


class Mesh:
    """Triangle mesh storing vertex positions and optional triangle indices."""

    def __init__(self, vertices: np.ndarray, indices: Optional[np.ndarray] = None, name: str = ""):
        self.vertices = np.asarray(vertices, dtype=np.float64)
        self.indices = None if indices is None else np.asarray(indices, dtype=np.int64)
        self.name = name
        self._validate_mesh()

    @staticmethod
    def from_lists(vertices, indices=None, name: str = "") -> "Mesh":
        verts = np.asarray(vertices, dtype=float)
        idx = None if indices is None else np.asarray(indices, dtype=int)
        return Mesh(verts, idx, name)

    def copy(self) -> "Mesh":
        indices = None if self.indices is None else self.indices.copy()
        return Mesh(self.vertices.copy(), indices, self.name)

    @property
    def nu_vertices(self) -> int:
        return self.vertices.shape[0]

    def _validate_mesh(self):
        """Ensure that the vertex/index arrays have correct shapes and bounds."""
        if self.vertices.ndim != 2 or self.vertices.shape[1] != 3:
            raise ValueError("Vertices must be a Nx3 array.")
        if self.indices is None:
            return
        if self.indices.ndim != 2 or self.indices.shape[1] != 3:
            raise ValueError("Indices must be a Mx3 array.")
        if self.indices.size and (self.indices.min() < 0 or self.indices.max() >= self.nu_vertices):
            raise ValueError("Indices reference vertices out of range.")

    def calculate_aabb(self) -> AABB:
        return calculate_aabb(self.vertices)

    def calculate_bounds(self, settings: BoundsSettings = DEFAULT_SETTINGS) -> BoundsRecord:
        return calculate_bounds(self.vertices, settings)

    @staticmethod
    def from_convex_hull(points: np.ndarray, name: str = "") -> "Mesh":
        """Mesh of the convex hull of points (scipy.spatial.ConvexHull), triangles facing outward."""
        from scipy.spatial import ConvexHull

        hull = ConvexHull(np.asarray(points, dtype=np.float64))
        vertices = hull.points.astype(np.float64)
        triangles = hull.simplices.astype(np.int64)

        center = np.mean(vertices[hull.vertices], axis=0)

        for i in range(triangles.shape[0]):
            v0 = vertices[triangles[i, 0]]
            v1 = vertices[triangles[i, 1]]
            v2 = vertices[triangles[i, 2]]
            normal = np.cross(v1 - v0, v2 - v0)
            to_center = center - v0
            if np.dot(normal, to_center) > 0:
                triangles[i, [1, 2]] = triangles[i, [2, 1]]

        return Mesh(vertices, triangles, name)

    @staticmethod
    def from_assimp(assimp_mesh, name: str = "") -> "Mesh":
        """Create Mesh from an assimp-like mesh (anything with vertices and indices)."""
        verts = np.asarray(assimp_mesh.vertices, dtype=np.float64)
        indices = getattr(assimp_mesh, "indices", None)
        idx = None if indices is None else np.asarray(indices, dtype=np.int64).reshape(-1, 3)
        return Mesh(verts, idx, name or getattr(assimp_mesh, "name", ""))

    def __repr__(self):
        n_tri = 0 if self.indices is None else self.indices.shape[0]
        return f"Mesh(name={self.name!r}, vertices={self.nu_vertices}, triangles={n_tri})"


class LODModel:
    """
    Модель с несколькими уровнями детализации и общей записью объёмов.

    Объёмы считаются по уровню 0.
    """

    def __init__(self, lod_meshes: List[Mesh], name: str = ""):
        if not lod_meshes:
            raise ValueError("LODModel requires at least one LOD mesh.")
        self.lod_meshes = list(lod_meshes)
        self.name = name
        self.bounds: Optional[BoundsRecord] = None

    @property
    def nu_lod_levels(self) -> int:
        return len(self.lod_meshes)

    def calculate_bounds(self, settings: BoundsSettings = DEFAULT_SETTINGS) -> BoundsRecord:
        mesh = self.lod_meshes[0]
        if mesh.nu_vertices == 0:
            raise EmptyVertexSetError(f"LOD 0 of model {self.name!r} has no vertices.")
        collision_shape = None
        flags = BoundsFlags.NONE
        if self.bounds is not None and self.bounds.collision_shape is not None:
            collision_shape = self.bounds.collision_shape
            flags = BoundsFlags.SPECIAL_IS_COLLISION_SHAPE
        record = mesh.calculate_bounds(settings)
        record.flags |= flags
        record.collision_shape = collision_shape
        self.bounds = record
        log.debug(f"[LODModel] {self.name}: {record.describe()}")
        return record

    def get_max_extents(self) -> Tuple[AABB, float]:
        """AABB of all LOD levels and its largest dimension."""
        aabb = self.lod_meshes[0].calculate_aabb()
        for mesh in self.lod_meshes[1:]:
            aabb = aabb.merge(mesh.calculate_aabb())
        return aabb, aabb.max_dimension()

    def set_obb_with_aabb_bounds(self, aabb: AABB) -> BoundsRecord:
        """
        Заменить ориентированный параллелепипед на заданный AABB.

        Оси становятся мировыми, из флагов предпочтения остаётся только
        PREFER_BOX. AABB, сфера и форма столкновений записи сохраняются.
        """
        record = obb_record_from_aabb(aabb)
        if self.bounds is not None:
            record.aabb = self.bounds.aabb
            record.sphere = self.bounds.sphere
            record.collision_shape = self.bounds.collision_shape
            if record.collision_shape is not None:
                record.flags |= BoundsFlags.SPECIAL_IS_COLLISION_SHAPE
        self.bounds = record
        return record

    def set_bounding_collision_shape_capsule(self, capsule: Capsule) -> BoundsRecord:
        if self.bounds is None:
            self.calculate_bounds()
        self.bounds.collision_shape = capsule
        self.bounds.flags |= BoundsFlags.SPECIAL_IS_COLLISION_SHAPE
        return self.bounds

    def __repr__(self):
        return f"LODModel(name={self.name!r}, lod_levels={self.nu_lod_levels})"
