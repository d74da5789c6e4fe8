"""Primitive mesh shapes: Cube, Sphere, Cylinder, Plane."""

import numpy as np

from .mesh import Mesh


class CubeMesh(Mesh):
    def __init__(self, size: float = 1.0, y: float = None, z: float = None):
        x = size
        if y is None:
            y = x
        if z is None:
            z = x

        s_x = x * 0.5
        s_y = y * 0.5
        s_z = z * 0.5
        vertices = np.array(
            [
                [-s_x, -s_y, -s_z],
                [s_x, -s_y, -s_z],
                [s_x, s_y, -s_z],
                [-s_x, s_y, -s_z],
                [-s_x, -s_y, s_z],
                [s_x, -s_y, s_z],
                [s_x, s_y, s_z],
                [-s_x, s_y, s_z],
            ],
            dtype=float,
        )
        triangles = np.array(
            [
                [1, 0, 2],
                [2, 0, 3],
                [4, 5, 7],
                [5, 6, 7],
                [0, 1, 4],
                [1, 5, 4],
                [2, 3, 6],
                [3, 7, 6],
                [3, 0, 4],
                [7, 3, 4],
                [1, 2, 5],
                [2, 6, 5],
            ],
            dtype=int,
        )
        super().__init__(vertices, triangles, name="Cube")


class UVSphereMesh(Mesh):
    """Сфера из параллелей и меридианов. Полюса повторяются на каждом меридиане."""

    def __init__(self, radius: float = 1.0, n_meridians: int = 16, n_parallels: int = 16):
        rings = n_parallels
        segments = n_meridians

        vertices = []
        triangles = []
        for r in range(rings + 1):
            theta = r * np.pi / rings
            sin_theta = np.sin(theta)
            cos_theta = np.cos(theta)
            for s in range(segments):
                phi = s * 2 * np.pi / segments
                vertices.append([radius * sin_theta * np.cos(phi),
                                 radius * sin_theta * np.sin(phi),
                                 radius * cos_theta])
        for r in range(rings):
            for s in range(segments):
                next_r = r + 1
                next_s = (s + 1) % segments
                triangles.append([r * segments + s, next_r * segments + s, next_r * segments + next_s])
                triangles.append([r * segments + s, next_r * segments + next_s, r * segments + next_s])
        super().__init__(np.array(vertices, dtype=float), np.array(triangles, dtype=int), name="UVSphere")


class PlaneMesh(Mesh):
    """Плоскость XZ при y = 0."""

    def __init__(self, width: float = 1.0, depth: float = 1.0, segments_w: int = 1, segments_d: int = 1):
        vertices = []
        triangles = []
        for d in range(segments_d + 1):
            z = (d / segments_d - 0.5) * depth
            for w in range(segments_w + 1):
                x = (w / segments_w - 0.5) * width
                vertices.append([x, 0.0, z])
        for d in range(segments_d):
            for w in range(segments_w):
                v0 = d * (segments_w + 1) + w
                v1 = v0 + 1
                v2 = v0 + (segments_w + 1)
                v3 = v2 + 1
                triangles.append([v0, v2, v1])
                triangles.append([v1, v2, v3])
        super().__init__(np.array(vertices, dtype=float), np.array(triangles, dtype=int), name="Plane")


class CylinderMesh(Mesh):
    """Цилиндр вдоль оси Y с центром в начале координат."""

    def __init__(self, radius: float = 1.0, height: float = 1.0, segments: int = 16):
        vertices = []
        triangles = []
        half_height = height * 0.5
        for y in [-half_height, half_height]:
            for s in range(segments):
                theta = s * 2 * np.pi / segments
                vertices.append([radius * np.cos(theta), y, radius * np.sin(theta)])
        for s in range(segments):
            next_s = (s + 1) % segments
            bottom0 = s
            bottom1 = next_s
            top0 = s + segments
            top1 = next_s + segments
            triangles.append([bottom0, top0, bottom1])
            triangles.append([bottom1, top0, top1])

        # центры торцов
        bottom_center_idx = len(vertices)
        vertices.append([0.0, -half_height, 0.0])
        top_center_idx = len(vertices)
        vertices.append([0.0, half_height, 0.0])
        for s in range(segments):
            next_s = (s + 1) % segments
            triangles.append([next_s, bottom_center_idx, s])
            triangles.append([s + segments, top_center_idx, next_s + segments])

        super().__init__(np.array(vertices, dtype=float), np.array(triangles, dtype=int), name="Cylinder")
