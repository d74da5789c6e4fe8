"""
Тесты для проверок пересечения отдельных объёмов.
"""

import math
import unittest

import numpy as np

from bvolume.geombase.aabb import AABB
from bvolume.intersection.basic import (
    intersects_aabb_aabb,
    intersects_point_aabb,
    intersects_point_convex_hull,
    intersects_point_sphere,
    intersects_sphere_aabb,
    intersects_sphere_sphere,
    is_completely_inside_aabb,
    is_sphere_completely_inside_sphere,
)
from bvolume.intersection.box import (
    intersects_box_cylinder,
    intersects_box_sphere,
    intersects_point_box,
    intersects_sphere_cylinder,
    query_sphere_cylinder,
)
from bvolume.intersection.hull import (
    intersects_aabb_convex_hull,
    intersects_box_convex_hull,
    intersects_convex_hull_full_convex_hull,
    intersects_convex_hull_with_vertices_convex_hull,
    intersects_cylinder_convex_hull,
    intersects_ellipsoid_convex_hull,
    intersects_half_cylinder_convex_hull,
    intersects_hull_convex_hull,
    intersects_line_segment_box_convex_hull,
    intersects_sphere_convex_hull,
    intersects_spherical_sector_convex_hull,
    max_cone_dot,
)
from bvolume.intersection.result import BoundsCheckResult
from bvolume.volumes.box import Box
from bvolume.volumes.convex_hull import ConvexHull, ConvexHullFull, Hull
from bvolume.volumes.cylinder import Cylinder
from bvolume.volumes.ellipsoid import Ellipsoid
from bvolume.volumes.pca import PCAAxis
from bvolume.volumes.sector import HalfCylinder, SphericalSector
from bvolume.volumes.sphere import BoundingSphere


def unit_cube_aabb():
    return AABB(np.array([-1.0, -1.0, -1.0]), np.array([1.0, 1.0, 1.0]))


def cube_hull():
    """Куб [-1, 1]^3 как выпуклая оболочка."""
    return Box.from_aabb(unit_cube_aabb()).planes()


def rotated_box(center, angle=math.pi / 4, half=1.0):
    c, s = math.cos(angle), math.sin(angle)
    axes = [
        PCAAxis(np.array([c, s, 0.0]), 2.0 * half),
        PCAAxis(np.array([-s, c, 0.0]), 2.0 * half),
        PCAAxis(np.array([0.0, 0.0, 1.0]), 2.0 * half),
    ]
    return Box(np.asarray(center, dtype=float), axes)


def sample_inside(contains, low, high, rng, n=400):
    points = rng.uniform(low, high, size=(n, 3))
    return [p for p in points if contains(p)]


class BasicIntersectionTest(unittest.TestCase):

    def test_aabb_overlap(self):
        a = unit_cube_aabb()
        b = AABB(np.array([0.5, 0.5, 0.5]), np.array([2.0, 2.0, 2.0]))
        self.assertTrue(intersects_aabb_aabb(a, b))
        self.assertTrue(intersects_aabb_aabb(b, a))

    def test_separated_unit_aabbs(self):
        a = AABB(np.zeros(3), np.ones(3))
        b = AABB(np.array([2.0, 0.0, 0.0]), np.array([3.0, 1.0, 1.0]))
        self.assertFalse(intersects_aabb_aabb(a, b))

    def test_touching_aabbs_do_not_intersect(self):
        a = unit_cube_aabb()
        b = AABB(np.array([1.0, -1.0, -1.0]), np.array([3.0, 1.0, 1.0]))
        self.assertFalse(intersects_aabb_aabb(a, b))

    def test_point_on_aabb_boundary_is_inside(self):
        self.assertTrue(intersects_point_aabb(np.array([1.0, 0.0, -1.0]), unit_cube_aabb()))
        self.assertFalse(intersects_point_aabb(np.array([1.01, 0.0, 0.0]), unit_cube_aabb()))

    def test_point_convex_hull(self):
        ch = cube_hull()
        self.assertTrue(intersects_point_convex_hull(np.array([0.5, 0.5, 0.5]), ch))
        self.assertTrue(intersects_point_convex_hull(np.array([1.0, 0.0, 0.0]), ch))
        self.assertFalse(intersects_point_convex_hull(np.array([1.5, 0.0, 0.0]), ch))

    def test_touching_spheres_do_not_intersect(self):
        a = BoundingSphere(np.zeros(3), 1.0)
        self.assertFalse(intersects_sphere_sphere(a, BoundingSphere(np.array([2.0, 0.0, 0.0]), 1.0)))
        self.assertTrue(intersects_sphere_sphere(a, BoundingSphere(np.array([1.9, 0.0, 0.0]), 1.0)))

    def test_point_on_sphere_boundary_is_outside(self):
        sphere = BoundingSphere(np.zeros(3), 1.0)
        self.assertFalse(intersects_point_sphere(np.array([1.0, 0.0, 0.0]), sphere))
        self.assertTrue(intersects_point_sphere(np.array([0.5, 0.0, 0.0]), sphere))

    def test_sphere_aabb(self):
        aabb = unit_cube_aabb()
        self.assertFalse(intersects_sphere_aabb(BoundingSphere(np.array([2.0, 0.0, 0.0]), 1.0), aabb))
        self.assertTrue(intersects_sphere_aabb(BoundingSphere(np.array([2.0, 0.0, 0.0]), 1.01), aabb))
        # ближайшая точка — угол
        self.assertFalse(intersects_sphere_aabb(BoundingSphere(np.array([2.0, 2.0, 2.0]), 1.5), aabb))
        self.assertTrue(intersects_sphere_aabb(BoundingSphere(np.array([2.0, 2.0, 2.0]), 1.8), aabb))

    def test_aabb_inside_aabb(self):
        outer = unit_cube_aabb()
        self.assertTrue(is_completely_inside_aabb(outer, outer))
        inner = AABB(np.array([-0.5, -0.5, -0.5]), np.array([0.5, 1.0, 0.5]))
        self.assertTrue(is_completely_inside_aabb(inner, outer))
        self.assertFalse(is_completely_inside_aabb(outer, inner))

    def test_sphere_inside_sphere(self):
        outer = BoundingSphere(np.zeros(3), 1.5)
        self.assertTrue(is_sphere_completely_inside_sphere(BoundingSphere(np.array([0.5, 0.0, 0.0]), 1.0), outer))
        self.assertFalse(is_sphere_completely_inside_sphere(BoundingSphere(np.array([0.6, 0.0, 0.0]), 1.0), outer))
        self.assertFalse(is_sphere_completely_inside_sphere(BoundingSphere(np.zeros(3), 2.0), outer))


class BoxIntersectionTest(unittest.TestCase):

    def test_point_in_rotated_box(self):
        box = rotated_box(np.zeros(3))
        self.assertTrue(intersects_point_box(np.array([1.2, 0.0, 0.0]), box))
        self.assertFalse(intersects_point_box(np.array([1.2, 1.2, 0.0]), box))

    def test_box_sphere(self):
        box = Box.from_aabb(unit_cube_aabb())
        self.assertFalse(intersects_box_sphere(box, BoundingSphere(np.array([2.5, 0.0, 0.0]), 1.0)))
        self.assertTrue(intersects_box_sphere(box, BoundingSphere(np.array([2.5, 0.0, 0.0]), 2.0)))

    def test_box_sphere_uses_orientation(self):
        """Повёрнутый куб достаёт дальше вдоль диагонали."""
        sphere = BoundingSphere(np.array([2.0, 0.0, 0.0]), 0.7)
        self.assertFalse(intersects_box_sphere(Box.from_aabb(unit_cube_aabb()), sphere))
        self.assertTrue(intersects_box_sphere(rotated_box(np.zeros(3)), sphere))

    def test_box_cylinder_separated(self):
        box = Box.from_aabb(unit_cube_aabb())
        cylinder = Cylinder(np.array([3.0, 0.0, 0.0]), np.array([0.0, 0.0, 1.0]), 2.0, 1.0)
        self.assertFalse(intersects_box_cylinder(box, cylinder))

    def test_box_cylinder_separated_near_box_edge(self):
        """Зазор 0.8*sqrt(2) - 1 между ребром коробки и боковой поверхностью цилиндра."""
        box = Box.from_aabb(unit_cube_aabb())
        cylinder = Cylinder(np.array([1.8, 1.8, 0.0]), np.array([0.0, 0.0, 1.0]), 2.0, 1.0)
        self.assertFalse(intersects_box_cylinder(box, cylinder))
        closer = Cylinder(np.array([1.6, 1.6, 0.0]), np.array([0.0, 0.0, 1.0]), 2.0, 1.0)
        self.assertTrue(intersects_box_cylinder(box, closer))

    def test_box_cylinder_separated_near_box_corner(self):
        box = Box.from_aabb(unit_cube_aabb())
        axis = np.array([1.0, -1.0, 0.0]) / math.sqrt(2.0)
        # по диагонали зазор 0.3, по осям коробки проекции перекрываются
        center = np.array([1.0, 1.0, 1.0]) + np.array([1.0, 1.0, 1.0]) / math.sqrt(3.0) * 0.8
        self.assertFalse(intersects_box_cylinder(box, Cylinder(center, axis, 2.0, 0.5)))
        self.assertTrue(intersects_box_cylinder(box, Cylinder(center, axis, 2.0, 0.9)))

    def test_box_cylinder_overlapping(self):
        box = Box.from_aabb(unit_cube_aabb())
        cylinder = Cylinder(np.array([1.5, 0.0, 0.0]), np.array([0.0, 0.0, 1.0]), 2.0, 1.0)
        self.assertTrue(intersects_box_cylinder(box, cylinder))

    def test_box_cylinder_separated_by_cylinder_axis(self):
        box = Box.from_aabb(unit_cube_aabb())
        axis = np.array([1.0, 1.0, 1.0]) / math.sqrt(3.0)
        cylinder = Cylinder(axis * 5.0, axis, 2.0, 0.5)
        self.assertFalse(intersects_box_cylinder(box, cylinder))

    def test_sphere_inside_cylinder(self):
        cylinder = Cylinder(np.zeros(3), np.array([0.0, 0.0, 1.0]), 4.0, 1.0)
        result = query_sphere_cylinder(BoundingSphere(np.zeros(3), 0.5), cylinder)
        self.assertEqual(result, BoundsCheckResult.COMPLETELY_INSIDE)

    def test_sphere_outside_cylinder(self):
        cylinder = Cylinder(np.zeros(3), np.array([0.0, 0.0, 1.0]), 4.0, 1.0)
        sphere = BoundingSphere(np.array([3.0, 0.0, 0.0]), 0.5)
        self.assertEqual(query_sphere_cylinder(sphere, cylinder), BoundsCheckResult.COMPLETELY_OUTSIDE)
        self.assertFalse(intersects_sphere_cylinder(sphere, cylinder))

    def test_sphere_partially_inside_cylinder(self):
        cylinder = Cylinder(np.zeros(3), np.array([0.0, 0.0, 1.0]), 4.0, 1.0)
        sphere = BoundingSphere(np.array([1.0, 0.0, 0.0]), 0.5)
        self.assertEqual(query_sphere_cylinder(sphere, cylinder), BoundsCheckResult.PARTIALLY_INSIDE)
        self.assertTrue(intersects_sphere_cylinder(sphere, cylinder))

    def test_sphere_near_cylinder_rim(self):
        """Сфера у кромки торца: по оси и по радиусу близко, но до кромки дальше радиуса."""
        cylinder = Cylinder(np.zeros(3), np.array([0.0, 0.0, 1.0]), 4.0, 1.0)
        sphere = BoundingSphere(np.array([1.5, 0.0, 2.5]), 0.6)
        self.assertEqual(query_sphere_cylinder(sphere, cylinder), BoundsCheckResult.COMPLETELY_OUTSIDE)

    def test_box_cylinder_never_misses(self):
        rng = np.random.default_rng(31)
        for _ in range(30):
            box = rotated_box(rng.uniform(-1.0, 1.0, size=3), angle=rng.uniform(0.0, math.pi))
            axis = rng.normal(size=3)
            axis /= np.linalg.norm(axis)
            cylinder = Cylinder(rng.uniform(-2.0, 2.0, size=3), axis, rng.uniform(0.5, 3.0), rng.uniform(0.2, 1.0))
            points = sample_inside(cylinder.contains_point, -4.0, 4.0, rng)
            if any(box.contains_point(p) for p in points):
                self.assertTrue(intersects_box_cylinder(box, cylinder))

    def test_box_cylinder_reports_every_separation(self):
        rng = np.random.default_rng(33)
        directions = rng.normal(size=(3000, 3))
        directions /= np.linalg.norm(directions, axis=1)[:, None]
        for _ in range(40):
            box = rotated_box(rng.uniform(-1.0, 1.0, size=3), angle=rng.uniform(0.0, math.pi))
            axis = rng.normal(size=3)
            axis /= np.linalg.norm(axis)
            cylinder = Cylinder(rng.uniform(-3.0, 3.0, size=3), axis, rng.uniform(0.5, 3.0), rng.uniform(0.2, 1.0))
            delta = cylinder.center - box.center
            gaps = [abs(float(np.dot(delta, d))) - box.projection_radius(d) - cylinder.projection_radius(d)
                    for d in directions]
            if max(gaps) > 1e-3:
                self.assertFalse(intersects_box_cylinder(box, cylinder))

    def test_sphere_cylinder_query_is_consistent(self):
        rng = np.random.default_rng(32)
        cylinder = Cylinder(np.zeros(3), np.array([0.0, 1.0, 0.0]), 3.0, 1.0)
        for _ in range(50):
            sphere = BoundingSphere(rng.uniform(-2.5, 2.5, size=3), rng.uniform(0.1, 1.0))
            result = query_sphere_cylinder(sphere, cylinder)
            points = sample_inside(sphere.contains_point, -3.5, 3.5, rng, n=2000)
            if result == BoundsCheckResult.COMPLETELY_INSIDE:
                self.assertTrue(all(cylinder.contains_point(p, eps=1e-9) for p in points))
            if any(cylinder.contains_point(p) for p in points):
                self.assertNotEqual(result, BoundsCheckResult.COMPLETELY_OUTSIDE)


class ConvexHullIntersectionTest(unittest.TestCase):
    """Объёмы против куба [-1, 1]^3."""

    def test_max_cone_dot(self):
        axis = np.array([0.0, 0.0, 1.0])
        c, s = math.cos(math.radians(30.0)), math.sin(math.radians(30.0))
        self.assertEqual(max_cone_dot(axis, axis, c, s), 1.0)
        self.assertAlmostEqual(max_cone_dot(np.array([1.0, 0.0, 0.0]), axis, c, s), 0.5)
        self.assertAlmostEqual(max_cone_dot(-axis, axis, c, s), -c)

    def test_sphere(self):
        ch = cube_hull()
        self.assertFalse(intersects_sphere_convex_hull(BoundingSphere(np.array([3.0, 0.0, 0.0]), 1.5), ch))
        self.assertFalse(intersects_sphere_convex_hull(BoundingSphere(np.array([3.0, 0.0, 0.0]), 2.0), ch))
        self.assertTrue(intersects_sphere_convex_hull(BoundingSphere(np.array([3.0, 0.0, 0.0]), 2.5), ch))

    def test_aabb(self):
        ch = cube_hull()
        far = AABB(np.array([2.0, -1.0, -1.0]), np.array([3.0, 1.0, 1.0]))
        near = AABB(np.array([0.5, -1.0, -1.0]), np.array([3.0, 1.0, 1.0]))
        self.assertFalse(intersects_aabb_convex_hull(far, ch))
        self.assertTrue(intersects_aabb_convex_hull(near, ch))

    def test_box_uses_orientation(self):
        ch = cube_hull()
        self.assertTrue(intersects_box_convex_hull(rotated_box([2.3, 0.0, 0.0]), ch))
        self.assertFalse(intersects_box_convex_hull(rotated_box([2.5, 0.0, 0.0]), ch))
        self.assertFalse(intersects_box_convex_hull(rotated_box([2.3, 0.0, 0.0], angle=0.0), ch))

    def test_line_segment_box(self):
        ch = cube_hull()
        far = Box.from_aabb(AABB(np.array([2.0, -0.1, -0.1]), np.array([10.0, 0.1, 0.1])))
        near = Box.from_aabb(AABB(np.array([0.5, -0.1, -0.1]), np.array([10.0, 0.1, 0.1])))
        self.assertFalse(intersects_line_segment_box_convex_hull(far, ch))
        self.assertTrue(intersects_line_segment_box_convex_hull(near, ch))

    def test_ellipsoid(self):
        ch = cube_hull()
        long = Ellipsoid(np.array([3.0, 0.0, 0.0]), np.diag([2.5, 0.5, 0.5]))
        flat = Ellipsoid(np.array([3.0, 0.0, 0.0]), np.diag([0.5, 2.5, 2.5]))
        self.assertTrue(intersects_ellipsoid_convex_hull(long, ch))
        self.assertFalse(intersects_ellipsoid_convex_hull(flat, ch))

    def test_cylinder(self):
        ch = cube_hull()
        center = np.array([3.0, 0.0, 0.0])
        self.assertFalse(intersects_cylinder_convex_hull(Cylinder(center, np.array([1.0, 0.0, 0.0]), 3.0, 0.5), ch))
        self.assertFalse(intersects_cylinder_convex_hull(Cylinder(center, np.array([0.0, 1.0, 0.0]), 3.0, 0.5), ch))
        self.assertTrue(intersects_cylinder_convex_hull(Cylinder(center, np.array([1.0, 0.0, 0.0]), 5.0, 0.5), ch))

    def test_half_cylinder(self):
        ch = cube_hull()
        away = HalfCylinder(np.array([3.0, 0.0, 0.0]), np.array([1.0, 0.0, 0.0]), 0.5)
        toward = HalfCylinder(np.array([3.0, 0.0, 0.0]), np.array([-1.0, 0.0, 0.0]), 0.5)
        self.assertFalse(intersects_half_cylinder_convex_hull(away, ch))
        self.assertTrue(intersects_half_cylinder_convex_hull(toward, ch))

    def test_spherical_sector(self):
        ch = cube_hull()
        half_angle = math.radians(30.0)
        away = SphericalSector.from_angle(np.array([3.0, 0.0, 0.0]), np.array([1.0, 0.0, 0.0]), 5.0, half_angle)
        toward = SphericalSector.from_angle(np.array([3.0, 0.0, 0.0]), np.array([-1.0, 0.0, 0.0]), 5.0, half_angle)
        short = SphericalSector.from_angle(np.array([3.0, 0.0, 0.0]), np.array([-1.0, 0.0, 0.0]), 1.5, half_angle)
        self.assertFalse(intersects_spherical_sector_convex_hull(away, ch))
        self.assertTrue(intersects_spherical_sector_convex_hull(toward, ch))
        self.assertFalse(intersects_spherical_sector_convex_hull(short, ch))

    def test_hull_vertices(self):
        ch = cube_hull()
        far = Hull(Box.from_aabb(AABB(np.array([2.5, -0.5, -0.5]), np.array([3.5, 0.5, 0.5]))).corners())
        near = Hull(Box.from_aabb(AABB(np.array([0.7, -0.5, -0.5]), np.array([1.7, 0.5, 0.5]))).corners())
        self.assertFalse(intersects_hull_convex_hull(far, ch))
        self.assertTrue(intersects_hull_convex_hull(near, ch))

    def test_convex_hull_from_points(self):
        rng = np.random.default_rng(33)
        points = rng.uniform(-0.5, 0.5, size=(50, 3))
        chv = ConvexHull.from_points(points + [0.9, 0.0, 0.0])
        self.assertTrue(intersects_convex_hull_with_vertices_convex_hull(chv, cube_hull()))
        chv = ConvexHull.from_points(points + [3.0, 0.0, 0.0])
        self.assertFalse(intersects_convex_hull_with_vertices_convex_hull(chv, cube_hull()))

    def test_convex_hull_full(self):
        rng = np.random.default_rng(34)
        points = rng.uniform(-0.5, 0.5, size=(50, 3))
        full = ConvexHullFull.from_convex_hull_with_vertices(ConvexHull.from_points(points + [5.0, 0.0, 0.0]))
        self.assertFalse(intersects_convex_hull_full_convex_hull(full, cube_hull()))
        full = ConvexHullFull.from_convex_hull_with_vertices(ConvexHull.from_points(points))
        self.assertTrue(intersects_convex_hull_full_convex_hull(full, cube_hull()))

    def test_never_misses(self):
        """Если точка объёма внутри оболочки, проверка обязана вернуть True."""
        rng = np.random.default_rng(35)
        ch = cube_hull()
        for _ in range(30):
            center = rng.uniform(-3.0, 3.0, size=3)
            axis = rng.normal(size=3)
            axis /= np.linalg.norm(axis)
            volumes = [
                (BoundingSphere(center, rng.uniform(0.2, 2.0)), intersects_sphere_convex_hull),
                (rotated_box(center, angle=rng.uniform(0.0, math.pi), half=rng.uniform(0.2, 1.5)),
                 intersects_box_convex_hull),
                (Cylinder(center, axis, rng.uniform(0.5, 3.0), rng.uniform(0.2, 1.0)),
                 intersects_cylinder_convex_hull),
                (Ellipsoid(center, np.diag(rng.uniform(0.2, 2.0, size=3))), intersects_ellipsoid_convex_hull),
            ]
            for volume, check in volumes:
                points = sample_inside(volume.contains_point, center - 3.0, center + 3.0, rng, n=1000)
                if any(ch.contains_point(p) for p in points):
                    self.assertTrue(check(volume, ch), repr(volume))


if __name__ == "__main__":
    unittest.main()
