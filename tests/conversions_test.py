import math

import numpy as np
import pytest

from bvolume.geombase.utils import perpendicular_basis
from bvolume.volumes.conversions import (
    aabb_of_cylinder,
    aabb_of_sector,
    aabb_of_sphere,
    bounding_cylinder_of_sector,
    bounding_sphere_of_cylinder,
    bounding_sphere_of_sector,
)
from bvolume.volumes.cylinder import Cylinder
from bvolume.volumes.sector import SphericalSector
from bvolume.volumes.sphere import BoundingSphere


def sector_points(sector, rng, n=500):
    """Случайные точки внутри сектора, включая вершину и кромку основания."""
    t1, t2 = perpendicular_basis(sector.axis)
    points = [sector.center.copy()]
    for phi in np.linspace(0.0, 2.0 * math.pi, 16, endpoint=False):
        radial = math.cos(phi) * t1 + math.sin(phi) * t2
        points.append(sector.center + sector.radius * (sector.cos_half_angle * sector.axis
                                                       + sector.sin_half_angle * radial))
    for _ in range(n):
        theta = rng.uniform(0.0, sector.half_angle())
        phi = rng.uniform(0.0, 2.0 * math.pi)
        d = rng.uniform(0.0, sector.radius)
        radial = math.cos(phi) * t1 + math.sin(phi) * t2
        points.append(sector.center + d * (math.cos(theta) * sector.axis + math.sin(theta) * radial))
    points.append(sector.center + sector.axis * sector.radius)
    return np.array(points)


def cylinder_points(cylinder, rng, n=500):
    t1, t2 = perpendicular_basis(cylinder.axis)
    points = []
    for _ in range(n):
        h = rng.uniform(-0.5, 0.5) * cylinder.length
        phi = rng.uniform(0.0, 2.0 * math.pi)
        r = cylinder.radius * math.sqrt(rng.uniform(0.0, 1.0))
        points.append(cylinder.center + h * cylinder.axis + r * (math.cos(phi) * t1 + math.sin(phi) * t2))
    return np.array(points)


def test_aabb_of_sphere():
    aabb = aabb_of_sphere(BoundingSphere(np.array([1.0, 2.0, 3.0]), 0.5))
    np.testing.assert_allclose(aabb.min_point, [0.5, 1.5, 2.5])
    np.testing.assert_allclose(aabb.max_point, [1.5, 2.5, 3.5])


def test_aabb_of_axis_aligned_cylinder():
    aabb = aabb_of_cylinder(Cylinder(np.zeros(3), np.array([0.0, 0.0, 1.0]), 4.0, 1.0))
    np.testing.assert_allclose(aabb.min_point, [-1.0, -1.0, -2.0])
    np.testing.assert_allclose(aabb.max_point, [1.0, 1.0, 2.0])


def test_aabb_of_tilted_cylinder_contains_cylinder():
    rng = np.random.default_rng(41)
    axis = np.array([1.0, 2.0, -0.5])
    cylinder = Cylinder(np.array([1.0, -1.0, 0.0]), axis / np.linalg.norm(axis), 3.0, 0.7)
    aabb = aabb_of_cylinder(cylinder)
    points = cylinder_points(cylinder, rng)
    assert np.all(points >= aabb.min_point - 1e-9)
    assert np.all(points <= aabb.max_point + 1e-9)


def test_bounding_sphere_of_cylinder():
    cylinder = Cylinder(np.array([0.0, 1.0, 0.0]), np.array([0.0, 1.0, 0.0]), 6.0, 4.0)
    sphere = bounding_sphere_of_cylinder(cylinder)
    assert sphere.radius == pytest.approx(5.0)
    np.testing.assert_allclose(sphere.center, [0.0, 1.0, 0.0])


@pytest.mark.parametrize("half_angle_deg", [10.0, 30.0, 44.0, 50.0, 80.0, 120.0, 170.0])
def test_bounding_sphere_of_sector_contains_sector(half_angle_deg):
    rng = np.random.default_rng(int(half_angle_deg))
    sector = SphericalSector.from_angle(np.array([1.0, 2.0, 3.0]), np.array([0.3, -1.0, 0.2]),
                                        5.0, math.radians(half_angle_deg))
    sphere = bounding_sphere_of_sector(sector)
    assert sphere.radius <= sector.radius + 1e-12
    for p in sector_points(sector, rng):
        assert sphere.contains_point(p, eps=1e-9)


def test_narrow_sector_sphere_passes_through_apex():
    sector = SphericalSector.from_angle(np.zeros(3), np.array([0.0, 0.0, 1.0]), 10.0, math.radians(30.0))
    sphere = bounding_sphere_of_sector(sector)
    assert sphere.radius == pytest.approx(10.0 / (2.0 * math.cos(math.radians(30.0))))
    assert np.linalg.norm(sphere.center - sector.center) == pytest.approx(sphere.radius)


def test_wide_sector_sphere_is_apex_sphere():
    sector = SphericalSector.from_angle(np.zeros(3), np.array([0.0, 0.0, 1.0]), 10.0, math.radians(100.0))
    sphere = bounding_sphere_of_sector(sector)
    assert sphere.radius == 10.0
    np.testing.assert_array_equal(sphere.center, sector.center)


@pytest.mark.parametrize("half_angle_deg", [20.0, 60.0, 135.0])
def test_aabb_of_sector_contains_sector(half_angle_deg):
    rng = np.random.default_rng(100 + int(half_angle_deg))
    sector = SphericalSector.from_angle(np.array([-1.0, 0.0, 2.0]), np.array([1.0, 1.0, 0.0]),
                                        3.0, math.radians(half_angle_deg))
    aabb = aabb_of_sector(sector)
    points = sector_points(sector, rng)
    assert np.all(points >= aabb.min_point - 1e-9)
    assert np.all(points <= aabb.max_point + 1e-9)
    assert np.all(aabb.min_point >= sector.center - sector.radius - 1e-12)
    assert np.all(aabb.max_point <= sector.center + sector.radius + 1e-12)


@pytest.mark.parametrize("half_angle_deg", [15.0, 45.0, 89.0])
def test_bounding_cylinder_of_sector(half_angle_deg):
    rng = np.random.default_rng(200 + int(half_angle_deg))
    sector = SphericalSector.from_angle(np.zeros(3), np.array([0.0, 1.0, 1.0]), 4.0, math.radians(half_angle_deg))
    cylinder = bounding_cylinder_of_sector(sector)
    assert cylinder.length == pytest.approx(4.0)
    assert cylinder.radius == pytest.approx(4.0 * math.sin(math.radians(half_angle_deg)))
    for p in sector_points(sector, rng):
        assert cylinder.contains_point(p, eps=1e-9)
