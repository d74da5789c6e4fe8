"""Tests for principal component extraction."""

import numpy as np
import pytest

from bvolume.errors import EmptyVertexSetError
from bvolume.fitting.principal_axes import calculate_principal_components, covariance_matrix
from bvolume.mesh import CubeMesh


def rotation_z(angle):
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


class TestPrincipalAxesBasics:

    def test_cube(self):
        pca, center = calculate_principal_components(CubeMesh(2.0).vertices)
        assert [a.extent for a in pca] == pytest.approx([2.0, 2.0, 2.0])
        np.testing.assert_allclose(center, [0.0, 0.0, 0.0], atol=1e-12)

    def test_equal_extents_keep_axis_order(self):
        pca, _ = calculate_principal_components(CubeMesh(2.0).vertices)
        np.testing.assert_array_equal(pca[0].direction, [1.0, 0.0, 0.0])
        np.testing.assert_array_equal(pca[1].direction, [0.0, 1.0, 0.0])
        np.testing.assert_array_equal(pca[2].direction, [0.0, 0.0, 1.0])

    def test_single_point(self):
        pca, center = calculate_principal_components(np.array([[1.0, 2.0, 3.0]]))
        assert all(a.extent == 0.0 for a in pca)
        np.testing.assert_allclose(center, [1.0, 2.0, 3.0])

    def test_empty_input_raises(self):
        with pytest.raises(EmptyVertexSetError):
            calculate_principal_components(np.zeros((0, 3)))

    def test_empty_input_is_value_error(self):
        with pytest.raises(ValueError):
            calculate_principal_components([])

    def test_wrong_shape_raises(self):
        with pytest.raises(ValueError):
            calculate_principal_components(np.zeros((4, 2)))


class TestPrincipalAxesProperties:

    def test_extents_sorted_and_non_negative(self):
        rng = np.random.default_rng(7)
        for _ in range(20):
            v = rng.normal(size=(50, 3)) * rng.uniform(0.1, 5.0, size=3)
            pca, _ = calculate_principal_components(v)
            extents = [a.extent for a in pca]
            assert extents[0] >= extents[1] >= extents[2] >= 0.0

    def test_axes_are_orthonormal(self):
        rng = np.random.default_rng(8)
        v = rng.normal(size=(100, 3)) @ np.diag([4.0, 2.0, 1.0])
        pca, _ = calculate_principal_components(v)
        d = np.array([a.direction for a in pca])
        np.testing.assert_allclose(d @ d.T, np.identity(3), atol=1e-9)

    def test_box_contains_vertices(self):
        rng = np.random.default_rng(9)
        v = rng.normal(size=(200, 3)) @ np.diag([5.0, 2.0, 0.5]) @ rotation_z(0.4).T + [1.0, -2.0, 3.0]
        pca, center = calculate_principal_components(v)
        for axis in pca:
            proj = (v - center) @ axis.direction
            assert np.all(np.abs(proj) <= axis.extent * 0.5 + 1e-9)

    def test_rotated_box_recovers_dimensions(self):
        """Параллелепипед 6x2x1, повёрнутый вокруг Z: главная ось совпадает с повёрнутой X."""
        corners = np.array([[x, y, z] for x in (-3.0, 3.0) for y in (-1.0, 1.0) for z in (-0.5, 0.5)])
        r = rotation_z(0.3)
        pca, center = calculate_principal_components(corners @ r.T + [10.0, 0.0, 0.0])
        assert [a.extent for a in pca] == pytest.approx([6.0, 2.0, 1.0])
        assert abs(np.dot(pca[0].direction, r[:, 0])) == pytest.approx(1.0)
        np.testing.assert_allclose(center, [10.0, 0.0, 0.0], atol=1e-9)

    def test_covariance_divides_by_count(self):
        v = np.array([[1.0, 0.0, 0.0], [-1.0, 0.0, 0.0]])
        c = covariance_matrix(v, np.mean(v, axis=0))
        np.testing.assert_allclose(c, np.diag([1.0, 0.0, 0.0]))
