"""Unit tests for transform builders and the view transform."""

import math

from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.transforms import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from whitted.core.tuples import point, vector

HALF_SQRT2 = math.sqrt(2) / 2


class TestTranslationAndScaling:
    """Tests for translation and scaling."""

    def test_translation_moves_points(self):
        """Test translating a point and undoing it with the inverse."""
        transform = translation(5, -3, 2)
        assert transform @ point(-3, 4, 5) == point(2, 1, 7)
        assert transform.inverse() @ point(-3, 4, 5) == point(-8, 7, 3)

    def test_translation_ignores_vectors(self):
        """Test vectors are unaffected by translation."""
        assert translation(5, -3, 2) @ vector(-3, 4, 5) == vector(-3, 4, 5)

    def test_scaling(self):
        """Test scaling points, vectors and the inverse."""
        transform = scaling(2, 3, 4)
        assert transform @ point(-4, 6, 8) == point(-8, 18, 32)
        assert transform @ vector(-4, 6, 8) == vector(-8, 18, 32)
        assert transform.inverse() @ vector(-4, 6, 8) == vector(-2, 2, 2)

    def test_reflection_is_negative_scaling(self):
        """Test reflecting across the x axis."""
        assert scaling(-1, 1, 1) @ point(2, 3, 4) == point(-2, 3, 4)


class TestRotation:
    """Tests for rotations about each axis."""

    def test_rotation_x(self):
        """Test rotating a point around x."""
        p = point(0, 1, 0)
        assert rotation_x(math.pi / 4) @ p == point(0, HALF_SQRT2, HALF_SQRT2)
        assert rotation_x(math.pi / 2) @ p == point(0, 0, 1)
        assert rotation_x(math.pi / 4).inverse() @ p == point(0, HALF_SQRT2, -HALF_SQRT2)

    def test_rotation_y(self):
        """Test rotating a point around y."""
        p = point(0, 0, 1)
        assert rotation_y(math.pi / 4) @ p == point(HALF_SQRT2, 0, HALF_SQRT2)
        assert rotation_y(math.pi / 2) @ p == point(1, 0, 0)

    def test_rotation_z(self):
        """Test rotating a point around z."""
        p = point(0, 1, 0)
        assert rotation_z(math.pi / 4) @ p == point(-HALF_SQRT2, HALF_SQRT2, 0)
        assert rotation_z(math.pi / 2) @ p == point(-1, 0, 0)


class TestShearing:
    """Tests for shearing in each of its six directions."""

    def test_each_shear_component(self):
        """Test every shear parameter moves one coordinate."""
        p = point(2, 3, 4)
        assert shearing(1, 0, 0, 0, 0, 0) @ p == point(5, 3, 4)
        assert shearing(0, 1, 0, 0, 0, 0) @ p == point(6, 3, 4)
        assert shearing(0, 0, 1, 0, 0, 0) @ p == point(2, 5, 4)
        assert shearing(0, 0, 0, 1, 0, 0) @ p == point(2, 7, 4)
        assert shearing(0, 0, 0, 0, 1, 0) @ p == point(2, 3, 6)
        assert shearing(0, 0, 0, 0, 0, 1) @ p == point(2, 3, 7)


class TestComposition:
    """Tests for chaining transforms right to left."""

    def test_individual_transforms_in_sequence(self):
        """Test applying rotation, scaling and translation one at a time."""
        p = point(1, 0, 1)
        p2 = rotation_x(math.pi / 2) @ p
        assert p2 == point(1, -1, 0)
        p3 = scaling(5, 5, 5) @ p2
        assert p3 == point(5, -5, 0)
        p4 = translation(10, 5, 7) @ p3
        assert p4 == point(15, 0, 7)

    def test_chained_transforms_apply_in_reverse_order(self):
        """Test C @ B @ A applies A first."""
        transform = translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation_x(math.pi / 2)
        assert transform @ point(1, 0, 1) == point(15, 0, 7)

    def test_fluent_chain(self):
        """Test fluent methods apply in call order."""
        transform = IDENTITY.rotate_x(math.pi / 2).scale(5, 5, 5).translate(10, 5, 7)
        assert transform @ point(1, 0, 1) == point(15, 0, 7)

    def test_fluent_shear_and_rotations(self):
        """Test the remaining fluent methods match their builders."""
        assert IDENTITY.shear(1, 0, 0, 0, 0, 0) == shearing(1, 0, 0, 0, 0, 0)
        assert IDENTITY.rotate_y(0.3).rotate_z(0.2) == rotation_z(0.2) @ rotation_y(0.3)


class TestViewTransform:
    """Tests for the camera view transform."""

    def test_default_orientation(self):
        """Test looking down -z from the origin gives the identity."""
        t = view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))
        assert t == IDENTITY

    def test_looking_in_positive_z(self):
        """Test looking toward +z mirrors x and z."""
        t = view_transform(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))
        assert t == scaling(-1, 1, -1)

    def test_moves_the_world(self):
        """Test the view transform moves the world, not the eye."""
        t = view_transform(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))
        assert t == translation(0, 0, -8)

    def test_arbitrary_view(self):
        """Test an arbitrary eye, target and approximate up vector."""
        t = view_transform(point(1, 3, 2), point(4, -2, 8), vector(1, 1, 0))
        expected = Matrix(
            [
                [-0.50709, 0.50709, 0.67612, -2.36643],
                [0.76772, 0.60609, 0.12122, -2.82843],
                [-0.35857, 0.59761, -0.71714, 0.00000],
                [0.00000, 0.00000, 0.00000, 1.00000],
            ]
        )
        assert t == expected
