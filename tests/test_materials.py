"""Unit tests for materials, lights, Phong lighting and patterns.

Tests cover:
- Material defaults and validation
- Phong lighting for the standard eye/light configurations
- The in-shadow switch
- Stripe, gradient, ring and checker patterns, including transforms on the
  pattern and on the decorated shape
"""

import math

import pytest

from whitted.core.color import BLACK, WHITE, Color
from whitted.core.transforms import scaling, translation
from whitted.core.tuples import point, vector
from whitted.geometry.sphere import Sphere
from whitted.materials.lighting import lighting, surface_color
from whitted.materials.lights import PointLight
from whitted.materials.material import Material
from whitted.materials.patterns import (
    CheckerPattern,
    GradientPattern,
    RingPattern,
    StripePattern,
)


class TestMaterial:
    """Tests for Material parameters."""

    def test_default_material(self):
        """Test the default Phong coefficients."""
        m = Material()
        assert m.color == WHITE
        assert m.ambient == 0.1
        assert m.diffuse == 0.9
        assert m.specular == 0.9
        assert m.shininess == 200.0
        assert m.pattern is None

    def test_default_color_is_white(self):
        """Test default materials share the white colour and compare equal."""
        a, b = Material(), Material()
        assert a.color is WHITE
        assert a == b
        assert Material(color=Color(0.5, 0.5, 0.5)).color == Color(0.5, 0.5, 0.5)

    def test_negative_coefficient_raises(self):
        """Test negative coefficients are rejected."""
        with pytest.raises(ValueError, match="ambient"):
            Material(ambient=-0.1)
        with pytest.raises(ValueError, match="shininess"):
            Material(shininess=-1.0)

    def test_negative_color_raises(self):
        """Test negative colour channels are rejected."""
        with pytest.raises(ValueError, match="color"):
            Material(color=Color(-0.5, 0.0, 0.0))

    def test_point_light(self):
        """Test a point light stores position and intensity."""
        light = PointLight(point(0, 0, 0), WHITE)
        assert light.position == point(0, 0, 0)
        assert light.intensity == WHITE


class TestLighting:
    """Tests for Phong lighting at point(0, 0, 0) with the default material."""

    @pytest.fixture
    def material(self):
        return Material()

    @pytest.fixture
    def position(self):
        return point(0, 0, 0)

    def test_eye_between_light_and_surface(self, material, position):
        """Test full ambient, diffuse and specular."""
        eyev = vector(0, 0, -1)
        normalv = vector(0, 0, -1)
        light = PointLight(point(0, 0, -10), WHITE)
        assert lighting(material, light, position, eyev, normalv) == Color(1.9, 1.9, 1.9)

    def test_eye_offset_45_degrees(self, material, position):
        """Test the specular term falls to zero off the reflection."""
        k = math.sqrt(2) / 2
        eyev = vector(0, k, -k)
        normalv = vector(0, 0, -1)
        light = PointLight(point(0, 0, -10), WHITE)
        assert lighting(material, light, position, eyev, normalv) == Color(1.0, 1.0, 1.0)

    def test_light_offset_45_degrees(self, material, position):
        """Test the diffuse term follows the light angle."""
        eyev = vector(0, 0, -1)
        normalv = vector(0, 0, -1)
        light = PointLight(point(0, 10, -10), WHITE)
        result = lighting(material, light, position, eyev, normalv)
        assert result == Color(0.7364, 0.7364, 0.7364)

    def test_eye_in_path_of_reflection(self, material, position):
        """Test the full specular highlight."""
        k = math.sqrt(2) / 2
        eyev = vector(0, -k, -k)
        normalv = vector(0, 0, -1)
        light = PointLight(point(0, 10, -10), WHITE)
        result = lighting(material, light, position, eyev, normalv)
        assert result == Color(1.6364, 1.6364, 1.6364)

    def test_light_behind_surface(self, material, position):
        """Test only ambient light reaches a surface facing away."""
        eyev = vector(0, 0, -1)
        normalv = vector(0, 0, -1)
        light = PointLight(point(0, 0, 10), WHITE)
        assert lighting(material, light, position, eyev, normalv) == Color(0.1, 0.1, 0.1)

    def test_surface_in_shadow(self, material, position):
        """Test a shadowed point receives only ambient light."""
        eyev = vector(0, 0, -1)
        normalv = vector(0, 0, -1)
        light = PointLight(point(0, 0, -10), WHITE)
        result = lighting(material, light, position, eyev, normalv, in_shadow=True)
        assert result == Color(0.1, 0.1, 0.1)

    def test_colored_light_tints_surface(self, position):
        """Test the light intensity multiplies the surface colour."""
        material = Material(color=Color(1.0, 0.5, 0.0), ambient=1.0, diffuse=0.0, specular=0.0)
        light = PointLight(point(0, 0, -10), Color(0.5, 1.0, 1.0))
        result = lighting(material, light, position, vector(0, 0, -1), vector(0, 0, -1))
        assert result == Color(0.5, 0.5, 0.0)

    def test_lighting_with_pattern(self):
        """Test a pattern replaces the material colour."""
        material = Material(
            pattern=StripePattern(WHITE, BLACK), ambient=1.0, diffuse=0.0, specular=0.0
        )
        eyev = vector(0, 0, -1)
        normalv = vector(0, 0, -1)
        light = PointLight(point(0, 0, -10), WHITE)
        c1 = lighting(material, light, point(0.9, 0, 0), eyev, normalv)
        c2 = lighting(material, light, point(1.1, 0, 0), eyev, normalv)
        assert c1 == WHITE
        assert c2 == BLACK


class TestPatterns:
    """Tests for the pattern variants."""

    def test_stripe_constant_in_y_and_z(self):
        """Test stripes do not vary along y or z."""
        pattern = StripePattern(WHITE, BLACK)
        for p in (point(0, 0, 0), point(0, 1, 0), point(0, 2, 0), point(0, 0, 1), point(0, 0, 2)):
            assert pattern.pattern_at(p) == WHITE

    def test_stripe_alternates_in_x(self):
        """Test stripes alternate on floor(x), including negative x."""
        pattern = StripePattern(WHITE, BLACK)
        assert pattern.pattern_at(point(0, 0, 0)) == WHITE
        assert pattern.pattern_at(point(0.9, 0, 0)) == WHITE
        assert pattern.pattern_at(point(1, 0, 0)) == BLACK
        assert pattern.pattern_at(point(-0.1, 0, 0)) == BLACK
        assert pattern.pattern_at(point(-1, 0, 0)) == BLACK
        assert pattern.pattern_at(point(-1.1, 0, 0)) == WHITE

    def test_stripes_with_object_transform(self):
        """Test stripes move with the decorated shape."""
        shape = Sphere(transform=scaling(2, 2, 2))
        pattern = StripePattern(WHITE, BLACK)
        assert pattern.pattern_at_shape(shape, point(1.5, 0, 0)) == WHITE

    def test_stripes_with_pattern_transform(self):
        """Test stripes honour their own transform."""
        shape = Sphere()
        pattern = StripePattern(WHITE, BLACK, transform=scaling(2, 2, 2))
        assert pattern.pattern_at_shape(shape, point(1.5, 0, 0)) == WHITE

    def test_stripes_with_both_transforms(self):
        """Test object and pattern transforms compose."""
        shape = Sphere(transform=scaling(2, 2, 2))
        pattern = StripePattern(WHITE, BLACK, transform=translation(0.5, 0, 0))
        assert pattern.pattern_at_shape(shape, point(2.5, 0, 0)) == WHITE

    def test_gradient_interpolates(self):
        """Test the gradient blends linearly between the colours."""
        pattern = GradientPattern(WHITE, BLACK)
        assert pattern.pattern_at(point(0, 0, 0)) == WHITE
        assert pattern.pattern_at(point(0.25, 0, 0)) == Color(0.75, 0.75, 0.75)
        assert pattern.pattern_at(point(0.5, 0, 0)) == Color(0.5, 0.5, 0.5)
        assert pattern.pattern_at(point(0.75, 0, 0)) == Color(0.25, 0.25, 0.25)

    def test_ring_extends_in_x_and_z(self):
        """Test rings alternate with distance from the y axis."""
        pattern = RingPattern(WHITE, BLACK)
        assert pattern.pattern_at(point(0, 0, 0)) == WHITE
        assert pattern.pattern_at(point(1, 0, 0)) == BLACK
        assert pattern.pattern_at(point(0, 0, 1)) == BLACK
        assert pattern.pattern_at(point(0.708, 0, 0.708)) == BLACK

    @pytest.mark.parametrize("axis", [0, 1, 2])
    def test_checkers_repeat_on_each_axis(self, axis):
        """Test checkers alternate along x, y and z."""
        pattern = CheckerPattern(WHITE, BLACK)

        def along(value):
            coords = [0.0, 0.0, 0.0]
            coords[axis] = value
            return point(*coords)

        assert pattern.pattern_at(along(0.0)) == WHITE
        assert pattern.pattern_at(along(0.99)) == WHITE
        assert pattern.pattern_at(along(1.01)) == BLACK

    def test_surface_color_without_pattern(self):
        """Test the plain material colour is used when no pattern is set."""
        material = Material(color=Color(0.2, 0.4, 0.6))
        assert surface_color(material, point(5, 5, 5)) == Color(0.2, 0.4, 0.6)
