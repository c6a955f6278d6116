"""Phong local illumination.

The reflected colour at a surface point is the sum of three terms:

    ambient  = effective_color * ambient
    diffuse  = effective_color * diffuse * dot(light_v, normal)
    specular = intensity * specular * dot(reflect_v, eye)^shininess

where ``effective_color = surface_color * light.intensity``. Points in shadow
receive only the ambient term. A light on the far side of the surface
(``dot(light_v, normal) < 0``) contributes no diffuse or specular light, and
a reflection pointing away from the eye contributes no specular light.

The result is not clamped: values above 1.0 are legal until export.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from whitted.core.color import BLACK, Color
from whitted.core.tuples import Tuple4, dot, normalize, reflect
from whitted.materials.lights import PointLight
from whitted.materials.material import Material

if TYPE_CHECKING:
    from whitted.geometry.shape import Shape


def surface_color(material: Material, point: Tuple4, shape: Shape | None = None) -> Color:
    """Return the material colour at a world-space point, honouring patterns."""
    if material.pattern is None:
        return material.color
    if shape is None:
        return material.pattern.pattern_at(material.pattern.inverse @ point)
    return material.pattern.pattern_at_shape(shape, point)


def lighting(
    material: Material,
    light: PointLight,
    point: Tuple4,
    eyev: Tuple4,
    normalv: Tuple4,
    in_shadow: bool = False,
    shape: Shape | None = None,
) -> Color:
    """Shade a surface point lit by a single point light.

    Args:
        material: The surface material.
        light: The light source.
        point: The world-space point being shaded.
        eyev: Unit vector from the point toward the eye.
        normalv: Unit surface normal at the point.
        in_shadow: If True, only the ambient term is returned.
        shape: The shape being lit; needed to place a pattern in object
            space. Without it, patterns are evaluated in world space.

    Returns:
        ambient + diffuse + specular.
    """
    effective_color = surface_color(material, point, shape) * light.intensity
    ambient = effective_color * material.ambient
    if in_shadow:
        return ambient

    lightv = normalize(light.position - point)
    light_dot_normal = dot(lightv, normalv)
    if light_dot_normal < 0.0:
        # Light is on the other side of the surface
        return ambient

    diffuse = effective_color * (material.diffuse * light_dot_normal)

    reflectv = reflect(-lightv, normalv)
    reflect_dot_eye = dot(reflectv, eyev)
    if reflect_dot_eye <= 0.0:
        specular = BLACK
    else:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * (material.specular * factor)

    return ambient + diffuse + specular
