"""Demo scene configuration.

This module provides a factory for a small showcase scene exercising every
primitive and feature of the renderer:

- A floor plane (optionally checkered)
- Three spheres of different sizes and colours
- One white point light above and to the left, casting hard shadows
- A camera looking slightly down at the spheres

Example:
    >>> from whitted.scene.demo import DemoSceneParams, create_demo_scene
    >>> world, camera = create_demo_scene(DemoSceneParams(width=200, height=100))
    >>> canvas = camera.render(world)
"""

import math
from dataclasses import dataclass

from whitted.camera.camera import Camera
from whitted.core.color import Color
from whitted.core.transforms import scaling, translation, view_transform
from whitted.core.tuples import point, vector
from whitted.geometry.plane import Plane
from whitted.geometry.sphere import Sphere
from whitted.materials.lights import PointLight
from whitted.materials.material import Material
from whitted.materials.patterns import CheckerPattern
from whitted.scene.world import World

# =============================================================================
# Demo Scene Parameters
# =============================================================================


@dataclass
class DemoSceneParams:
    """Parameters for configuring the demo scene.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        field_of_view: Camera field of view in radians.
        light_position: World-space position of the point light.
        light_color: RGB intensity of the light.
        floor_color: Base colour of the floor.
        checkered_floor: If True the floor carries a checker pattern.
        middle_color: Colour of the large middle sphere.
        right_color: Colour of the small right sphere.
        left_color: Colour of the smallest left sphere.
    """

    width: int = 320
    height: int = 160
    field_of_view: float = math.pi / 3.0
    light_position: tuple[float, float, float] = (-10.0, 10.0, -10.0)
    light_color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    floor_color: tuple[float, float, float] = (1.0, 0.9, 0.9)
    checkered_floor: bool = True
    middle_color: tuple[float, float, float] = (0.1, 1.0, 0.5)
    right_color: tuple[float, float, float] = (0.5, 1.0, 0.1)
    left_color: tuple[float, float, float] = (1.0, 0.8, 0.1)


# Camera pose
CAMERA_FROM = (0.0, 1.5, -5.0)
CAMERA_TO = (0.0, 1.0, 0.0)
CAMERA_UP = (0.0, 1.0, 0.0)


# =============================================================================
# Demo Scene Factory
# =============================================================================


def create_demo_scene(params: DemoSceneParams | None = None) -> tuple[World, Camera]:
    """Create the demo world and a camera posed to view it.

    Args:
        params: Scene parameters. If None, uses the defaults.

    Returns:
        A tuple (world, camera).
    """
    if params is None:
        params = DemoSceneParams()

    floor_pattern = None
    if params.checkered_floor:
        floor_pattern = CheckerPattern(Color(*params.floor_color), Color(0.35, 0.3, 0.3))
    floor = Plane(
        material=Material(color=Color(*params.floor_color), specular=0.0, pattern=floor_pattern)
    )

    middle = Sphere(
        transform=translation(-0.5, 1.0, 0.5),
        material=Material(color=Color(*params.middle_color), diffuse=0.7, specular=0.3),
    )
    right = Sphere(
        transform=translation(1.5, 0.5, -0.5) @ scaling(0.5, 0.5, 0.5),
        material=Material(color=Color(*params.right_color), diffuse=0.7, specular=0.3),
    )
    left = Sphere(
        transform=translation(-1.5, 0.33, -0.75) @ scaling(0.33, 0.33, 0.33),
        material=Material(color=Color(*params.left_color), diffuse=0.7, specular=0.3),
    )

    light = PointLight(point(*params.light_position), Color(*params.light_color))
    world = World(shapes=[floor, middle, right, left], lights=[light])

    camera = Camera(
        params.width,
        params.height,
        params.field_of_view,
        transform=view_transform(point(*CAMERA_FROM), point(*CAMERA_TO), vector(*CAMERA_UP)),
    )
    return world, camera
