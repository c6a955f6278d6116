"""Data-parallel Whitted renderer using Taichi.

This module runs the same per-pixel algorithm as ``Camera.render`` inside a
single Taichi kernel, shading every pixel in parallel on the CPU. It is a pure
scheduling layer: the world and camera are flattened into Taichi fields once
per render and never written during the kernel, and each kernel iteration
writes only its own canvas cell.

Per pixel the kernel:
    1. Builds the camera ray through the pixel centre
    2. Finds the nearest intersection with t >= 0 over all shapes
    3. Computes the hit point, eye vector, surface normal (flipped to face
       the eye) and over point
    4. For each light, casts a shadow ray from the over point and adds the
       Phong contribution

Shapes and patterns are dispatched on a kind code, so only the variants
listed in ``SHAPE_KINDS`` and ``PATTERN_KINDS`` can be rendered here; other
scenes must use ``Camera.render``.

Example:
    >>> from whitted.core.integrator import TaichiRenderer
    >>> from whitted.scene.demo import create_demo_scene
    >>>
    >>> world, camera = create_demo_scene()
    >>> renderer = TaichiRenderer()
    >>> canvas = renderer.render(camera, world)
"""

import numpy as np
import taichi as ti

from whitted.core.canvas import Canvas
from whitted.core.tuples import EPSILON
from whitted.geometry.plane import Plane
from whitted.geometry.sphere import Sphere
from whitted.materials.patterns import (
    CheckerPattern,
    GradientPattern,
    RingPattern,
    StripePattern,
)

# 64-bit vector types so kernel results match the Python path
vec3 = ti.types.vector(3, ti.f64)
vec4 = ti.types.vector(4, ti.f64)

# =============================================================================
# Capacity and Dispatch Codes
# =============================================================================

MAX_SHAPES = 256
MAX_LIGHTS = 16

SHAPE_SPHERE = 0
SHAPE_PLANE = 1

SHAPE_KINDS = {
    Sphere: SHAPE_SPHERE,
    Plane: SHAPE_PLANE,
}

PATTERN_NONE = -1
PATTERN_STRIPE = 0
PATTERN_GRADIENT = 1
PATTERN_RING = 2
PATTERN_CHECKER = 3

PATTERN_KINDS = {
    StripePattern: PATTERN_STRIPE,
    GradientPattern: PATTERN_GRADIENT,
    RingPattern: PATTERN_RING,
    CheckerPattern: PATTERN_CHECKER,
}

_taichi_initialized = False


def init_taichi(arch=None) -> None:
    """Initialize the Taichi runtime once for this process.

    Uses the CPU backend and 64-bit default floats. Calling it again is a
    no-op; use it instead of ``ti.init`` so existing fields stay valid.

    Args:
        arch: Taichi CPU arch to use (default ``ti.cpu``).
    """
    global _taichi_initialized
    if _taichi_initialized:
        return
    ti.init(arch=arch if arch is not None else ti.cpu, default_fp=ti.f64)
    _taichi_initialized = True


# =============================================================================
# Shape and Pattern Functions (Taichi scope)
# =============================================================================


@ti.func
def _local_intersect(kind: ti.i32, origin: vec4, direction: vec4):
    """Intersect an object-space ray with a unit sphere or the xz plane.

    Returns:
        A tuple (count, t0, t1) where count is the number of valid roots.
    """
    count = 0
    t0 = 0.0
    t1 = 0.0
    if kind == SHAPE_SPHERE:
        sphere_to_ray = vec3(origin[0], origin[1], origin[2])
        d = vec3(direction[0], direction[1], direction[2])
        a = d.dot(d)
        b = 2.0 * d.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0
        discriminant = b * b - 4.0 * a * c
        if discriminant >= 0.0:
            sqrt_d = ti.sqrt(discriminant)
            t0 = (-b - sqrt_d) / (2.0 * a)
            t1 = (-b + sqrt_d) / (2.0 * a)
            count = 2
    elif kind == SHAPE_PLANE:
        if ti.abs(direction[1]) >= EPSILON:
            t0 = -origin[1] / direction[1]
            count = 1
    return count, t0, t1


@ti.func
def _floor_int(x: ti.f64) -> ti.i32:
    return ti.cast(ti.floor(x), ti.i32)


@ti.func
def _pattern_color(kind: ti.i32, p: vec4, a: vec3, b: vec3) -> vec3:
    """Evaluate a pattern at a point already in pattern space."""
    color = a
    if kind == PATTERN_STRIPE:
        if _floor_int(p[0]) % 2 != 0:
            color = b
    elif kind == PATTERN_GRADIENT:
        fraction = p[0] - ti.floor(p[0])
        color = a + (b - a) * fraction
    elif kind == PATTERN_RING:
        if _floor_int(ti.sqrt(p[0] * p[0] + p[2] * p[2])) % 2 != 0:
            color = b
    elif kind == PATTERN_CHECKER:
        if (_floor_int(p[0]) + _floor_int(p[1]) + _floor_int(p[2])) % 2 != 0:
            color = b
    return color


@ti.func
def _reflect(incident: vec4, normal: vec4) -> vec4:
    return incident - normal * 2.0 * incident.dot(normal)


# =============================================================================
# Renderer
# =============================================================================


@ti.data_oriented
class TaichiRenderer:
    """Parallel renderer over a flattened, read-only copy of the scene.

    Args:
        max_shapes: Capacity of the shape fields.
        max_lights: Capacity of the light fields.
    """

    def __init__(self, max_shapes: int = MAX_SHAPES, max_lights: int = MAX_LIGHTS) -> None:
        init_taichi()
        self.max_shapes = max_shapes
        self.max_lights = max_lights

        # Shape storage: Structure of Arrays layout
        self.shape_kind = ti.field(dtype=ti.i32, shape=max_shapes)
        self.shape_inverse = ti.Matrix.field(4, 4, dtype=ti.f64, shape=max_shapes)
        self.shape_inverse_transpose = ti.Matrix.field(4, 4, dtype=ti.f64, shape=max_shapes)
        self.material_color = ti.Vector.field(3, dtype=ti.f64, shape=max_shapes)
        # (ambient, diffuse, specular, shininess)
        self.material_params = ti.Vector.field(4, dtype=ti.f64, shape=max_shapes)
        self.pattern_kind = ti.field(dtype=ti.i32, shape=max_shapes)
        self.pattern_inverse = ti.Matrix.field(4, 4, dtype=ti.f64, shape=max_shapes)
        self.pattern_a = ti.Vector.field(3, dtype=ti.f64, shape=max_shapes)
        self.pattern_b = ti.Vector.field(3, dtype=ti.f64, shape=max_shapes)
        self.num_shapes = ti.field(dtype=ti.i32, shape=())

        # Light storage
        self.light_position = ti.Vector.field(4, dtype=ti.f64, shape=max_lights)
        self.light_intensity = ti.Vector.field(3, dtype=ti.f64, shape=max_lights)
        self.num_lights = ti.field(dtype=ti.i32, shape=())

        # Camera state: inverse view transform and (half_width, half_height, pixel_size)
        self.camera_inverse = ti.Matrix.field(4, 4, dtype=ti.f64, shape=())
        self.camera_params = ti.Vector.field(3, dtype=ti.f64, shape=())

    # =========================================================================
    # Scene upload (Python scope)
    # =========================================================================

    def load_scene(self, camera, world) -> None:
        """Copy the camera, shapes and lights into the Taichi fields.

        Raises:
            ValueError: If the scene exceeds the renderer capacity or holds a
                shape or pattern type without a kernel implementation.
        """
        shapes = world.shapes
        lights = world.lights
        if len(shapes) > self.max_shapes:
            raise ValueError(f"Maximum number of shapes ({self.max_shapes}) exceeded")
        if len(lights) > self.max_lights:
            raise ValueError(f"Maximum number of lights ({self.max_lights}) exceeded")

        n = self.max_shapes
        kinds = np.zeros(n, dtype=np.int32)
        inverses = np.tile(np.identity(4), (n, 1, 1))
        inverse_transposes = np.tile(np.identity(4), (n, 1, 1))
        colors = np.zeros((n, 3), dtype=np.float64)
        params = np.zeros((n, 4), dtype=np.float64)
        pattern_kinds = np.full(n, PATTERN_NONE, dtype=np.int32)
        pattern_inverses = np.tile(np.identity(4), (n, 1, 1))
        pattern_a = np.zeros((n, 3), dtype=np.float64)
        pattern_b = np.zeros((n, 3), dtype=np.float64)

        for i, shape in enumerate(shapes):
            kind = SHAPE_KINDS.get(type(shape))
            if kind is None:
                raise ValueError(f"No kernel implementation for shape type {type(shape).__name__}")
            kinds[i] = kind
            inverses[i] = shape.inverse.to_numpy()
            inverse_transposes[i] = shape.inverse_transpose.to_numpy()

            material = shape.material
            colors[i] = material.color.to_tuple()
            params[i] = (material.ambient, material.diffuse, material.specular, material.shininess)

            pattern = material.pattern
            if pattern is not None:
                pattern_kind = PATTERN_KINDS.get(type(pattern))
                if pattern_kind is None:
                    raise ValueError(
                        f"No kernel implementation for pattern type {type(pattern).__name__}"
                    )
                pattern_kinds[i] = pattern_kind
                pattern_inverses[i] = pattern.inverse.to_numpy()
                pattern_a[i] = pattern.a.to_tuple()
                pattern_b[i] = pattern.b.to_tuple()

        self.shape_kind.from_numpy(kinds)
        self.shape_inverse.from_numpy(inverses)
        self.shape_inverse_transpose.from_numpy(inverse_transposes)
        self.material_color.from_numpy(colors)
        self.material_params.from_numpy(params)
        self.pattern_kind.from_numpy(pattern_kinds)
        self.pattern_inverse.from_numpy(pattern_inverses)
        self.pattern_a.from_numpy(pattern_a)
        self.pattern_b.from_numpy(pattern_b)
        self.num_shapes[None] = len(shapes)

        positions = np.zeros((self.max_lights, 4), dtype=np.float64)
        intensities = np.zeros((self.max_lights, 3), dtype=np.float64)
        for i, light in enumerate(lights):
            positions[i] = tuple(light.position)
            intensities[i] = light.intensity.to_tuple()
        self.light_position.from_numpy(positions)
        self.light_intensity.from_numpy(intensities)
        self.num_lights[None] = len(lights)

        self.camera_inverse.from_numpy(camera.inverse.to_numpy())
        self.camera_params[None] = [camera.half_width, camera.half_height, camera.pixel_size]

    def render(self, camera, world) -> Canvas:
        """Render the world as seen by the camera.

        Returns:
            A canvas of size camera.hsize x camera.vsize matching
            ``camera.render(world)`` within floating-point tolerance.
        """
        self.load_scene(camera, world)
        image = np.zeros((camera.vsize, camera.hsize, 3), dtype=np.float64)
        self._render_kernel(image)
        return Canvas.from_numpy(image)

    # =========================================================================
    # Kernel and Taichi-scope helpers
    # =========================================================================

    @ti.kernel
    def _render_kernel(self, image: ti.types.ndarray(dtype=ti.f64, ndim=3)):
        for py, px in ti.ndrange(image.shape[0], image.shape[1]):
            origin, direction = self._ray_for_pixel(px, py)
            color = self._color_at(origin, direction)
            for c in ti.static(range(3)):
                image[py, px, c] = color[c]

    @ti.func
    def _ray_for_pixel(self, px, py):
        params = self.camera_params[None]
        world_x = params[0] - (ti.cast(px, ti.f64) + 0.5) * params[2]
        world_y = params[1] - (ti.cast(py, ti.f64) + 0.5) * params[2]
        inverse = self.camera_inverse[None]
        pixel = inverse @ vec4(world_x, world_y, -1.0, 1.0)
        origin = inverse @ vec4(0.0, 0.0, 0.0, 1.0)
        return origin, (pixel - origin).normalized()

    @ti.func
    def _nearest_hit(self, origin, direction, skip_zero: ti.template()):
        """Return (shape index, t) of the smallest t >= 0, or (-1, 0).

        With skip_zero set, hits at exactly t == 0 are ignored as well.
        """
        found = -1
        closest = 0.0
        for i in range(self.num_shapes[None]):
            inverse = self.shape_inverse[i]
            count, t0, t1 = _local_intersect(self.shape_kind[i], inverse @ origin, inverse @ direction)
            ok0 = t0 >= 0.0
            ok1 = t1 >= 0.0
            if ti.static(skip_zero):
                ok0 = t0 > 0.0
                ok1 = t1 > 0.0
            if count >= 1 and ok0 and (found < 0 or t0 < closest):
                found = i
                closest = t0
            if count >= 2 and ok1 and (found < 0 or t1 < closest):
                found = i
                closest = t1
        return found, closest

    @ti.func
    def _normal_at(self, i, world_point):
        local_point = self.shape_inverse[i] @ world_point
        local_normal = vec4(0.0, 1.0, 0.0, 0.0)
        if self.shape_kind[i] == SHAPE_SPHERE:
            local_normal = vec4(local_point[0], local_point[1], local_point[2], 0.0)
        n = self.shape_inverse_transpose[i] @ local_normal
        return vec4(n[0], n[1], n[2], 0.0).normalized()

    @ti.func
    def _surface_color(self, i, world_point):
        color = self.material_color[i]
        kind = self.pattern_kind[i]
        if kind != PATTERN_NONE:
            pattern_point = self.pattern_inverse[i] @ (self.shape_inverse[i] @ world_point)
            color = _pattern_color(kind, pattern_point, self.pattern_a[i], self.pattern_b[i])
        return color

    @ti.func
    def _is_shadowed(self, light, point):
        to_light = self.light_position[light] - point
        distance = to_light.norm()
        found, t = self._nearest_hit(point, to_light / distance, True)
        shadowed = 0
        if found >= 0 and t < distance:
            shadowed = 1
        return shadowed

    @ti.func
    def _lighting(self, i, light, point, eyev, normalv, shadowed):
        params = self.material_params[i]
        intensity = self.light_intensity[light]
        effective_color = self._surface_color(i, point) * intensity
        ambient = effective_color * params[0]
        diffuse = vec3(0.0, 0.0, 0.0)
        specular = vec3(0.0, 0.0, 0.0)
        if shadowed == 0:
            lightv = (self.light_position[light] - point).normalized()
            light_dot_normal = lightv.dot(normalv)
            if light_dot_normal >= 0.0:
                diffuse = effective_color * (params[1] * light_dot_normal)
                reflect_dot_eye = _reflect(-lightv, normalv).dot(eyev)
                if reflect_dot_eye > 0.0:
                    specular = intensity * (params[2] * reflect_dot_eye ** params[3])
        return ambient + diffuse + specular

    @ti.func
    def _color_at(self, origin, direction):
        color = vec3(0.0, 0.0, 0.0)
        found, t = self._nearest_hit(origin, direction, False)
        if found >= 0:
            point = origin + direction * t
            eyev = -direction
            normalv = self._normal_at(found, point)
            if normalv.dot(eyev) < 0.0:
                normalv = -normalv
            over_point = point + normalv * EPSILON
            for light in range(self.num_lights[None]):
                shadowed = self._is_shadowed(light, over_point)
                color += self._lighting(found, light, over_point, eyev, normalv, shadowed)
        return color
