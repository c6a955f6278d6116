"""Whitted-style ray tracer.

This package renders a scene of geometric primitives lit by point lights into a
canvas of colour samples, tracing one ray per pixel from a virtual camera and
shading the nearest hit with the Phong reflection model and hard shadows.

Subpackages:
    core: Tuples, colours, matrices, transforms, rays, canvas and the
        optional Taichi-parallel integrator
    geometry: Shape primitives (sphere, plane) and the object-space wrapper
    materials: Phong materials, point lights, lighting and surface patterns
    scene: Intersection records, hit selection and the world aggregate
    camera: Pinhole camera with pixel-to-ray mapping and the render loop
    preview: PPM/PNG export and on-screen preview of a rendered canvas
"""

__version__ = "0.1.0"
