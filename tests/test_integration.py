"""End-to-end integration tests.

These tests verify the full rendering pipeline works correctly:
- Scene creation -> camera -> render -> export
- Rendered images are deterministic and show the expected structure
- The command-line script renders and saves an image

Tests are designed to run quickly with small image sizes.
"""

import math
from pathlib import Path

import numpy as np
from PIL import Image as PILImage

from whitted.camera.camera import Camera
from whitted.core.color import BLACK, WHITE
from whitted.core.transforms import translation, view_transform
from whitted.core.tuples import point, vector
from whitted.geometry.plane import Plane
from whitted.geometry.sphere import Sphere
from whitted.materials.lights import PointLight
from whitted.preview.export import canvas_to_ppm, save_image
from whitted.scene.demo import DemoSceneParams, create_demo_scene
from whitted.scene.world import World


class TestDemoRender:
    """End-to-end tests of the Python render path."""

    def test_render_has_expected_structure(self):
        """Test the floor fills the bottom and the spheres are lit."""
        world, camera = create_demo_scene(DemoSceneParams(width=40, height=20))
        canvas = camera.render(world)
        image = canvas.to_numpy()

        assert image.shape == (20, 40, 3)
        assert np.all(np.isfinite(image))
        assert np.all(image >= 0.0)
        # The bottom row looks at the floor, never at the background
        assert all(canvas.pixel_at(x, 19) != BLACK for x in range(40))
        # The top row looks above the horizon into empty space
        assert all(canvas.pixel_at(x, 0) == BLACK for x in range(40))

    def test_render_is_deterministic(self):
        """Test the same scene renders to identical bytes."""
        params = DemoSceneParams(width=24, height=12)
        world_a, camera_a = create_demo_scene(params)
        world_b, camera_b = create_demo_scene(params)
        assert canvas_to_ppm(camera_a.render(world_a)) == canvas_to_ppm(camera_b.render(world_b))

    def test_checker_floor_changes_image(self):
        """Test the floor pattern is visible in the render."""
        size = {"width": 24, "height": 12}
        world_a, camera_a = create_demo_scene(DemoSceneParams(**size))
        world_b, camera_b = create_demo_scene(DemoSceneParams(checkered_floor=False, **size))
        assert not np.array_equal(
            camera_a.render(world_a).to_numpy(), camera_b.render(world_b).to_numpy()
        )

    def test_sphere_on_plane_is_reproducible(self):
        """Test a minimal sphere-on-plane scene renders identically twice."""
        world = World(
            shapes=[Plane(), Sphere(transform=translation(0, 1, 0))],
            lights=[PointLight(point(-10, 10, -10), WHITE)],
        )
        camera = Camera(20, 10, math.pi / 3)
        camera.transform = view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0))

        first = camera.render(world).to_numpy()
        second = camera.render(world).to_numpy()
        assert np.array_equal(first, second)
        assert np.any(first > 0.0)

    def test_removing_occluder_removes_shadow(self):
        """Test a point behind a sphere is lit once the sphere is gone."""
        light = PointLight(point(0, 10, 0), WHITE)
        occluder = Sphere(transform=translation(0, 5, 0))
        world = World(shapes=[Plane(), occluder], lights=[light])
        assert world.is_shadowed(point(0, 0.001, 0), light) is True

        world.shapes.remove(occluder)
        assert world.is_shadowed(point(0, 0.001, 0), light) is False

    def test_render_and_save_png(self, tmp_path: Path) -> None:
        """Test rendering and writing a PNG."""
        world, camera = create_demo_scene(DemoSceneParams(width=16, height=8))
        output = save_image(camera.render(world), tmp_path / "demo.png")

        with PILImage.open(output) as img:
            assert img.size == (16, 8)


class TestRenderScript:
    """Tests for the command-line render script."""

    def test_main_writes_ppm(self, tmp_path: Path, capsys) -> None:
        """Test the script renders with the Python backend."""
        from examples.render_scene import main

        output = tmp_path / "scene.ppm"
        code = main(["--width", "8", "--height", "4", "--output", str(output)])

        assert code == 0
        assert output.read_text(encoding="ascii").startswith("P3\n8 4\n255\n")
        out = capsys.readouterr().out
        assert "Progress: 4/4 rows" in out
        assert "Saved to:" in out

    def test_main_quiet(self, tmp_path: Path, capsys) -> None:
        """Test --quiet suppresses progress output."""
        from examples.render_scene import main

        output = tmp_path / "scene.png"
        code = main(["--width", "4", "--height", "2", "--output", str(output), "--quiet"])

        assert code == 0
        assert output.exists()
        assert capsys.readouterr().out == ""

    def test_main_reports_bad_format(self, tmp_path: Path, capsys) -> None:
        """Test an unsupported output suffix is reported on stderr."""
        from examples.render_scene import main

        code = main(["--width", "4", "--height", "2", "--output", str(tmp_path / "x.bmp"), "--quiet"])

        assert code == 1
        assert "Unsupported image format" in capsys.readouterr().err
