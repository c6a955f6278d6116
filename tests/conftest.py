"""Pytest configuration for ray tracer tests.

This module provides shared fixtures for all test modules. The Taichi
runtime is optional: tests that need it request ``taichi_runtime``, which
skips them when Taichi is not installed and initializes it once per session
otherwise.
"""

import pytest


@pytest.fixture(scope="session")
def taichi_runtime():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls, which would
    invalidate fields allocated by earlier tests.
    """
    pytest.importorskip("taichi")
    from whitted.core.integrator import init_taichi

    init_taichi()
    yield
    # Note: We don't call ti.reset() here; renderers created by other tests
    # may still hold fields


@pytest.fixture
def default_world():
    """Fresh two-sphere reference world for each test."""
    from whitted.scene.world import default_world as build_default_world

    return build_default_world()
