"""Pytest configuration for spheretrace tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls, which would
    discard every field allocated by the modules under test.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture(autouse=True)
def reset_render_state():
    """Reset the render target before and after each test.

    This ensures tests are isolated from each other.
    """
    # Import here so fields are allocated after Taichi is initialized
    from spheretrace.core.target import reset_render_target

    reset_render_target()
    yield
    reset_render_target()


@pytest.fixture
def reference_scene():
    """Upload the reference camera and sphere: unit sphere at z=10 seen by
    a 1024x1024 sensor with 0.001 pixels at focal length 1."""
    from spheretrace.camera.pinhole import setup_camera
    from spheretrace.core.config import default_render_config
    from spheretrace.core.sampler import setup_sphere

    config = default_render_config()
    setup_camera(config.camera)
    setup_sphere(config.sphere.center, config.sphere.radius)
    return config
