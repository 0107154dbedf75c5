"""Render constants and configuration.

Every fixed number the renderer depends on lives here under a name, and the
reference scene is assembled by ``default_render_config()``. There is no
file or command-line configuration; callers build a ``RenderConfig`` in code.

Example:
    >>> from spheretrace.core.config import RenderConfig, default_render_config
    >>> config = default_render_config()
    >>> config.samples_per_pixel
    8
"""

from dataclasses import dataclass, field

from spheretrace.camera.pinhole import PinholeCamera

# =============================================================================
# Sampling Constants
# =============================================================================

# Jittered samples taken per pixel
SUPERSAMPLE = 8

# Width of the per-axis jitter interval; jitter is drawn from
# [-JITTER_SPAN / 2, JITTER_SPAN / 2)
JITTER_SPAN = 1.0

# =============================================================================
# Output Constants
# =============================================================================

OUTPUT_PATH = "output.png"

# Square image size of the sphere render
RAYTRACER_SIZE = 1024

# Square image size of the gradient variant
GRADIENT_SIZE = 512

# Gradient channels wrap at this value (x % 255, y % 255)
GRADIENT_WRAP = 255

# Constant blue channel of the gradient
GRADIENT_BLUE = 50

# =============================================================================
# Reference Scene
# =============================================================================

SPHERE_CENTER = (0.0, 0.0, 10.0)
SPHERE_RADIUS = 1.0
FOCAL_LENGTH = 1.0
PIXEL_SIZE = 0.001


@dataclass(frozen=True)
class SphereConfig:
    """Python-side description of the sphere.

    Attributes:
        center: Sphere center in world space (x, y, z).
        radius: Sphere radius. Must be positive; this is not checked.
    """

    center: tuple[float, float, float] = SPHERE_CENTER
    radius: float = SPHERE_RADIUS


@dataclass(frozen=True)
class RenderConfig:
    """Everything needed to render one image.

    Attributes:
        camera: Pinhole camera; its sensor size is the output image size.
        sphere: The single primitive in the scene.
        samples_per_pixel: Number of jittered samples averaged per pixel.
        jitter_span: Width of the jitter interval. 1.0 covers the whole
            pixel; 0.0 makes every sample go through the pixel corner point
            and the render deterministic.
        output_path: Where the image is written.
    """

    camera: PinholeCamera = field(
        default_factory=lambda: PinholeCamera(
            focal_length=FOCAL_LENGTH,
            sensor_width=RAYTRACER_SIZE,
            sensor_height=RAYTRACER_SIZE,
            pixel_size=PIXEL_SIZE,
        )
    )
    sphere: SphereConfig = field(default_factory=SphereConfig)
    samples_per_pixel: int = SUPERSAMPLE
    jitter_span: float = JITTER_SPAN
    output_path: str = OUTPUT_PATH

    @property
    def width(self) -> int:
        return self.camera.sensor_width

    @property
    def height(self) -> int:
        return self.camera.sensor_height


def default_render_config() -> RenderConfig:
    """Return the reference scene: a unit sphere 10 units in front of the
    camera, seen by a 1024x1024 sensor at focal length 1.0."""
    return RenderConfig()
