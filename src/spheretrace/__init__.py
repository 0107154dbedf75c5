"""Normal-shaded sphere renderer built on Taichi.

Renders a single sphere seen through a pinhole camera. Each pixel averages
several jittered camera rays, and every hit is colored by its surface normal.
The result is written as a PNG.

Subpackages:
    core: Ray and vector utilities, configuration, render target, sampler
        kernels and the SphereRenderer
    geometry: Sphere primitive and ray-sphere intersection
    camera: Pinhole camera with jittered ray generation
    materials: Normal-to-RGB shading
    preview: PNG export
"""

__version__ = "0.1.0"
