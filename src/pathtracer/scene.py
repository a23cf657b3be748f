"""
Built-in scenes.

A Scene bundles the render configuration, the camera and the shapes. The
shapes are owned by the scene; acceleration structures are derived from them
on demand and never modify them.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import List

from pathtracer.camera.camera import Camera
from pathtracer.core.utils import random_color
from pathtracer.core.vector import Vector3
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.plane import Plane
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import ColorPresets, MaterialPresets
from pathtracer.renderer.config import RenderConfig

logger = logging.getLogger(__name__)

@dataclass
class Scene:
    render_config: RenderConfig
    camera: Camera
    shapes: List[Hittable] = field(default_factory=list)

    def world(self) -> HittableList:
        """Flat list over the scene's shapes, searched exhaustively."""
        return HittableList(self.shapes)

    def bvh(self, rng: random.Random) -> BVHNode:
        return BVHNode.from_items(self.shapes, rng)

def _default_camera(config: RenderConfig) -> Camera:
    return Camera(
        lookfrom=Vector3(-2.0, 2.0, 1.0),
        lookat=Vector3(0.0, 0.0, -1.0),
        vup=Vector3(0.0, 1.0, 0.0),
        vfov=90.0,
        aspect_ratio=config.aspect_ratio,
        aperture=0.0,
        focus_dist=10.0,
    )

def setup_small_scene(config: RenderConfig) -> Scene:
    """Ground plane, a diffuse sphere, a hollow glass sphere and a mirror sphere."""
    navy = ColorPresets.NAVY
    shapes = [
        Plane(Vector3(0.0, -0.5, 0.0), Vector3(0.0, 1.0, 0.0), MaterialPresets.matte(navy)),
        Sphere(Vector3(0.0, 0.0, -1.0), 0.5, MaterialPresets.matte(navy)),
        Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, MaterialPresets.glass()),
        # Negative radius: inward normals, making the glass sphere a thin shell
        Sphere(Vector3(-1.0, 0.0, -1.0), -0.45, MaterialPresets.glass()),
        Sphere(Vector3(1.0, 0.0, -1.0), 0.5, MaterialPresets.mirror(navy)),
    ]
    return Scene(config, _default_camera(config), shapes)

def random_sphere(rng: random.Random, coord_range=(-20.0, 20.0), radius_range=(0.0, 0.5)) -> Sphere:
    radius = rng.uniform(*radius_range)
    center = Vector3(rng.uniform(*coord_range), rng.uniform(*coord_range), rng.uniform(*coord_range))
    return Sphere(center, radius, MaterialPresets.matte(ColorPresets.NAVY))

def setup_scene(rng: random.Random, config: RenderConfig, num_spheres: int) -> Scene:
    """`num_spheres` small diffuse spheres scattered through a 40-unit cube."""
    shapes = [random_sphere(rng) for _ in range(num_spheres)]
    return Scene(config, _default_camera(config), shapes)

def random_large_scene(rng: random.Random, config: RenderConfig = None) -> Scene:
    """
    A field of small random spheres around three large ones (glass, diffuse,
    mirror) on a huge ground sphere.
    """
    if config is None:
        config = RenderConfig(image_width=1200, image_height=800,
                              samples_per_pixel=500, max_depth=50)
    shapes: List[Hittable] = [
        Sphere(Vector3(0.0, -1000.0, -1.0), 1000.0, MaterialPresets.matte(ColorPresets.GRAY)),
    ]

    p = Vector3(4.0, 0.2, 0.0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - p).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                material = Lambertian(random_color(rng) * random_color(rng))
            elif choose_mat < 0.95:
                material = Metal(random_color(rng, 0.5, 1.0), rng.uniform(0.0, 0.5))
            else:
                material = MaterialPresets.glass()
            shapes.append(Sphere(center, 0.2, material))

    shapes.append(Sphere(Vector3(0.0, 1.0, 0.0), 1.0, MaterialPresets.glass()))
    shapes.append(Sphere(Vector3(-4.0, 1.0, 0.0), 1.0, MaterialPresets.matte(ColorPresets.BROWN)))
    shapes.append(Sphere(Vector3(4.0, 1.0, 0.0), 1.0, MaterialPresets.mirror()))

    camera = Camera(
        lookfrom=Vector3(13.0, 2.0, 3.0),
        lookat=Vector3(0.0, 0.0, 0.0),
        vup=Vector3(0.0, 1.0, 0.0),
        vfov=20.0,
        aspect_ratio=config.aspect_ratio,
        aperture=0.1,
        focus_dist=10.0,
    )
    logger.info("Generated large random scene with %d spheres", len(shapes))
    return Scene(config, camera, shapes)

SCENES = {
    "small": lambda rng, config: setup_small_scene(config),
    "random": lambda rng, config: setup_scene(rng, config, 100),
    "large": lambda rng, config: random_large_scene(rng, config),
}
