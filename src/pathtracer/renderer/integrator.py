# renderer/integrator.py
import math
import random
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable

# Offset against re-hitting the surface a ray leaves from ("shadow acne")
T_MIN = 0.001

BLACK = Vector3(0.0, 0.0, 0.0)
HORIZON = Vector3(1.0, 1.0, 1.0)
ZENITH = Vector3(0.5, 0.7, 1.0)

def background(ray: Ray) -> Vector3:
    """Vertical white-to-sky-blue gradient standing in for environment light."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return HORIZON * (1.0 - t) + ZENITH * t

def ray_color(ray: Ray, world: Hittable, depth: int, rng: random.Random) -> Vector3:
    """
    Radiance carried back along `ray`, following at most `depth` bounces.

    Each bounce multiplies the attenuation of the scattering material into the
    radiance of the next segment; absorption and an exhausted depth give black.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit_by(ray, T_MIN, math.inf)
    if rec is None:
        return background(ray)

    scattered = rec.material.scatter(ray, rec, rng)
    if scattered is None:
        return BLACK

    return scattered.attenuation * ray_color(scattered.ray, world, depth - 1, rng)
