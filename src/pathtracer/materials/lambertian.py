# materials/lambertian.py
import random
from dataclasses import dataclass
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import random_unit_vector
from pathtracer.materials.material import Material, ScatterRecord

@dataclass(frozen=True)
class Lambertian(Material):
    """
    Lambertian diffuse material.
    """
    albedo: Vector3

    def scatter(self, ray_in: Ray, rec, rng: random.Random) -> Optional[ScatterRecord]:
        # Pick a random scatter direction by adding a random unit vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate, just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return ScatterRecord(Ray(rec.p, scatter_direction), self.albedo)
