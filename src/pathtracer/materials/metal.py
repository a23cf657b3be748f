# materials/metal.py
import random
from dataclasses import dataclass
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, random_in_unit_sphere
from pathtracer.materials.material import Material, ScatterRecord

@dataclass(frozen=True)
class Metal(Material):
    """
    Metal material: mirror reflection perturbed by `fuzz` (clamped to [0, 1]).

    Rays fuzzed below the surface are not absorbed; they keep propagating.
    """
    albedo: Vector3
    fuzz: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "fuzz", min(max(self.fuzz, 0.0), 1.0))

    def scatter(self, ray_in: Ray, rec, rng: random.Random) -> Optional[ScatterRecord]:
        reflected = reflect(ray_in.direction, rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz)
        return ScatterRecord(scattered, self.albedo)
