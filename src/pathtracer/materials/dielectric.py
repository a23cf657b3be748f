# src/materials/dielectric.py
import math
import random
from dataclasses import dataclass
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, refract, schlick
from pathtracer.materials.material import Material, ScatterRecord

WHITE = Vector3(1.0, 1.0, 1.0)

@dataclass(frozen=True)
class Dielectric(Material):
    """Clear refractive material (glass, water); never absorbs light."""
    ref_idx: float

    def refraction_ratio(self, front_face: bool) -> float:
        # Determine if we're entering or exiting the material
        return 1.0 / self.ref_idx if front_face else self.ref_idx

    def scatter(self, ray_in: Ray, rec, rng: random.Random) -> Optional[ScatterRecord]:
        ni_over_nt = self.refraction_ratio(rec.front_face)
        unit_direction = ray_in.direction.normalize()

        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        # Total internal reflection, or a Fresnel reflection chosen by Schlick's approximation
        cannot_refract = ni_over_nt * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, ni_over_nt) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ni_over_nt)

        return ScatterRecord(Ray(rec.p, direction), WHITE)
