# materials/material.py
import random
from typing import NamedTuple, Optional
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3

class ScatterRecord(NamedTuple):
    """Outgoing ray and the per-channel attenuation applied to its radiance."""
    ray: Ray
    attenuation: Vector3

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are immutable values shared by every shape they are attached to.
    """
    def scatter(self, ray_in: Ray, rec, rng: random.Random) -> Optional[ScatterRecord]:
        """
        Computes the scattered ray and attenuation.
        Returns a ScatterRecord, or None if the light is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
