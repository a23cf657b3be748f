# materials/black_body.py
import random
from dataclasses import dataclass
from typing import Optional
from pathtracer.core.ray import Ray
from pathtracer.materials.material import Material, ScatterRecord

@dataclass(frozen=True)
class BlackBody(Material):
    """
    Absorbs all incoming light. There is no emission term, so a path that
    reaches a black body contributes nothing.
    """

    def scatter(self, ray_in: Ray, rec, rng: random.Random) -> Optional[ScatterRecord]:
        """
        Black bodies do not scatter rays.
        """
        return None
