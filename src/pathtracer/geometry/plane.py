from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord

PARALLEL_EPSILON = 1e-8

class Plane(Hittable):
    """
    Infinite plane through `center` with the given normal.
    """
    def __init__(self, center: Vector3, normal: Vector3, material):
        self.center = center
        self.normal = normal.normalize()
        self.material = material

    def hit_by(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        denom = self.normal.dot(ray.direction)
        # Ray (nearly) parallel to the plane
        if abs(denom) < PARALLEL_EPSILON:
            return None

        t = (self.center - ray.origin).dot(self.normal) / denom
        if t <= t_min or t >= t_max:
            return None

        return HitRecord.from_outward_normal(ray, t, self.normal, self.material)

    def bounding_box(self) -> AABB:
        return AABB.unbounded()

    def __repr__(self) -> str:
        return f"Plane(center={self.center!r}, normal={self.normal!r}, material={self.material!r})"
