# src/geometry/world.py
import logging
import random
from typing import Iterable, List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class HittableList(Hittable):
    """
    A list of Hittable objects. Intersection scans every member unless a BVH
    has been built, in which case the tree is traversed instead.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []
        self.bvh_root: Optional[BVHNode] = None

    def add(self, obj: Hittable):
        self.objects.append(obj)
        # A tree built before the addition no longer covers the scene
        self.bvh_root = None

    def clear(self):
        self.objects.clear()
        self.bvh_root = None

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def build_bvh(self, rng: random.Random) -> BVHNode:
        self.bvh_root = BVHNode.from_items(self.objects, rng)
        logger.info("BVH built over %d objects (depth %d)",
                    len(self.objects), self.bvh_root.depth())
        return self.bvh_root

    def hit_by(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit_by(ray, t_min, t_max)
        return self.hit_exhaustive(ray, t_min, t_max)

    def hit_exhaustive(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Test every member and keep the closest hit in range."""
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit_by(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        if not self.objects:
            raise ValueError("bounding box of an empty HittableList is undefined")
        box = self.objects[0].bounding_box()
        for obj in self.objects[1:]:
            box = AABB.surrounding_box(box, obj.bounding_box())
        return box
