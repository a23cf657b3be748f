# geometry/bvh.py
import logging
import random
from typing import Optional, Sequence
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over any boundable, hittable objects.

    A node is either a leaf holding one object, or an internal node owning a
    left and right child whose boxes are merged into its own. The tree is
    immutable once built; rebuild it to reflect scene changes.
    """
    __slots__ = ("box", "left", "right", "is_leaf", "object")

    def __init__(self, box: AABB, left: "BVHNode" = None, right: "BVHNode" = None,
                 obj: Hittable = None):
        self.box = box
        self.left = left
        self.right = right
        self.is_leaf = obj is not None
        self.object = obj

    @classmethod
    def leaf(cls, obj: Hittable) -> "BVHNode":
        return cls(obj.bounding_box(), obj=obj)

    @classmethod
    def from_items(cls, items: Sequence[Hittable], rng: random.Random) -> "BVHNode":
        """
        Build a tree top-down with a median split along a random axis.

        The input sequence is not modified. Objects are shared, not copied,
        so the same shapes may back several trees.
        """
        if len(items) == 0:
            raise ValueError("cannot build a BVH from an empty collection")
        root = cls._build(list(items), rng)
        logger.debug("built BVH over %d objects", len(items))
        return root

    @classmethod
    def _build(cls, objects: list, rng: random.Random) -> "BVHNode":
        if len(objects) == 1:
            return cls.leaf(objects[0])

        axis = rng.randrange(3)
        # sorted() is stable, so ties keep their input order
        objects = sorted(objects, key=lambda obj: obj.bounding_box().minimum[axis])
        mid = len(objects) // 2

        left = cls._build(objects[:mid], rng)
        right = cls._build(objects[mid:], rng)
        box = AABB.surrounding_box(left.bounding_box(), right.bounding_box())
        return cls(box, left, right)

    def hit_by(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.is_leaf:
            return self.object.hit_by(ray, t_min, t_max)

        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit_by(ray, t_min, t_max)

        # Never search the right branch beyond a hit already found on the left
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit_by(ray, t_min, t_max)

        # The tightened bound guarantees a right hit is the closer one
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def depth(self) -> int:
        if self.is_leaf:
            return 1
        return 1 + max(self.left.depth(), self.right.depth())

    def __len__(self) -> int:
        if self.is_leaf:
            return 1
        return len(self.left) + len(self.right)

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"BVHLeaf({self.object!r})"
        return f"BVHNode(box={self.box!r}, left={self.left!r}, right={self.right!r})"


def build_bvh(items: Sequence[Hittable], rng: random.Random) -> BVHNode:
    """Build a BVH over items; see BVHNode.from_items."""
    return BVHNode.from_items(items, rng)
