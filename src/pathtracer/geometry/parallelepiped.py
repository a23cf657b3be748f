from typing import List, Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.mesh import Triangle
from pathtracer.geometry.world import HittableList

def _quad(corner: Vector3, u: Vector3, v: Vector3, material) -> List[Triangle]:
    # Both triangles share the face normal u x v
    return [
        Triangle(corner, corner + u, corner + u + v, material),
        Triangle(corner, corner + u + v, corner + v, material),
    ]

class Parallelepiped(Hittable):
    """
    Solid spanned by three edge vectors from a corner, stored as 12 triangles
    with outward-facing normals and intersected by a linear scan.
    """
    def __init__(self, corner: Vector3, a: Vector3, b: Vector3, c: Vector3, material):
        if a.cross(b).dot(c) < 0:
            b, c = c, b
        self.corner = corner
        self.material = material
        o = corner
        self.faces = HittableList(
            _quad(o, b, a, material) + _quad(o + c, a, b, material) +
            _quad(o, c, b, material) + _quad(o + a, b, c, material) +
            _quad(o, a, c, material) + _quad(o + b, c, a, material)
        )

    @classmethod
    def box(cls, p_min: Vector3, p_max: Vector3, material) -> "Parallelepiped":
        """Axis-aligned box between two opposite corners."""
        d = p_max - p_min
        return cls(p_min, Vector3(d.x, 0, 0), Vector3(0, d.y, 0), Vector3(0, 0, d.z), material)

    @property
    def triangles(self) -> List[Triangle]:
        return self.faces.objects

    def hit_by(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.faces.hit_exhaustive(ray, t_min, t_max)

    def bounding_box(self) -> AABB:
        return self.faces.bounding_box()
