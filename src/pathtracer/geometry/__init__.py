from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.plane import Plane
from pathtracer.geometry.mesh import Triangle, TriangleMesh, load_obj
from pathtracer.geometry.parallelepiped import Parallelepiped
from pathtracer.geometry.world import HittableList
from pathtracer.geometry.bvh import BVHNode, build_bvh

__all__ = [
    "Hittable", "HitRecord", "Sphere", "Plane", "Triangle", "TriangleMesh",
    "load_obj", "Parallelepiped", "HittableList", "BVHNode", "build_bvh",
]
