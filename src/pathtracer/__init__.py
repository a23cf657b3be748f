"""CPU Monte Carlo path tracer: ray/scene intersection, BVH acceleration,
material scattering and a recursive radiance integrator."""

from pathtracer.core.vector import Vector3, Point3, Color
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry import (
    HitRecord, Sphere, Plane, Triangle, TriangleMesh, Parallelepiped,
    HittableList, BVHNode, build_bvh, load_obj,
)
from pathtracer.materials import Lambertian, Metal, Dielectric, BlackBody, ScatterRecord
from pathtracer.camera.camera import Camera
from pathtracer.renderer import RenderConfig, Renderer, ray_color

__version__ = "0.1.0"
