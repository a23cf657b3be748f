# geometry/mesh.py
import logging
import random
from typing import List, Optional, Sequence
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

DETERMINANT_EPSILON = 1e-8
# Minimum thickness of a triangle's box, so axis-aligned triangles stay visible to the slab test
BOX_PADDING = 1e-4

class Triangle(Hittable):
    """Represents a single triangle in 3D space with a flat face normal."""
    def __init__(self, v0: Vector3, v1: Vector3, v2: Vector3, material):
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        self.material = material
        self.edge1 = v1 - v0
        self.edge2 = v2 - v0
        self.normal = self.edge1.cross(self.edge2).normalize()

    def hit_by(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Möller–Trumbore intersection algorithm
        h = ray.direction.cross(self.edge2)
        a = self.edge1.dot(h)

        # Ray parallel to the triangle, or degenerate triangle
        if abs(a) < DETERMINANT_EPSILON:
            return None

        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(self.edge1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * self.edge2.dot(q)
        if t <= t_min or t >= t_max:
            return None

        return HitRecord.from_outward_normal(ray, t, self.normal, self.material)

    def bounding_box(self) -> AABB:
        """Compute the bounding box for the triangle."""
        lo = [min(self.v0[a], self.v1[a], self.v2[a]) for a in range(3)]
        hi = [max(self.v0[a], self.v1[a], self.v2[a]) for a in range(3)]
        for a in range(3):
            if hi[a] - lo[a] < BOX_PADDING:
                lo[a] -= BOX_PADDING / 2
                hi[a] += BOX_PADDING / 2
        return AABB(Vector3(*lo), Vector3(*hi))

    def __repr__(self) -> str:
        return f"Triangle({self.v0!r}, {self.v1!r}, {self.v2!r})"

class TriangleMesh(Hittable):
    """Represents a 3D mesh composed of triangles, searched through its own BVH."""
    def __init__(self, triangles: Sequence[Triangle], rng: random.Random):
        if not triangles:
            raise ValueError("a TriangleMesh needs at least one triangle")
        self.triangles = list(triangles)
        self.bvh = BVHNode.from_items(self.triangles, rng)

    def hit_by(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return self.bvh.hit_by(ray, t_min, t_max)

    def bounding_box(self) -> AABB:
        return self.bvh.bounding_box()

    def __len__(self) -> int:
        return len(self.triangles)

def load_obj(filename: str, material, rng: random.Random) -> TriangleMesh:
    """
    Load a Wavefront OBJ file as a TriangleMesh.

    Only `v` and `f` records are used; polygonal faces are fan-triangulated
    (assumed convex) and negative indices count back from the last vertex.
    """
    vertices: List[Vector3] = []
    triangles: List[Triangle] = []

    with open(filename, 'r') as f:
        for line_num, line in enumerate(f, 1):
            values = line.split()
            if not values or values[0].startswith('#'):
                continue
            try:
                if values[0] == 'v':  # Vertex
                    vertices.append(Vector3(float(values[1]), float(values[2]), float(values[3])))
                elif values[0] == 'f':  # Face
                    indices = [_vertex_index(v, len(vertices)) for v in values[1:]]
                    if len(indices) < 3:
                        raise ValueError("face needs at least three vertices")
                    for i in range(1, len(indices) - 1):
                        triangles.append(Triangle(vertices[indices[0]],
                                                  vertices[indices[i]],
                                                  vertices[indices[i + 1]],
                                                  material))
            except (IndexError, ValueError) as e:
                raise ValueError(f"{filename}:{line_num}: cannot parse {line.strip()!r}: {e}") from e

    logger.info("Loaded %s: %d vertices, %d triangles", filename, len(vertices), len(triangles))
    return TriangleMesh(triangles, rng)

def _vertex_index(token: str, vertex_count: int) -> int:
    # "7", "7/1" or "7/1/3": only the position index matters; OBJ indices are 1-based
    idx = int(token.split('/')[0])
    if idx < 0:
        idx += vertex_count
    else:
        idx -= 1
    if not 0 <= idx < vertex_count:
        raise IndexError(f"vertex index {token} out of range")
    return idx
