"""Unit tests for sphere, plane and triangle intersection.

Tests cover:
- Ray hitting from outside (front face) and from inside (back face)
- Misses, parallel rays and range limits
- Hollow spheres via negative radius
- Bounding boxes of each primitive
"""

import math

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.mesh import BOX_PADDING, Triangle
from pathtracer.geometry.plane import Plane
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.black_body import BlackBody
from helpers import assert_vec_close

ORIGIN = Vector3(0.0, 0.0, 0.0)


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def test_hit_from_outside(self, unit_sphere):
        rec = unit_sphere.hit_by(Ray(ORIGIN, Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec is not None
        assert rec.t == 0.5
        assert rec.p == Vector3(0.0, 0.0, -0.5)
        assert rec.normal == Vector3(0.0, 0.0, 1.0)
        assert rec.front_face
        assert rec.material is unit_sphere.material

    def test_miss(self, unit_sphere):
        assert unit_sphere.hit_by(Ray(ORIGIN, Vector3(1.0, 0.0, 0.0)), 0.001, math.inf) is None

    def test_hit_from_inside_reports_back_face(self, unit_sphere):
        ray = Ray(Vector3(0.0, 0.0, -1.0), Vector3(0.0, 0.0, -1.0))
        rec = unit_sphere.hit_by(ray, 0.001, math.inf)
        assert rec.t == 0.5
        assert not rec.front_face
        # Normal is flipped to oppose the ray
        assert rec.normal == Vector3(0.0, 0.0, 1.0)

    def test_far_root_used_when_near_root_out_of_range(self, unit_sphere):
        rec = unit_sphere.hit_by(Ray(ORIGIN, Vector3(0.0, 0.0, -1.0)), 0.6, math.inf)
        assert rec.t == 1.5
        assert not rec.front_face

    def test_both_roots_beyond_t_max(self, unit_sphere):
        assert unit_sphere.hit_by(Ray(ORIGIN, Vector3(0.0, 0.0, -1.0)), 0.001, 0.4) is None

    def test_range_is_exclusive(self, unit_sphere):
        ray = Ray(ORIGIN, Vector3(0.0, 0.0, -1.0))
        rec = unit_sphere.hit_by(ray, 0.5, math.inf)
        assert rec.t == 1.5
        assert unit_sphere.hit_by(ray, 0.001, 0.5) is None

    def test_negative_radius_flips_outward_normal(self):
        shell = Sphere(Vector3(0.0, 0.0, -1.0), -0.5, BlackBody())
        rec = shell.hit_by(Ray(ORIGIN, Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec.t == 0.5
        assert not rec.front_face
        assert rec.normal == Vector3(0.0, 0.0, 1.0)

    def test_zero_direction_is_a_miss(self, unit_sphere):
        assert unit_sphere.hit_by(Ray(ORIGIN, Vector3(0.0, 0.0, 0.0)), 0.001, math.inf) is None

    def test_zero_radius_is_a_miss(self):
        point = Sphere(Vector3(0.0, 0.0, -1.0), 0.0, BlackBody())
        assert point.hit_by(Ray(ORIGIN, Vector3(0.0, 0.0, -1.0)), 0.001, math.inf) is None
        assert point.hit_by(Ray(ORIGIN, Vector3(0.0, 0.0, -1.0)), -math.inf, math.inf) is None

    def test_unnormalized_direction(self, unit_sphere):
        rec = unit_sphere.hit_by(Ray(ORIGIN, Vector3(0.0, 0.0, -2.0)), 0.001, math.inf)
        assert rec.t == 0.25
        assert rec.p == Vector3(0.0, 0.0, -0.5)

    def test_rays_aimed_at_center(self, rng):
        sphere = Sphere(Vector3(1.0, -2.0, 3.0), 0.75, BlackBody())
        for _ in range(200):
            offset = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1))
            if offset.near_zero(1e-3):
                continue
            origin = sphere.center + offset.normalize() * rng.uniform(2.0, 10.0)
            to_center = sphere.center - origin
            direction = to_center.normalize()
            rec = sphere.hit_by(Ray(origin, direction), 0.001, math.inf)
            assert rec is not None
            assert abs(rec.t - (to_center.length() - sphere.radius)) < 1e-9
            assert abs(rec.normal.length() - 1.0) < 1e-9
            assert rec.normal.dot(direction) <= 0.0

    def test_bounding_box(self):
        box = Sphere(Vector3(1.0, 2.0, 3.0), -0.5, BlackBody()).bounding_box()
        assert box.minimum == Vector3(0.5, 1.5, 2.5)
        assert box.maximum == Vector3(1.5, 2.5, 3.5)


class TestPlaneIntersection:
    """Tests for ray-plane intersection."""

    plane = Plane(Vector3(0.0, -0.5, 0.0), Vector3(0.0, 2.0, 0.0), BlackBody())

    def test_normal_is_normalized(self):
        assert self.plane.normal == Vector3(0.0, 1.0, 0.0)

    def test_hit_from_above(self):
        rec = self.plane.hit_by(Ray(ORIGIN, Vector3(0.0, -1.0, 0.0)), 0.001, math.inf)
        assert rec.t == 0.5
        assert rec.front_face
        assert rec.normal == Vector3(0.0, 1.0, 0.0)

    def test_hit_from_below(self):
        ray = Ray(Vector3(0.0, -1.0, 0.0), Vector3(0.0, 1.0, 0.0))
        rec = self.plane.hit_by(ray, 0.001, math.inf)
        assert rec.t == 0.5
        assert not rec.front_face
        assert rec.normal == Vector3(0.0, -1.0, 0.0)

    def test_parallel_ray_misses(self):
        assert self.plane.hit_by(Ray(ORIGIN, Vector3(1.0, 0.0, 0.0)), 0.001, math.inf) is None

    def test_nearly_parallel_ray_misses(self):
        assert self.plane.hit_by(Ray(ORIGIN, Vector3(1.0, -1e-9, 0.0)), 0.001, math.inf) is None

    def test_plane_behind_ray(self):
        assert self.plane.hit_by(Ray(ORIGIN, Vector3(0.0, 1.0, 0.0)), 0.001, math.inf) is None

    def test_beyond_t_max(self):
        assert self.plane.hit_by(Ray(ORIGIN, Vector3(0.0, -1.0, 0.0)), 0.001, 0.4) is None

    def test_bounding_box_is_unbounded(self):
        box = self.plane.bounding_box()
        assert all(c == -math.inf for c in box.minimum)
        assert all(c == math.inf for c in box.maximum)


class TestTriangleIntersection:
    """Tests for Möller–Trumbore ray-triangle intersection."""

    triangle = Triangle(Vector3(-1.0, -1.0, -2.0), Vector3(1.0, -1.0, -2.0),
                        Vector3(0.0, 1.0, -2.0), BlackBody())

    def test_face_normal(self):
        assert self.triangle.normal == Vector3(0.0, 0.0, 1.0)

    def test_hit(self):
        rec = self.triangle.hit_by(Ray(ORIGIN, Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec.t == 2.0
        assert rec.p == Vector3(0.0, 0.0, -2.0)
        assert rec.front_face
        assert rec.normal == Vector3(0.0, 0.0, 1.0)

    def test_hit_from_behind(self):
        ray = Ray(Vector3(0.0, 0.0, -4.0), Vector3(0.0, 0.0, 1.0))
        rec = self.triangle.hit_by(ray, 0.001, math.inf)
        assert rec.t == 2.0
        assert not rec.front_face
        assert rec.normal == Vector3(0.0, 0.0, -1.0)

    def test_outside_barycentric_bounds(self):
        for origin in (Vector3(5.0, 0.0, 0.0), Vector3(0.0, -1.5, 0.0), Vector3(0.9, 0.9, 0.0)):
            assert self.triangle.hit_by(Ray(origin, Vector3(0.0, 0.0, -1.0)), 0.001, math.inf) is None

    def test_parallel_ray_misses(self):
        assert self.triangle.hit_by(Ray(ORIGIN, Vector3(1.0, 0.0, 0.0)), 0.001, math.inf) is None

    def test_degenerate_triangle_never_hit(self):
        sliver = Triangle(Vector3(-1.0, 0.0, -2.0), Vector3(0.0, 0.0, -2.0),
                          Vector3(1.0, 0.0, -2.0), BlackBody())
        assert sliver.hit_by(Ray(ORIGIN, Vector3(0.0, 0.0, -1.0)), 0.001, math.inf) is None

    def test_range(self):
        assert self.triangle.hit_by(Ray(ORIGIN, Vector3(0.0, 0.0, -1.0)), 0.001, 1.5) is None

    def test_flat_bounding_box_is_padded(self):
        box = self.triangle.bounding_box()
        assert box.minimum.x == -1.0 and box.maximum.x == 1.0
        assert box.minimum.y == -1.0 and box.maximum.y == 1.0
        assert_vec_close([box.maximum.z - box.minimum.z], [BOX_PADDING], 1e-12)
        assert box.hit(Ray(ORIGIN, Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
