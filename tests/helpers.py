"""Shared helpers for building rays and hit records in tests."""

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord


def make_hit(normal, front_face=True, point=None, material=None):
    """Hit record at `point` (origin by default) with the given facing normal."""
    return HitRecord(
        p=point if point is not None else Vector3(0.0, 0.0, 0.0),
        normal=normal,
        t=1.0,
        front_face=front_face,
        material=material,
    )


def random_ray(rng, extent=5.0):
    """Ray from a random origin in [-extent, extent]^3 with a random unit direction."""
    origin = Vector3(rng.uniform(-extent, extent),
                     rng.uniform(-extent, extent),
                     rng.uniform(-extent, extent))
    while True:
        d = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1))
        if 0 < d.length_squared() < 1:
            return Ray(origin, d.normalize())


def assert_vec_close(actual, expected, tol=1e-9):
    for a, e in zip(actual, expected):
        assert abs(a - e) < tol, f"{actual!r} != {expected!r}"
