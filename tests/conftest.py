"""Pytest configuration for path tracer tests.

Provides seeded random generators and a few small reference scenes shared
across test modules.
"""

import random

import pytest

from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.lambertian import Lambertian


@pytest.fixture
def rng():
    """Deterministic generator so stochastic tests are reproducible."""
    return random.Random(42213)


@pytest.fixture
def unit_sphere():
    """Sphere of radius 0.5 at (0, 0, -1) with a white diffuse material."""
    return Sphere(Vector3(0.0, 0.0, -1.0), 0.5, Lambertian(Vector3(1.0, 1.0, 1.0)))
