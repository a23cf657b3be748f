"""Tests for the thin-lens camera."""

import pytest

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from helpers import assert_vec_close

ORIGIN = Vector3(0.0, 0.0, 0.0)
UP = Vector3(0.0, 1.0, 0.0)
FORWARD = Vector3(0.0, 0.0, -1.0)


def test_center_ray_points_at_target(rng):
    camera = Camera(ORIGIN, FORWARD, UP, 90.0, 2.0)
    ray = camera.get_ray(0.5, 0.5, rng)
    assert_vec_close(ray.origin, ORIGIN)
    assert_vec_close(ray.direction.normalize(), (0.0, 0.0, -1.0))


def test_corners_span_the_field_of_view(rng):
    camera = Camera(ORIGIN, FORWARD, UP, 90.0, 2.0, focus_dist=1.0)
    # tan(45 deg) = 1: the viewport is 2 tall and 4 wide at unit distance
    assert_vec_close(camera.get_ray(0.0, 0.0, rng).direction, (-2.0, -1.0, -1.0))
    assert_vec_close(camera.get_ray(1.0, 1.0, rng).direction, (2.0, 1.0, -1.0))


def test_lens_rays_converge_on_focus_plane(rng):
    camera = Camera(ORIGIN, FORWARD, UP, 60.0, 1.5, aperture=0.5, focus_dist=4.0)
    target = camera.lower_left_corner + camera.horizontal * 0.3 + camera.vertical * 0.7
    origins = set()
    for _ in range(20):
        ray = camera.get_ray(0.3, 0.7, rng)
        assert (ray.origin - ORIGIN).length() <= 0.25 + 1e-12
        assert_vec_close(ray.origin + ray.direction, target)
        origins.add((ray.origin.x, ray.origin.y))
    assert len(origins) > 1


@pytest.mark.parametrize("vfov, aspect", [(0.0, 1.0), (180.0, 1.0), (90.0, 0.0), (90.0, -1.0)])
def test_invalid_parameters_raise(vfov, aspect):
    with pytest.raises(ValueError):
        Camera(ORIGIN, FORWARD, UP, vfov, aspect)


def test_coincident_lookfrom_and_lookat_raise():
    with pytest.raises(ValueError, match="distinct"):
        Camera(FORWARD, FORWARD, UP, 90.0, 1.0)


def test_vup_parallel_to_view_direction_raises():
    with pytest.raises(ValueError, match="parallel"):
        Camera(ORIGIN, Vector3(0.0, -3.0, 0.0), UP, 90.0, 1.0)
