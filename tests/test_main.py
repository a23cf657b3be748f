"""End-to-end tests for the command line entry point."""

from PIL import Image

from pathtracer.main import main

TINY = ["--width", "6", "--height", "4", "--samples", "1", "--depth", "3", "--seed", "1", "--quiet"]


def test_renders_small_scene(tmp_path):
    out = tmp_path / "small.png"
    assert main(TINY + ["--output", str(out)]) == 0
    with Image.open(out) as img:
        assert img.size == (6, 4)


def test_parallel_without_bvh(tmp_path):
    out = tmp_path / "random.png"
    assert main(TINY + ["--scene", "random", "--workers", "2", "--no-bvh", "--output", str(out)]) == 0
    assert out.exists()


def test_obj_mesh_is_added(tmp_path):
    obj = tmp_path / "tri.obj"
    obj.write_text("v -1 0 -2\nv 1 0 -2\nv 0 1 -2\nf 1 2 3\n")
    out = tmp_path / "mesh.png"
    assert main(TINY + ["--obj", str(obj), "--output", str(out)]) == 0
    assert out.exists()


def test_missing_obj_fails(tmp_path):
    out = tmp_path / "never.png"
    assert main(TINY + ["--obj", str(tmp_path / "nope.obj"), "--output", str(out)]) == 1
    assert not out.exists()


def test_bad_config_fails(tmp_path):
    assert main(["--width", "1", "--quiet", "--output", str(tmp_path / "x.png")]) == 1
