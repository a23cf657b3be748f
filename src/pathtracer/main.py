# main.py
"""Render one of the built-in scenes to an image file.

Example:
    pathtracer --scene small --quality balanced --workers 4 --output small.png
"""
import argparse
import logging
import random
import sys

from pathtracer.geometry.mesh import load_obj
from pathtracer.geometry.world import HittableList
from pathtracer.materials.presets import ColorPresets, MaterialPresets
from pathtracer.renderer.config import QUALITY_LEVELS, RenderConfig
from pathtracer.renderer.image import save_image
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scene import SCENES

logger = logging.getLogger("pathtracer")

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Monte Carlo path tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="small",
                        help="built-in scene to render (default: small)")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default="balanced",
                        help="samples/bounces preset (default: balanced)")
    parser.add_argument("--width", type=int, default=400, help="image width in pixels")
    parser.add_argument("--height", type=int, default=300, help="image height in pixels")
    parser.add_argument("--samples", type=int, help="samples per pixel (overrides --quality)")
    parser.add_argument("--depth", type=int, help="maximum bounces (overrides --quality)")
    parser.add_argument("--workers", type=int, default=1,
                        help="render threads; 1 renders sequentially (default: 1)")
    parser.add_argument("--seed", type=int, help="seed for reproducible renders")
    parser.add_argument("--obj", help="OBJ mesh to add to the scene with a gray diffuse material")
    parser.add_argument("--no-bvh", action="store_true",
                        help="intersect the flat object list instead of building a BVH")
    parser.add_argument("--output", default="render.png", help="output image (default: render.png)")
    parser.add_argument("--quiet", action="store_true", help="only log warnings and errors")
    return parser.parse_args(argv)

def run(args: argparse.Namespace) -> None:
    config = RenderConfig.from_quality(
        args.quality,
        image_width=args.width,
        image_height=args.height,
        workers=args.workers,
        seed=args.seed,
    ).with_overrides(samples_per_pixel=args.samples, max_depth=args.depth)

    rng = random.Random(config.seed)
    scene = SCENES[args.scene](rng, config)
    if args.obj:
        scene.shapes.append(load_obj(args.obj, MaterialPresets.matte(ColorPresets.GRAY), rng))

    world = HittableList(scene.shapes)
    if not args.no_bvh:
        world.build_bvh(rng)

    renderer = Renderer(config, scene.camera, world, show_progress=not args.quiet)
    save_image(renderer.render_image(), args.output)

def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run(args)
        return 0
    except Exception:
        logger.exception("Render failed")
        return 1

if __name__ == "__main__":
    sys.exit(main())
