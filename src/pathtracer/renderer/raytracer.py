# renderer/raytracer.py
import logging
import random
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import numpy as np
from tqdm import tqdm

from pathtracer.camera.camera import Camera
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.config import RenderConfig
from pathtracer.renderer.image import to_rgb8
from pathtracer.renderer.integrator import ray_color

logger = logging.getLogger(__name__)

def pixel_rng(seed_seq: np.random.SeedSequence, i: int, j: int) -> random.Random:
    """
    Independent generator for pixel (i, j), derived from the render seed and
    the pixel coordinates only, so it does not depend on scheduling.
    """
    child = np.random.SeedSequence(seed_seq.entropy, spawn_key=(j, i))
    return random.Random(int.from_bytes(child.generate_state(4).tobytes(), "little"))

class Renderer:
    """
    Drives `samples_per_pixel` camera rays per pixel through the integrator.

    Both strategies return the accumulated (summed, not yet averaged) radiance
    as a float64 array of shape (height, width, 3) with row 0 at the top.
    """
    def __init__(self, config: RenderConfig, camera: Camera, world: Hittable,
                 show_progress: bool = False):
        self.config = config
        self.camera = camera
        self.world = world
        self.show_progress = show_progress
        self.width = config.image_width
        self.height = config.image_height

    def sample_pixel(self, i: int, j: int, rng: random.Random) -> Vector3:
        """Sum of the radiance of all samples for column i, scanline j (j = 0 at the bottom)."""
        pix = Vector3(0.0, 0.0, 0.0)
        for _ in range(self.config.samples_per_pixel):
            s = (i + rng.random()) / (self.width - 1)
            t = (j + rng.random()) / (self.height - 1)
            ray = self.camera.get_ray(s, t, rng)
            pix = pix + ray_color(ray, self.world, self.config.max_depth, rng)
        return pix

    def render_sequential(self, rng: random.Random) -> np.ndarray:
        """Single thread, one generator reused for the whole image."""
        accumulated = np.zeros((self.height, self.width, 3), dtype=np.float64)
        for row in tqdm(range(self.height), desc="Scanlines", disable=not self.show_progress):
            j = self.height - 1 - row
            for i in range(self.width):
                accumulated[row, i] = tuple(self.sample_pixel(i, j, rng))
        return accumulated

    def _render_row(self, row: int, seed_seq: np.random.SeedSequence) -> np.ndarray:
        j = self.height - 1 - row
        out = np.zeros((self.width, 3), dtype=np.float64)
        for i in range(self.width):
            out[i] = tuple(self.sample_pixel(i, j, pixel_rng(seed_seq, i, j)))
        return out

    def render_parallel(self, seed_seq: np.random.SeedSequence, workers: int) -> np.ndarray:
        """
        Rows are distributed over a thread pool. Every pixel owns a private
        generator and every row is written by exactly one task, so the result
        is the same for any worker count or completion order.
        """
        accumulated = np.zeros((self.height, self.width, 3), dtype=np.float64)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [(row, executor.submit(self._render_row, row, seed_seq))
                       for row in range(self.height)]
            for row, future in tqdm(futures, desc="Scanlines", disable=not self.show_progress):
                accumulated[row] = future.result()
        return accumulated

    def render(self, seed: Optional[int] = None) -> np.ndarray:
        """Render with the configured strategy and return the accumulated buffer."""
        if seed is None:
            seed = self.config.seed
        seed_seq = np.random.SeedSequence(seed)
        logger.info("Rendering %dx%d, %d spp, depth %d, %s (seed %d)",
                    self.width, self.height, self.config.samples_per_pixel,
                    self.config.max_depth,
                    f"{self.config.workers} workers" if self.config.parallel else "sequential",
                    seed_seq.entropy)
        start = time.perf_counter()
        if self.config.parallel:
            accumulated = self.render_parallel(seed_seq, self.config.workers)
        else:
            accumulated = self.render_sequential(random.Random(seed_seq.entropy))
        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return accumulated

    def render_image(self, seed: Optional[int] = None) -> np.ndarray:
        """Render and map to an 8-bit RGB array."""
        return to_rgb8(self.render(seed), self.config.samples_per_pixel)
