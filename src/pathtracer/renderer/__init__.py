from pathtracer.renderer.config import RenderConfig, QUALITY_LEVELS
from pathtracer.renderer.integrator import ray_color, background
from pathtracer.renderer.image import to_rgb8, save_image
from pathtracer.renderer.raytracer import Renderer

__all__ = ["RenderConfig", "QUALITY_LEVELS", "ray_color", "background",
           "to_rgb8", "save_image", "Renderer"]
