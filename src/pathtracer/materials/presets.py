# materials/presets.py
"""Named colors and materials used by the built-in scenes."""
from pathtracer.core.vector import Vector3
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal

class ColorPresets:
    GRAY = Vector3(0.5, 0.5, 0.5)
    NAVY = Vector3(0.1, 0.2, 0.5)
    BROWN = Vector3(0.4, 0.2, 0.1)
    BRONZE = Vector3(0.7, 0.6, 0.5)

class MaterialPresets:
    """Factories for the materials the scenes share."""

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        return Lambertian(color)

    @staticmethod
    def mirror(color: Vector3 = ColorPresets.BRONZE) -> Metal:
        return Metal(color, fuzz=0.0)

    @staticmethod
    def glass() -> Dielectric:
        # Crown glass
        return Dielectric(1.5)
