from pathtracer.materials.material import Material, ScatterRecord
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.black_body import BlackBody

__all__ = ["Material", "ScatterRecord", "Lambertian", "Metal", "Dielectric", "BlackBody"]
