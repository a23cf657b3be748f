# renderer/image.py
import logging
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def to_rgb8(accumulated: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Map an accumulated radiance buffer of shape (height, width, 3) to 8-bit RGB.

    The sum is averaged over the samples, gamma-corrected with exponent 1/2,
    clamped to [0, 0.999] and scaled by 256.
    """
    scaled = np.asarray(accumulated, dtype=np.float64) / samples_per_pixel
    mapped = np.sqrt(np.maximum(scaled, 0.0))
    # NaN samples would poison the cast; treat them as black
    mapped = np.nan_to_num(mapped, nan=0.0)
    output = (256 * np.clip(mapped, 0.0, 0.999)).astype(np.uint8)
    return output

def save_image(pixels: np.ndarray, path: str) -> None:
    """Write an (height, width, 3) uint8 array; the format follows the file extension."""
    Image.fromarray(pixels).save(path)
    logger.info("Saved %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
