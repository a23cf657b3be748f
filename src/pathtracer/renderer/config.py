# renderer/config.py
from dataclasses import dataclass, replace
from typing import Optional

# Named trade-offs between speed and noise, keyed by preset name.
QUALITY_LEVELS = {
    "interactive": {"samples": 1, "bounces": 4},
    "balanced": {"samples": 16, "bounces": 10},
    "high_quality": {"samples": 100, "bounces": 50},
}

@dataclass(frozen=True)
class RenderConfig:
    """
    Image size and sampling parameters for a render.

    workers <= 1 renders sequentially on the calling thread; seed None draws
    fresh entropy from the OS.
    """
    image_width: int = 400
    image_height: int = 300
    samples_per_pixel: int = 16
    max_depth: int = 10
    workers: int = 1
    seed: Optional[int] = None

    def __post_init__(self):
        if self.image_width < 2 or self.image_height < 2:
            raise ValueError(
                f"image must be at least 2x2 pixels, got {self.image_width}x{self.image_height}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be >= 1, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.workers < 0:
            raise ValueError(f"workers must be >= 0, got {self.workers}")

    @property
    def aspect_ratio(self) -> float:
        return self.image_width / self.image_height

    @property
    def parallel(self) -> bool:
        return self.workers > 1

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderConfig":
        try:
            level = QUALITY_LEVELS[name]
        except KeyError:
            raise ValueError(
                f"unknown quality {name!r}; choose from {', '.join(QUALITY_LEVELS)}") from None
        params = {"samples_per_pixel": level["samples"], "max_depth": level["bounces"]}
        params.update(overrides)
        return cls(**params)

    def with_overrides(self, **changes) -> "RenderConfig":
        """Copy with the given non-None fields replaced."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
