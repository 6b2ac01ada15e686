# config.py
"""
Render settings and named quality presets.
"""
import math
from dataclasses import dataclass, replace
from typing import Optional

from rt_one.renderer.raytracer import MAX_BOUNCES, MAX_DIST, MIN_DIST

# Named presets: samples per pixel, bounce budget and a scale on image width.
QUALITY_LEVELS = {
    "interactive": {"samples": 1, "bounces": 4, "scale": 0.5},
    "balanced": {"samples": 10, "bounces": 20, "scale": 1.0},
    "high_quality": {"samples": 100, "bounces": MAX_BOUNCES, "scale": 1.0},
}


@dataclass(frozen=True)
class RenderSettings:
    image_width: int = 400
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = 10
    max_depth: int = MAX_BOUNCES
    min_dist: float = MIN_DIST
    max_dist: float = MAX_DIST
    fov_degrees: float = 90.0
    gamma: bool = True
    tone_map: str = "none"
    seed: Optional[int] = None

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        """
        Builds settings from a QUALITY_LEVELS preset. Overrides whose value
        is None are ignored, so parsed CLI options can be passed straight in.
        """
        if name not in QUALITY_LEVELS:
            raise ValueError(f"Unknown quality {name!r}, expected one of {sorted(QUALITY_LEVELS)}")
        quality = QUALITY_LEVELS[name]
        settings = cls(
            image_width=max(1, int(cls.image_width * quality["scale"])),
            samples_per_pixel=quality["samples"],
            max_depth=quality["bounces"],
        )
        return settings.with_overrides(**overrides)

    def with_overrides(self, **overrides) -> "RenderSettings":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @property
    def fov(self) -> float:
        return math.radians(self.fov_degrees)

    def validate(self) -> "RenderSettings":
        if self.image_width < 1:
            raise ValueError(f"image_width must be at least 1, got {self.image_width}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
        if not 0 <= self.min_dist < self.max_dist:
            raise ValueError(f"Invalid hit range [{self.min_dist}, {self.max_dist})")
        if not 0 < self.fov_degrees < 180:
            raise ValueError(f"fov_degrees must be in (0, 180), got {self.fov_degrees}")
        return self
