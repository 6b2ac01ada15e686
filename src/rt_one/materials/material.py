# materials/material.py
from enum import IntEnum
from typing import NamedTuple, Optional

import numpy as np

from rt_one.core.ray import Ray
from rt_one.core.vector import Vector3
from rt_one.geometry.hittable import HitRecord


class MaterialKind(IntEnum):
    """
    The closed set of material variants the renderer knows about.
    """
    LAMBERTIAN = 0
    METAL = 1
    DIELECTRIC = 2


class Scattering(NamedTuple):
    """
    A material's response to a hit: the outgoing ray and its color attenuation.
    """
    ray: Ray
    attenuation: Vector3


def check_color(color: Vector3, name: str = "color") -> Vector3:
    """
    Validates a linear RGB color at scene-build time.
    """
    if not isinstance(color, Vector3):
        raise TypeError(f"{name} must be a Vector3, got {type(color).__name__}")
    if not color.is_finite() or min(color.x, color.y, color.z) < 0:
        raise ValueError(f"{name} must have finite, non-negative channels, got {color!r}")
    return color


class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are immutable once built, so they can be shared freely
    between primitives.
    """
    kind: MaterialKind

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Optional[Scattering]:
        """
        Computes the scattered ray and attenuation.
        Returns a Scattering, or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def describe(self) -> dict:
        raise NotImplementedError("describe() must be implemented by subclasses.")

    def __setattr__(self, name, value):
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def _freeze(self):
        object.__setattr__(self, "_frozen", True)

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.describe().items() if k != "kind")
        return f"{type(self).__name__}({params})"
