# materials/metal.py
from typing import Optional

import numpy as np

from rt_one.core.ray import Ray
from rt_one.core.utils import random_unit_vector, reflect
from rt_one.core.vector import Vector3
from rt_one.geometry.hittable import HitRecord
from rt_one.materials.material import Material, MaterialKind, Scattering, check_color


class Metal(Material):
    """
    Metal material with reflective properties.

    fuzz perturbs the mirror direction and is clamped to [0, 1].
    """
    kind = MaterialKind.METAL

    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = check_color(albedo, "albedo")
        self.fuzz = min(max(float(fuzz), 0.0), 1.0)
        self._freeze()

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Optional[Scattering]:
        reflected = reflect(ray_in.direction, rec.normal).normalize()
        if self.fuzz > 0:
            reflected = reflected + random_unit_vector(rng) * self.fuzz

        # Fuzz can push the ray below the surface; those rays are absorbed.
        if reflected.dot(rec.normal) > 0:
            return Scattering(Ray(rec.point, reflected), self.albedo)
        return None

    def describe(self) -> dict:
        return {"kind": self.kind.name.lower(), "albedo": self.albedo.to_tuple(),
                "fuzz": self.fuzz}
