# materials/lambertian.py
from typing import Optional

import numpy as np

from rt_one.core.ray import Ray
from rt_one.core.utils import random_unit_vector
from rt_one.core.vector import Vector3
from rt_one.geometry.hittable import HitRecord
from rt_one.materials.material import Material, MaterialKind, Scattering, check_color


class Lambertian(Material):
    """
    Lambertian diffuse material.
    """
    kind = MaterialKind.LAMBERTIAN

    def __init__(self, albedo: Vector3):
        self.albedo = check_color(albedo, "albedo")
        self._freeze()

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Optional[Scattering]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Always scatters.
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return Scattering(Ray(rec.point, scatter_direction), self.albedo)

    def describe(self) -> dict:
        return {"kind": self.kind.name.lower(), "albedo": self.albedo.to_tuple()}
