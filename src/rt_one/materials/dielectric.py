# materials/dielectric.py
import math
from typing import Optional

import numpy as np

from rt_one.core.ray import Ray
from rt_one.core.utils import reflect, refract
from rt_one.core.vector import Vector3
from rt_one.geometry.hittable import HitRecord
from rt_one.materials.material import Material, MaterialKind, Scattering, check_color

WHITE = Vector3(1.0, 1.0, 1.0)


class Dielectric(Material):
    """
    Transparent material that refracts by Snell's law, without a Fresnel term.

    Rays that cannot refract (total internal reflection) are mirrored.
    """
    kind = MaterialKind.DIELECTRIC

    def __init__(self, refractive_index: float, color: Vector3 = WHITE):
        if not (math.isfinite(refractive_index) and refractive_index > 0):
            raise ValueError(f"Refractive index must be positive, got {refractive_index}")
        self.refractive_index = float(refractive_index)
        self.color = check_color(color)
        self._freeze()

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: np.random.Generator) -> Optional[Scattering]:
        # Entering from air uses 1/n, leaving the material uses n.
        eta = 1.0 / self.refractive_index if rec.front_face else self.refractive_index

        unit_direction = ray_in.direction
        direction = refract(unit_direction, rec.normal, eta)
        if direction is None or direction.near_zero():
            direction = reflect(unit_direction, rec.normal)

        return Scattering(Ray(rec.point, direction), self.color)

    def describe(self) -> dict:
        return {"kind": self.kind.name.lower(),
                "refractive_index": self.refractive_index,
                "color": self.color.to_tuple()}
