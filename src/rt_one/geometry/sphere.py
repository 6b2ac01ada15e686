# geometry/sphere.py
import math
from typing import Optional

from rt_one.core.interval import Interval
from rt_one.core.ray import Ray
from rt_one.core.vector import Direction, Vector3
from rt_one.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material handle.
    """
    def __init__(self, center: Vector3, radius: float, material: int = 0):
        if not (math.isfinite(radius) and radius > 0):
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        if not center.is_finite():
            raise ValueError(f"Sphere center must be finite, got {center!r}")
        self.center = center
        self.radius = float(radius)
        self.material = material

    def hit(self, ray: Ray, t_range: Interval) -> Optional[HitRecord]:
        # With a unit direction the quadratic's a term is 1. Substituting
        # b = -2h gives roots h +- sqrt(h^2 - c).
        q = self.center - ray.origin
        h = ray.direction.dot(q)
        c = q.length_squared() - self.radius * self.radius
        discriminant = h * h - c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = h - sqrt_disc
        if not t_range.contains(root):
            root = h + sqrt_disc
            if not t_range.contains(root):
                return None

        point = ray.at(root)
        outward_normal = point - self.center
        if outward_normal.near_zero(1e-300):
            # Only reachable when rounding collapses the hit onto the center.
            return None
        return HitRecord.from_outward_normal(
            ray, point, root, Direction.from_vector(outward_normal), self.material)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius}, material={self.material})"
