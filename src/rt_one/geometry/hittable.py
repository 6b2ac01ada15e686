# geometry/hittable.py
from typing import Optional

from rt_one.core.interval import Interval
from rt_one.core.ray import Ray
from rt_one.core.vector import Direction, Vector3


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("point", "normal", "front_face", "distance", "material")

    def __init__(self, point: Vector3, normal: Direction, front_face: bool,
                 distance: float, material: int = 0):
        self.point = point            # Intersection point
        self.normal = normal          # Unit normal, always against the ray
        self.front_face = front_face  # True if the ray arrived from outside
        self.distance = distance      # Ray parameter at intersection
        self.material = material      # Handle into the world's material arena

    @classmethod
    def from_outward_normal(cls, ray: Ray, point: Vector3, distance: float,
                            outward_normal: Direction, material: int = 0) -> "HitRecord":
        """
        Ensures that the normal always points against the ray.
        """
        front_face = ray.direction.dot(outward_normal) < 0
        normal = outward_normal if front_face else -outward_normal
        return cls(point, normal, front_face, distance, material)

    def __repr__(self) -> str:
        return (f"HitRecord(point={self.point!r}, normal={self.normal!r}, "
                f"front_face={self.front_face}, distance={self.distance}, "
                f"material={self.material})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_range: Interval) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
