# core/ray.py
from rt_one.core.vector import Direction, Vector3


class Ray:
    """
    Represents a ray in 3D space with an origin and a unit direction.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vector3, direction: Vector3):
        self.origin = origin
        # Plain vectors are normalized here; zero vectors raise ValueError.
        self.direction = Direction.from_vector(direction)

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r})"
