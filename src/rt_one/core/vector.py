# core/vector.py
import math


class Vector3:
    """
    A simple 3D vector supporting arithmetic, dot and cross products,
    and normalization. Also used for linear RGB colors.

    Vectors are values: every operation returns a new instance, and
    assigning to a component raises AttributeError.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        # Scalar scale, or component-wise product for colors.
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        l = self.length()
        if l == 0:
            return Vector3(0, 0, 0)
        return self / l

    def near_zero(self, eps: float = 1e-8) -> bool:
        """
        True if every component is within eps of zero.
        """
        return abs(self.x) < eps and abs(self.y) < eps and abs(self.z) < eps

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def to_tuple(self) -> tuple:
        return (self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


class Direction(Vector3):
    """
    A Vector3 that always has unit length.

    Constructing one normalizes the input; a zero-length or non-finite
    input raises ValueError. Arithmetic other than negation returns a
    plain Vector3, since sums and scales are not unit length in general.
    """
    __slots__ = ()

    def __init__(self, x: float, y: float, z: float):
        l = math.sqrt(x * x + y * y + z * z)
        if l == 0 or not math.isfinite(l):
            raise ValueError(f"Cannot build a direction from ({x}, {y}, {z})")
        super().__init__(x / l, y / l, z / l)

    @classmethod
    def from_vector(cls, v: Vector3) -> "Direction":
        if isinstance(v, Direction):
            return v
        return cls(v.x, v.y, v.z)

    @classmethod
    def _unchecked(cls, x: float, y: float, z: float) -> "Direction":
        # Only for components already known to be unit length.
        d = object.__new__(cls)
        Vector3.__init__(d, x, y, z)
        return d

    def __neg__(self) -> "Direction":
        return Direction._unchecked(-self.x, -self.y, -self.z)

    def __repr__(self) -> str:
        return f"Direction({self.x}, {self.y}, {self.z})"
