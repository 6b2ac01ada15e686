# core/interval.py
import math


class Interval:
    """
    A half-open parametric range [min, max) used to bound hit queries.

    Every primitive tests candidate distances with contains(), so a hit
    exactly at min counts and a hit exactly at max does not.
    """
    __slots__ = ("min", "max")

    def __init__(self, t_min: float = -math.inf, t_max: float = math.inf):
        self.min = t_min
        self.max = t_max

    def contains(self, t: float) -> bool:
        return self.min <= t < self.max

    def with_max(self, t_max: float) -> "Interval":
        """
        Returns a copy with the upper bound narrowed to t_max.
        """
        return Interval(self.min, t_max)

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"
