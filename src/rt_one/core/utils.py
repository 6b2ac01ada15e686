# core/utils.py
import math

import numpy as np

from rt_one.core.vector import Direction, Vector3


def random_in_unit_sphere(rng: np.random.Generator) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        x, y, z = rng.uniform(-1.0, 1.0, 3)
        p = Vector3(x, y, z)
        if p.length_squared() < 1.0:
            return p


def random_unit_vector(rng: np.random.Generator) -> Direction:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        # Points this close to the center lose precision when normalized.
        if p.length_squared() > 1e-160:
            return Direction(p.x, p.y, p.z)


def sample_unit_square(rng: np.random.Generator) -> tuple:
    """
    Returns an offset in [-0.5, 0.5) on both axes, used for pixel jitter.
    """
    u, v = rng.random(2)
    return u - 0.5, v - 0.5


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, eta: float):
    """
    Refracts the unit vector uv through a surface with unit normal n.

    eta is the ratio n1/n2 of the refractive index being left over the one
    being entered. Returns None under total internal reflection, when the
    perpendicular term would need the square root of a negative number.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    k = 1.0 - (1.0 - cos_theta * cos_theta) * eta * eta
    if k < 0.0:
        return None
    t_parallel = (uv + n * cos_theta) * eta
    t_perpendicular = -n * math.sqrt(k)
    return t_parallel + t_perpendicular
