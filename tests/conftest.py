"""Pytest configuration for rt_one tests.

Shared fixtures: a seeded random generator, a scripted generator for
forcing specific random directions, and small worlds.
"""

import numpy as np
import pytest

from rt_one.core.vector import Vector3
from rt_one.geometry.world import World
from rt_one.materials.lambertian import Lambertian


class ScriptedRng:
    """Stands in for numpy's Generator, replaying fixed draws in order."""

    def __init__(self, draws):
        self._draws = [np.asarray(d, dtype=np.float64) for d in draws]
        self.calls = 0

    def _next(self):
        draw = self._draws[self.calls % len(self._draws)]
        self.calls += 1
        return draw

    def uniform(self, low=0.0, high=1.0, size=None):
        return self._next()

    def random(self, size=None):
        return self._next()


@pytest.fixture
def rng():
    """A seeded generator so stochastic tests are reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def scripted_rng():
    """Factory for generators that return the given draws in order."""
    return ScriptedRng


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def one_sphere_world(gray):
    """A gray diffuse sphere of radius 0.5 centered at (0, 0, -1)."""
    world = World()
    world.add_sphere(Vector3(0, 0, -1), 0.5, gray)
    return world
