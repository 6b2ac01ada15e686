# materials/presets.py
"""
Named colors and materials shared by the built-in scenes.
"""
from rt_one.core.vector import Vector3
from rt_one.materials.dielectric import Dielectric
from rt_one.materials.lambertian import Lambertian
from rt_one.materials.material import Material
from rt_one.materials.metal import Metal

# Linear albedos
GRAY = Vector3(0.5, 0.5, 0.5)
RED = Vector3(0.9, 0.2, 0.2)
BLUE = Vector3(0.1, 0.2, 0.5)
YELLOW = Vector3(0.8, 0.8, 0.0)
BRONZE = Vector3(0.8, 0.6, 0.2)
STEEL = Vector3(0.8, 0.8, 0.8)

# Refractive indices relative to air
GLASS_INDEX = 1.5
WATER_INDEX = 1.33
DIAMOND_INDEX = 2.42


def matte(color: Vector3) -> Lambertian:
    return Lambertian(color)


def glass() -> Dielectric:
    return Dielectric(GLASS_INDEX)


def air_bubble() -> Dielectric:
    # An air pocket inside glass: the index relative to the glass around it.
    return Dielectric(1.0 / GLASS_INDEX)


def mirror() -> Metal:
    return Metal(STEEL, fuzz=0.0)


def brushed(color: Vector3 = STEEL) -> Metal:
    return Metal(color, fuzz=0.3)


PRESETS = {
    "gray": lambda: matte(GRAY),
    "red": lambda: matte(RED),
    "blue": lambda: matte(BLUE),
    "yellow": lambda: matte(YELLOW),
    "glass": glass,
    "water": lambda: Dielectric(WATER_INDEX),
    "diamond": lambda: Dielectric(DIAMOND_INDEX),
    "air-bubble": air_bubble,
    "mirror": mirror,
    "brushed-steel": brushed,
    "rough-bronze": lambda: Metal(BRONZE, fuzz=1.0),
}


def preset(name: str) -> Material:
    """
    Builds a new material from its preset name.
    """
    if name not in PRESETS:
        raise ValueError(f"Unknown material preset {name!r}, expected one of {sorted(PRESETS)}")
    return PRESETS[name]()
