# scenes.py
"""
Built-in scenes. Each builder returns a fresh World.
"""
from rt_one.core.vector import Vector3
from rt_one.geometry.world import World
from rt_one.materials.presets import preset

GROUND = Vector3(0, -100.5, -1)


def single_sphere() -> World:
    """A gray diffuse sphere in front of the camera."""
    world = World()
    world.add_sphere(Vector3(0, 0, -1), 0.5, preset("gray"))
    return world


def small_sphere() -> World:
    """A small sphere up and to the right of the view axis."""
    world = World()
    world.add_sphere(Vector3(1.1, 0.1, -2.0), 0.3, preset("gray"))
    return world


def ground_and_sphere() -> World:
    """The gray sphere resting on a huge sphere standing in for the ground."""
    world = World()
    gray = world.add_material(preset("gray"))
    world.add_sphere(Vector3(0, 0, -1), 0.5, gray)
    world.add_sphere(GROUND, 100, gray)
    return world


def three_spheres() -> World:
    """Glass on the left, diffuse in the middle, metal on the right."""
    world = World()
    world.add_sphere(GROUND, 100, preset("yellow"))
    world.add_sphere(Vector3(0, 0, -1.2), 0.5, preset("blue"))
    world.add_sphere(Vector3(-1, 0, -1), 0.5, preset("glass"))
    world.add_sphere(Vector3(1, 0, -1), 0.5, preset("rough-bronze"))
    return world


def hollow_glass() -> World:
    """three_spheres with an air bubble inside the glass sphere."""
    world = three_spheres()
    world.add_sphere(Vector3(-1, 0, -1), 0.4, preset("air-bubble"))
    return world


def metals() -> World:
    """Diffuse center flanked by a mirror and a brushed metal sphere."""
    world = World()
    world.add_sphere(GROUND, 100, preset("yellow"))
    world.add_sphere(Vector3(0, 0, -1.2), 0.5, preset("blue"))
    world.add_sphere(Vector3(-1, 0, -1), 0.5, preset("mirror"))
    world.add_sphere(Vector3(1, 0, -1), 0.5, preset("brushed-steel"))
    return world


SCENES = {
    "single-sphere": single_sphere,
    "small-sphere": small_sphere,
    "ground": ground_and_sphere,
    "three-spheres": three_spheres,
    "hollow-glass": hollow_glass,
    "metals": metals,
}


def get_scene(name: str) -> World:
    if name not in SCENES:
        raise ValueError(f"Unknown scene {name!r}, expected one of {sorted(SCENES)}")
    return SCENES[name]()
