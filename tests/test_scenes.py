"""Tests for the built-in scenes."""

import pytest

from rt_one.core.ray import Ray
from rt_one.core.vector import Vector3
from rt_one.materials.dielectric import Dielectric
from rt_one.materials.lambertian import Lambertian
from rt_one.materials.metal import Metal
from rt_one.renderer.raytracer import DEFAULT_RANGE
from rt_one.scenes import SCENES, get_scene, hollow_glass, three_spheres


class TestScenes:
    """Tests for scene construction."""

    @pytest.mark.parametrize("name", sorted(SCENES))
    def test_every_scene_builds(self, name):
        world = get_scene(name)
        assert len(world) >= 1
        for entry in world.describe():
            assert entry["type"] == "Sphere"

    def test_fresh_world_each_time(self):
        assert get_scene("three-spheres") is not get_scene("three-spheres")

    def test_unknown_scene(self):
        with pytest.raises(ValueError):
            get_scene("cornell-box")

    def test_three_spheres_materials(self):
        world = three_spheres()
        kinds = [type(world.material(obj.material)) for obj in world]
        assert kinds == [Lambertian, Lambertian, Dielectric, Metal]

    def test_ground_shares_material_with_sphere(self):
        world = get_scene("ground")
        assert len(world) == 2
        assert len(world.materials) == 1

    def test_hollow_glass_bubble(self):
        world = hollow_glass()
        bubble = world.material(list(world)[-1].material)
        assert isinstance(bubble, Dielectric)
        assert bubble.refractive_index == pytest.approx(1 / 1.5)

    def test_camera_sees_the_center_sphere(self):
        world = three_spheres()
        rec = world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), DEFAULT_RANGE)
        assert rec.distance == pytest.approx(0.7)
        assert isinstance(world.material(rec.material), Lambertian)
