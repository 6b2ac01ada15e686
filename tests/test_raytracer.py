"""Tests for the recursive color function and the Renderer."""

import math

import numpy as np
import pytest

from rt_one.camera.camera import Camera
from rt_one.core.interval import Interval
from rt_one.core.ray import Ray
from rt_one.core.utils import random_unit_vector
from rt_one.core.vector import Vector3
from rt_one.geometry.world import World
from rt_one.materials.dielectric import Dielectric
from rt_one.materials.lambertian import Lambertian
from rt_one.materials.metal import Metal
from rt_one.renderer.raytracer import (
    BLACK,
    MAX_BOUNCES,
    MIN_DIST,
    SKY_BLUE,
    WHITE,
    Renderer,
    background,
    flat_color,
    normal_color,
    ray_color,
)

ORIGIN = Vector3(0, 0, 0)


def assert_color_close(actual, expected, tol=1e-9):
    for a, e in zip(actual, expected):
        assert a == pytest.approx(e, abs=tol)


class TestBackground:
    """Tests for the sky gradient."""

    def test_straight_up_is_sky_blue(self, rng):
        color = ray_color(Ray(ORIGIN, Vector3(0, 1, 0)), World(), MAX_BOUNCES, rng)
        assert_color_close(color, SKY_BLUE)

    def test_straight_down_is_white(self, rng):
        color = ray_color(Ray(ORIGIN, Vector3(0, -1, 0)), World(), MAX_BOUNCES, rng)
        assert_color_close(color, WHITE)

    def test_horizon_is_halfway(self):
        color = background(Ray(ORIGIN, Vector3(0, 0, -1)))
        assert_color_close(color, Vector3(0.75, 0.85, 1.0))

    def test_depends_only_on_direction(self):
        a = background(Ray(Vector3(5, -3, 2), Vector3(0.3, 0.4, -1)))
        b = background(Ray(Vector3(-7, 1, 9), Vector3(0.3, 0.4, -1)))
        assert a == b


class TestRayColor:
    """Tests for ray_color."""

    def test_zero_depth_is_black(self, rng):
        world = World()
        assert ray_color(Ray(ORIGIN, Vector3(0, 1, 0)), world, 0, rng) == BLACK

    def test_depth_one_diffuse_hit_is_black(self, rng, one_sphere_world):
        ray = Ray(ORIGIN, Vector3(0, 0, -1))
        assert ray_color(ray, one_sphere_world, 1, rng) == BLACK

    def test_miss_with_spheres_present_is_sky(self, rng, one_sphere_world):
        ray = Ray(ORIGIN, Vector3(0, 1, 0))
        assert_color_close(ray_color(ray, one_sphere_world, 5, rng), SKY_BLUE)

    def test_single_bounce_matches_hand_computation(self, one_sphere_world):
        seed = 7
        # The center ray hits the sphere at (0, 0, -0.5) with normal +z.
        # The bounce leaves the sphere, so it sees the sky.
        expected_rng = np.random.default_rng(seed)
        normal = Vector3(0, 0, 1)
        direction = normal + random_unit_vector(expected_rng)
        if direction.near_zero():
            direction = normal
        expected = background(Ray(Vector3(0, 0, -0.5), direction)) * 0.5

        color = ray_color(Ray(ORIGIN, Vector3(0, 0, -1)), one_sphere_world, 2,
                          np.random.default_rng(seed))

        assert_color_close(color, expected)

    def test_colors_are_bounded_by_sky(self, rng):
        world = World()
        world.add_sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.9, 0.9, 0.9)))
        world.add_sphere(Vector3(0, -100.5, -1), 100, Metal(Vector3(0.8, 0.8, 0.8), 0.3))
        for _ in range(50):
            d = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), -1)
            color = ray_color(Ray(ORIGIN, d), world, 10, rng)
            for c in color:
                assert 0.0 <= c <= 1.0
                assert math.isfinite(c)

    def test_glass_never_produces_nan(self, rng):
        world = World()
        world.add_sphere(Vector3(0, 0, -1), 0.5, Dielectric(1.5))
        world.add_sphere(Vector3(0, 0, -1), 0.4, Dielectric(1 / 1.5))
        for _ in range(100):
            d = Vector3(rng.uniform(-0.6, 0.6), rng.uniform(-0.6, 0.6), -1)
            color = ray_color(Ray(ORIGIN, d), world, MAX_BOUNCES, rng)
            assert color.is_finite()

    def test_deep_bounce_budget_inside_mirror(self, rng):
        world = World()
        world.add_sphere(Vector3(0, 0, 0), 1.0, Metal(Vector3(0.9, 0.9, 0.9), fuzz=0.0))
        # Trapped inside a perfect mirror, the path uses up its whole budget.
        ray = Ray(Vector3(0.2, 0, 0), Vector3(0.3, 0.2, -1))
        assert ray_color(ray, world, 5000, rng) == BLACK

    def test_returned_colors_are_immutable(self, rng):
        color = ray_color(Ray(ORIGIN, Vector3(0, 1, 0)), World(), 0, rng)
        with pytest.raises(AttributeError):
            color.x = 0.7
        assert ray_color(Ray(ORIGIN, Vector3(0, 1, 0)), World(), 0, rng) == Vector3(0, 0, 0)

    def test_absorbed_ray_is_black(self, scripted_rng):
        world = World()
        world.add_sphere(Vector3(0, -100, 0), 99.9, Metal(Vector3(1, 1, 1), fuzz=1.0))
        # Grazing hit, with the fuzz pointing straight into the surface.
        rng = scripted_rng([[0.0, -0.9, 0.0]])
        ray = Ray(Vector3(-1, 0.05, 0), Vector3(1, -0.1, 0))
        assert ray_color(ray, world, 5, rng) == BLACK


class TestShadingModes:
    """Tests for the normal and flat shading helpers."""

    def test_normal_color_facing_camera(self, one_sphere_world):
        color = normal_color(Ray(ORIGIN, Vector3(0, 0, -1)), one_sphere_world)
        assert_color_close(color, Vector3(0.5, 0.5, 1.0))

    def test_normal_color_miss_is_sky(self, one_sphere_world):
        color = normal_color(Ray(ORIGIN, Vector3(0, 1, 0)), one_sphere_world)
        assert_color_close(color, SKY_BLUE)

    def test_flat_color(self, one_sphere_world):
        red = Vector3(1, 0, 0)
        assert flat_color(Ray(ORIGIN, Vector3(0, 0, -1)), one_sphere_world, red) == red

    def test_custom_range_can_skip_objects(self, one_sphere_world):
        color = normal_color(Ray(ORIGIN, Vector3(0, 0, -1)), one_sphere_world,
                             Interval(MIN_DIST, 0.4))
        assert_color_close(color, background(Ray(ORIGIN, Vector3(0, 0, -1))))


class TestRenderer:
    """Tests for the image-level renderer."""

    def test_image_shape_and_dtype(self, one_sphere_world, rng):
        renderer = Renderer(Camera(16, 2.0), one_sphere_world, rng=rng, max_depth=3)
        image = renderer.render()
        assert image.shape == (8, 16, 3)
        assert image.dtype == np.float32

    def test_sky_mode_is_vertical_gradient(self):
        renderer = Renderer(Camera(8, 2.0), World(), mode="sky")
        image = renderer.render()
        # Rows get bluer towards the top; each row is uniform up to the x tilt.
        assert image[0, 4, 0] < image[-1, 4, 0]
        assert image[0, 4, 2] == pytest.approx(1.0)

    def test_normals_mode_center_pixel(self, one_sphere_world):
        renderer = Renderer(Camera(9, 1.0), one_sphere_world, mode="normals")
        image = renderer.render()
        np.testing.assert_allclose(image[4, 4], [0.5, 0.5, 1.0], atol=1e-6)

    def test_flat_mode(self, one_sphere_world):
        amber = Vector3(1.0, 0.95, 0.78)
        renderer = Renderer(Camera(9, 1.0), one_sphere_world, mode="flat", flat=amber)
        image = renderer.render()
        np.testing.assert_allclose(image[4, 4], [1.0, 0.95, 0.78], atol=1e-6)
        # Corners see past the sphere.
        assert not np.allclose(image[0, 0], [1.0, 0.95, 0.78])

    def test_same_seed_same_image(self, one_sphere_world):
        def render(seed):
            renderer = Renderer(Camera(12, 1.5), one_sphere_world, samples_per_pixel=3,
                                max_depth=5, rng=np.random.default_rng(seed))
            return renderer.render()

        np.testing.assert_array_equal(render(3), render(3))

    def test_single_sample_path_render_is_jittered(self, one_sphere_world):
        def render(seed):
            renderer = Renderer(Camera(12, 1.5), one_sphere_world, samples_per_pixel=1,
                                max_depth=3, rng=np.random.default_rng(seed))
            return renderer.render()

        assert not np.array_equal(render(1), render(2))

    def test_single_sample_preview_uses_pixel_centers(self, one_sphere_world):
        def render(seed):
            renderer = Renderer(Camera(12, 1.5), one_sphere_world, mode="normals",
                                rng=np.random.default_rng(seed))
            return renderer.render()

        np.testing.assert_array_equal(render(1), render(2))

    def test_render_resets_accumulation(self, one_sphere_world):
        renderer = Renderer(Camera(8, 2.0), one_sphere_world, mode="normals")
        first = renderer.render()
        second = renderer.render()
        np.testing.assert_array_equal(first, second)

    @pytest.mark.parametrize("kwargs", [
        {"samples_per_pixel": 0},
        {"max_depth": 0},
        {"mode": "wireframe"},
        {"min_dist": 1.0, "max_dist": 0.5},
        {"min_dist": -1.0},
    ])
    def test_invalid_arguments(self, one_sphere_world, kwargs):
        with pytest.raises(ValueError):
            Renderer(Camera(8), one_sphere_world, **kwargs)
