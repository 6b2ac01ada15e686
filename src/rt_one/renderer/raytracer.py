# renderer/raytracer.py
import logging
import time
from typing import Optional

import numpy as np

from rt_one.camera.camera import Camera
from rt_one.core.interval import Interval
from rt_one.core.ray import Ray
from rt_one.core.vector import Vector3
from rt_one.geometry.world import World

logger = logging.getLogger(__name__)

# A bounce ray starts exactly on the surface it left; ignoring hits closer
# than MIN_DIST keeps rounding error from hitting that surface again.
MIN_DIST = 1e-3
MAX_DIST = 1e7
MAX_BOUNCES = 50

BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

DEFAULT_RANGE = Interval(MIN_DIST, MAX_DIST)


def background(ray: Ray) -> Vector3:
    """
    Vertical white to sky-blue gradient seen by rays that miss everything.
    """
    a = 0.5 * (ray.direction.y + 1.0)
    return WHITE * (1.0 - a) + SKY_BLUE * a


def ray_color(ray: Ray, world: World, depth: int, rng: np.random.Generator,
              t_range: Interval = DEFAULT_RANGE) -> Vector3:
    """
    Returns the linear color seen along the ray. If the ray hits an object,
    the material scatter is followed for up to depth bounces, multiplying
    the attenuations along the path.
    """
    throughput = WHITE
    for _ in range(depth):
        rec = world.hit(ray, t_range)
        if rec is None:
            return throughput * background(ray)

        scattering = world.material(rec.material).scatter(ray, rec, rng)
        if scattering is None:
            return BLACK
        throughput = throughput * scattering.attenuation
        ray = scattering.ray

    # Bounce budget exhausted.
    return BLACK


def normal_color(ray: Ray, world: World, t_range: Interval = DEFAULT_RANGE) -> Vector3:
    """
    Maps the hit normal from [-1, 1] to [0, 1] per channel; misses show the sky.
    """
    rec = world.hit(ray, t_range)
    if rec is None:
        return background(ray)
    return (rec.normal + WHITE) * 0.5


def flat_color(ray: Ray, world: World, color: Vector3,
               t_range: Interval = DEFAULT_RANGE) -> Vector3:
    """
    A single flat color wherever anything is hit; misses show the sky.
    """
    if world.hit(ray, t_range) is None:
        return background(ray)
    return color


class Renderer:
    """
    Drives a camera over every pixel and averages samples into a linear
    float32 image of shape (height, width, 3).

    Modes:
        path    - full light transport (ray_color)
        normals - surface normal visualization
        flat    - flat_color silhouettes
        sky     - background gradient only
    """
    MODES = ("path", "normals", "flat", "sky")

    def __init__(self, camera: Camera, world: World, samples_per_pixel: int = 1,
                 max_depth: int = MAX_BOUNCES, mode: str = "path",
                 rng: Optional[np.random.Generator] = None,
                 min_dist: float = MIN_DIST, max_dist: float = MAX_DIST,
                 flat: Vector3 = WHITE):
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        if mode not in self.MODES:
            raise ValueError(f"Unknown render mode {mode!r}, expected one of {self.MODES}")
        if not 0 <= min_dist < max_dist:
            raise ValueError(f"Invalid hit range [{min_dist}, {max_dist})")

        self.camera = camera
        self.world = world
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.mode = mode
        self.rng = rng if rng is not None else np.random.default_rng()
        self.t_range = Interval(min_dist, max_dist)
        self.flat = flat

        self.width = camera.image_width
        self.height = camera.image_height
        self.accumulation_buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)

    def reset_accumulation(self):
        """Clears the accumulated samples."""
        self.accumulation_buffer.fill(0)

    def sample(self, ray: Ray) -> Vector3:
        """Evaluates one camera ray in the current mode."""
        if self.mode == "path":
            return ray_color(ray, self.world, self.max_depth, self.rng, self.t_range)
        if self.mode == "normals":
            return normal_color(ray, self.world, self.t_range)
        if self.mode == "flat":
            return flat_color(ray, self.world, self.flat, self.t_range)
        return background(ray)

    def render_pixel(self, row: int, col: int) -> Vector3:
        """
        Averages samples_per_pixel rays through the pixel, each jittered
        independently. The preview modes take a single sample through the
        pixel center so their images are deterministic.
        """
        if self.mode != "path" and self.samples_per_pixel == 1:
            return self.sample(self.camera.get_ray(row, col))

        total = BLACK
        for _ in range(self.samples_per_pixel):
            total = total + self.sample(self.camera.get_ray(row, col, self.rng))
        return total / self.samples_per_pixel

    def render(self) -> np.ndarray:
        """
        Renders the full frame and returns the linear image.
        """
        self.reset_accumulation()
        logger.info(f"Rendering {self.width}x{self.height}, {self.samples_per_pixel} spp, "
                    f"max depth {self.max_depth}, mode {self.mode}, "
                    f"{len(self.world)} objects")
        start = time.perf_counter()

        for row in range(self.height):
            logger.debug(f"Row {row + 1}/{self.height}")
            for col in range(self.width):
                color = self.render_pixel(row, col)
                self.accumulation_buffer[row, col] = (color.x, color.y, color.z)

        logger.info(f"Rendered in {time.perf_counter() - start:.2f}s")
        return self.image()

    def image(self) -> np.ndarray:
        """The current linear image as float32, shape (height, width, 3)."""
        return self.accumulation_buffer.astype(np.float32)
