# camera/camera.py
import math
from typing import Optional

import numpy as np

from rt_one.core.ray import Ray
from rt_one.core.utils import sample_unit_square
from rt_one.core.vector import Vector3


class Camera:
    """
    A pinhole camera that turns pixel coordinates into rays.

    Pixel (0, 0) is the upper-left corner of the image; rows grow downwards.
    """
    def __init__(self, image_width: int, aspect_ratio: float = 16.0 / 9.0,
                 position: Vector3 = Vector3(0, 0, 0), yaw: float = 0.0,
                 pitch: float = 0.0, fov: float = math.radians(90),
                 focal_length: float = 1.0):
        if image_width < 1:
            raise ValueError(f"image_width must be at least 1, got {image_width}")
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if not 0 < fov < math.pi:
            raise ValueError(f"fov must be in (0, pi) radians, got {fov}")
        if not -math.pi / 2 < pitch < math.pi / 2:
            raise ValueError(f"pitch must be in (-pi/2, pi/2) radians, got {pitch}")

        self.image_width = int(image_width)
        self.image_height = max(1, int(self.image_width / aspect_ratio))
        # Recalculate since the height was rounded to a whole pixel count.
        self.aspect_ratio = self.image_width / self.image_height

        self.position = position
        self.yaw = yaw
        self.pitch = pitch
        self.fov = fov
        self.focal_length = focal_length
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and pixel grid."""
        global_up = Vector3(0, 1, 0)

        # Compute forward vector
        self.forward = Vector3(
            math.sin(self.yaw) * math.cos(self.pitch),
            math.sin(self.pitch),
            -math.cos(self.yaw) * math.cos(self.pitch)
        ).normalize()

        # Compute right and up vectors
        self.right = self.forward.cross(global_up).normalize()
        self.up = self.right.cross(self.forward).normalize()

        # Compute viewport dimensions based on fov
        self.viewport_height = 2.0 * math.tan(self.fov / 2) * self.focal_length
        self.viewport_width = self.aspect_ratio * self.viewport_height

        # Viewport spans left to right and top to bottom.
        self.horizontal = self.right * self.viewport_width
        self.vertical = self.up * -self.viewport_height

        self.du = self.horizontal / self.image_width
        self.dv = self.vertical / self.image_height

        upper_left = (self.position +
                      self.forward * self.focal_length -
                      self.horizontal * 0.5 -
                      self.vertical * 0.5)
        # Pixel samples sit in the middle of each grid cell
        self.pixel00 = upper_left + (self.du + self.dv) * 0.5

    def get_ray(self, row: int, col: int,
                rng: Optional[np.random.Generator] = None) -> Ray:
        """
        Generates a ray through pixel (row, col). With an rng the sample point
        is jittered uniformly within the pixel; without one it is the center.
        """
        dx = dy = 0.0
        if rng is not None:
            dx, dy = sample_unit_square(rng)
        pixel = (self.pixel00 +
                 self.du * (col + dx) +
                 self.dv * (row + dy))
        return Ray(self.position, pixel - self.position)

    def __repr__(self) -> str:
        return (f"Camera({self.image_width}x{self.image_height}, "
                f"position={self.position!r}, fov={math.degrees(self.fov):.1f}deg)")
