"""Camera and the RGB canvas it renders to."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .ray import Ray
from .scene import Scene
from .transforms import rotation_matrix_from_axis_angle, transform_direction
from .vec3 import Vec3

_MAX_CHANNEL = Vec3.splat(255.0)


def _to_byte(value: float) -> int:
    """Saturating float to unsigned byte conversion; NaN becomes 0."""
    if math.isnan(value) or value <= 0.0:
        return 0
    return int(min(value, 255.0))


@dataclass
class Canvas:
    """Image of ``width`` x ``height`` pixels stored as packed RGB bytes."""

    width: int
    height: int
    data: bytearray | None = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("canvas dimensions must not be negative")
        size = self.width * self.height * 3
        if self.data is None:
            self.data = bytearray(size)
        elif len(self.data) != size:
            raise ValueError(
                f"canvas data holds {len(self.data)} bytes, expected {size} for RGB"
            )

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        """RGB value of the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        offset = (y * self.width + x) * 3
        r, g, b = self.data[offset:offset + 3]
        return (r, g, b)


@dataclass
class CoordSystem:
    """Orthonormal axes of the camera; the camera looks along ``-z_axis``."""

    x_axis: Vec3 = Vec3.X
    y_axis: Vec3 = Vec3.Y
    z_axis: Vec3 = Vec3.Z


@dataclass
class Camera:
    """Observer at ``p0`` looking through a frame at ``frame_distance``."""

    p0: Vec3
    frame_width: float
    frame_height: float
    frame_distance: float
    coord_system: CoordSystem = field(default_factory=CoordSystem)

    def _frame_center(self) -> Vec3:
        return self.p0 - self.coord_system.z_axis * self.frame_distance

    def _frame_00(self) -> Vec3:
        axes = self.coord_system
        return (
            self._frame_center()
            - axes.x_axis * (self.frame_width / 2.0)
            + axes.y_axis * (self.frame_height / 2.0)
        )

    def render_scene(self, scene: Scene, x_res: int, y_res: int) -> Canvas:
        """Render ``scene`` to a new canvas of the given resolution."""
        canvas = Canvas(x_res, y_res)
        self.render_scene_to(scene, canvas)
        return canvas

    def render_scene_to(self, scene: Scene, canvas: Canvas) -> None:
        """Render ``scene`` into ``canvas``, overwriting every pixel."""
        res_x, res_y = canvas.width, canvas.height
        dx = self.coord_system.x_axis * (self.frame_width / res_x)
        dy = -(self.coord_system.y_axis * (self.frame_height / res_y))
        p00 = self._frame_00() + dx / 2.0 + dy / 2.0

        data = canvas.data
        offset = 0
        for py in range(res_y):
            row_start = p00 + dy * py
            for px in range(res_x):
                p_target = row_start + dx * px
                ray_dr = (p_target - self.p0).normalize()
                data[offset:offset + 3] = self._shade(scene, Ray(self.p0, ray_dr))
                offset += 3

    @staticmethod
    def _shade(scene: Scene, ray: Ray) -> bytes:
        hit = scene.closest_intersection(ray)
        if hit is None:
            return bytes(3)
        passive = scene.ambient_light.mul(hit.material.k_amb)
        active = sum((light.color_at(hit, ray.dr, scene) for light in scene.lights), Vec3.ZERO)
        scaled = ((passive + active) * 255.0).min(_MAX_CHANNEL)
        return bytes(_to_byte(channel) for channel in scaled)

    def rotate(self, axis: Vec3, angle: float) -> None:
        """Rotate the camera axes by ``angle`` radians around ``axis``."""
        matrix = rotation_matrix_from_axis_angle(axis, angle)
        axes = self.coord_system
        axes.x_axis = transform_direction(matrix, axes.x_axis)
        axes.y_axis = transform_direction(matrix, axes.y_axis)
        axes.z_axis = transform_direction(matrix, axes.z_axis)