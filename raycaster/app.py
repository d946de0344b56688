"""Interactive window that renders the demo scene and moves the camera."""

from __future__ import annotations

import argparse
import math
from collections.abc import Collection

from .camera import Camera, Canvas
from .lights.point import PointLight
from .material import Material
from .scene import Scene
from .shapes.cone import Cone
from .shapes.cylinder import Cylinder
from .shapes.plane import Plane
from .shapes.sphere import Sphere
from .vec3 import Vec3

_MOVE_STEP = 0.1
_ROTATION_STEP = math.radians(2.0)
_TITLE = "Hello, World"


def build_scene() -> Scene:
    """Scene with a sphere, a cylinder, a floor plane, a cone and one point light."""
    tilted_axis = (Vec3.X - Vec3.Z - Vec3.Y).normalize()
    ball = Sphere(Vec3(-2.0, 2.0, -16.0), 4.0, Material.GREEN)
    cylinder = Cylinder(
        Vec3(4.0, 4.0, -16.0), tilted_axis, 8.0, 2.0, True, True, Material.BLUE
    )
    cone = Cone(Vec3(-8.0, 4.0, -16.0), -tilted_axis, 4.0, 2.0, True, Material.RED)
    plane = Plane(Vec3(0.0, -2.0, 0.0), Vec3.Y, Material.WHITE)
    light = PointLight(Vec3(0.0, 6.0, -10.0), Vec3(1.0, 0.65, 0.7), 0.5)
    return Scene(
        objects=[ball, cylinder, plane, cone],
        lights=[light],
        ambient_light=Vec3.splat(0.2),
    )


def _default_camera() -> Camera:
    return Camera(Vec3.ZERO, 1.6, 0.9, 0.8)


def movement_vector(camera: Camera, pressed: Collection[str]) -> Vec3:
    """Sum of the movement directions of the pressed keys.

    Keys: ``w``/``s`` forward and back, ``a``/``d`` left and right,
    ``space``/``left_shift`` up and down, all in camera axes.
    """
    axes = camera.coord_system
    directions = (
        ("w", -axes.z_axis),
        ("s", axes.z_axis),
        ("a", -axes.x_axis),
        ("d", axes.x_axis),
        ("space", axes.y_axis),
        ("left_shift", -axes.y_axis),
    )
    return sum((direction for key, direction in directions if key in pressed), Vec3.ZERO)


def apply_rotations(camera: Camera, pressed: Collection[str]) -> None:
    """Rotate the camera 2 degrees for each pressed rotation key.

    Axes are taken from the camera before any of this call's rotations.
    Keys: ``left``/``right`` yaw around world Y, ``up``/``down`` pitch,
    ``q``/``e`` roll.
    """
    axes = camera.coord_system
    rotations = (
        ("left", Vec3.Y),
        ("right", -Vec3.Y),
        ("up", axes.x_axis),
        ("down", -axes.x_axis),
        ("q", axes.z_axis),
        ("e", -axes.z_axis),
    )
    for key, axis in rotations:
        if key in pressed:
            camera.rotate(axis, _ROTATION_STEP)


def _step_camera(camera: Camera, pressed: Collection[str]) -> None:
    movement = movement_vector(camera, pressed)
    if movement != Vec3.ZERO:
        camera.p0 = camera.p0 + movement.normalize() * _MOVE_STEP
    apply_rotations(camera, pressed)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the demo scene interactively.")
    parser.add_argument("--width", type=int, default=800, help="window width in pixels")
    parser.add_argument("--height", type=int, default=450, help="window height in pixels")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    return args


def main(argv: list[str] | None = None) -> int:
    """Open a window and render the scene each frame until it is closed."""
    args = _parse_args(argv)

    import pygame

    key_names = {
        pygame.K_w: "w",
        pygame.K_s: "s",
        pygame.K_a: "a",
        pygame.K_d: "d",
        pygame.K_SPACE: "space",
        pygame.K_LSHIFT: "left_shift",
        pygame.K_LEFT: "left",
        pygame.K_RIGHT: "right",
        pygame.K_UP: "up",
        pygame.K_DOWN: "down",
        pygame.K_q: "q",
        pygame.K_e: "e",
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption(_TITLE)
        font = pygame.font.Font(None, 24)
        clock = pygame.time.Clock()

        camera = _default_camera()
        scene = build_scene()
        canvas = Canvas(args.width, args.height)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break

            state = pygame.key.get_pressed()
            pressed = {name for code, name in key_names.items() if state[code]}
            _step_camera(camera, pressed)

            camera.render_scene_to(scene, canvas)
            frame = pygame.image.frombuffer(
                bytes(canvas.data), (canvas.width, canvas.height), "RGB"
            )
            screen.fill((0, 0, 0))
            screen.blit(frame, (0, 0))
            clock.tick()
            fps = font.render(str(round(clock.get_fps())), True, (255, 255, 255))
            screen.blit(fps, (10, 10))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())