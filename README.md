# raycaster

A small ray caster that renders spheres, planes, cylinders and cones using
Phong lighting, point lights and hard shadows. Rendering runs on the CPU and
writes into an RGB canvas. An interactive viewer built on pygame shows the
result in a window.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The viewer

```
raycaster
```

This opens an 800×450 window with a demo scene: a green sphere, a blue
cylinder capped at both ends, a red cone and a white floor, all lit by one
point light. The frame rate is shown in the top-left corner. The window size
can be changed:

```
raycaster --width 400 --height 225
```

Both values must be positive. To quit, close the window or press Escape.

Controls:

| Key                | Action                   |
|--------------------|--------------------------|
| W / S              | move forward / backward  |
| A / D              | move left / right        |
| Space / Left Shift | move up / down           |
| Left / Right       | turn left / right        |
| Up / Down          | tilt up / down           |
| Q / E              | roll                     |

Movement is 0.1 units per frame along the camera's own axes. Each rotation key
turns the camera 2 degrees per frame.

## Using the library

```python
from raycaster.vec3 import Vec3
from raycaster.material import Material
from raycaster.shapes.sphere import Sphere
from raycaster.shapes.plane import Plane
from raycaster.lights.point import PointLight
from raycaster.scene import Scene
from raycaster.camera import Camera

scene = Scene(
    objects=[
        Sphere(Vec3(0.0, 0.0, -10.0), 3.0, Material.GREEN),
        Plane(Vec3(0.0, -3.0, 0.0), Vec3.Y, Material.WHITE),
    ],
    lights=[PointLight(Vec3(0.0, 6.0, -5.0), Vec3(1.0, 1.0, 1.0), 0.7)],
    ambient_light=Vec3.splat(0.2),
)

camera = Camera(Vec3.ZERO, 1.6, 0.9, 0.8)
canvas = camera.render_scene(scene, 160, 90)
print(canvas.pixel(80, 45))  # (r, g, b) of the centre pixel
```

The main pieces:

- `raycaster.vec3.Vec3`: an immutable 3D vector with arithmetic operators,
  `dot`, `length`, `normalize`, component-wise `mul` and `min`, and
  `project_onto_normalized` / `reject_from_normalized`.
- `raycaster.ray.Ray`: a ray `p0 + dr * t`, with `at(t)`.
- `raycaster.material.Material`: Phong coefficients `k_amb`, `k_dif`,
  `k_esp` and the shininess exponent `e`. Presets are `Material.WHITE`,
  `RED`, `GREEN` and `BLUE`.
- Shapes in `raycaster.shapes`: `Sphere`, `Plane`, `Cylinder` (with
  `has_base` and `has_top` caps) and `Cone` (with `has_base`). The axis
  `dc` of a cylinder or cone must be a unit vector. Each shape's
  `intersects(ray)` returns the nearest `raycaster.intersection.Intersection`
  in front of the ray origin, or `None`. Custom shapes subclass
  `raycaster.intersection.Shape`.
- `raycaster.scene.Scene`: holds objects, lights and ambient light. It has
  `closest_intersection(ray)`. Custom lights subclass `raycaster.scene.Light`
  and implement `color_at(intersection, v, scene)`.
- `raycaster.lights.point.PointLight`: a point light that gives diffuse and
  specular light, and gives nothing where another object blocks it.
- `raycaster.camera.Camera`: `render_scene(scene, x_res, y_res)` returns a
  new `Canvas`. `render_scene_to(scene, canvas)` overwrites an existing one.
  `rotate(axis, angle)` turns the camera's `CoordSystem` about an axis by an
  angle in radians. The camera looks along `-z_axis`.
- `raycaster.camera.Canvas`: packed RGB bytes in `data`, with
  `pixel(x, y)`.
- `raycaster.transforms`: `rotation_matrix_from_axis_angle(axis, angle_rad)`
  and `transform_direction(matrix, v)`.
- `raycaster.app`: `build_scene()` returns the demo scene. `main(argv=None)`
  runs the viewer.

## What it does not do

Light does not reflect or refract between objects. Apart from the shadows that
point lights cast, each ray stops at the first surface it hits. There is no
way to save a rendered image to a file. The `Canvas` bytes are the only
output.