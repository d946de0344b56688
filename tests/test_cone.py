import math

import pytest

from raycaster.material import Material
from raycaster.ray import Ray
from raycaster.shapes.cone import Cone
from raycaster.vec3 import Vec3

HEIGHT = 4.0
RADIUS = 2.0
VERTEX = Vec3(0.0, HEIGHT, 0.0)


def make_cone(has_base=True):
    return Cone(Vec3.ZERO, Vec3.Y, HEIGHT, RADIUS, has_base, Material.RED)


def axis_distance(p):
    return math.hypot(p.x, p.z)


def radius_at(height):
    return RADIUS * (HEIGHT - height) / HEIGHT


def close(a, b):
    return all(x == pytest.approx(y, abs=1e-9) for x, y in zip(a, b))


def test_side_hit_lies_on_surface():
    ray = Ray(Vec3(0.0, 1.0, -5.0), Vec3.Z)
    hit = make_cone().intersects(ray)
    assert hit is not None
    assert hit.t > 0.0
    assert close(hit.p, ray.at(hit.t))
    assert axis_distance(hit.p) == pytest.approx(radius_at(hit.p.y))
    assert hit.t == pytest.approx(3.5)


def test_side_normal_is_unit_and_perpendicular_to_slant():
    hit = make_cone().intersects(Ray(Vec3(0.0, 1.0, -5.0), Vec3.Z))
    assert hit.normal.length() == pytest.approx(1.0)
    assert hit.normal.dot(hit.p - VERTEX) == pytest.approx(0.0, abs=1e-12)
    assert hit.normal.y > 0.0
    assert hit.normal.z < 0.0


def test_hit_carries_material_and_object():
    cone = make_cone()
    hit = cone.intersects(Ray(Vec3(0.0, 1.0, -5.0), Vec3.Z))
    assert hit.material == Material.RED
    assert hit.object is cone


def test_base_hit_from_below():
    ray = Ray(Vec3(0.0, -5.0, 0.5), Vec3.Y)
    hit = make_cone().intersects(ray)
    assert hit is not None
    assert hit.normal == -Vec3.Y
    assert hit.p.y == pytest.approx(0.0, abs=1e-12)
    assert close(hit.p, ray.at(hit.t))


def test_without_base_the_surface_is_hit_further_away():
    ray = Ray(Vec3(0.0, -5.0, 0.5), Vec3.Y)
    with_base = make_cone().intersects(ray)
    without_base = make_cone(has_base=False).intersects(ray)
    assert with_base is not None and without_base is not None
    assert with_base.t < without_base.t
    assert axis_distance(without_base.p) == pytest.approx(radius_at(without_base.p.y))


def test_upper_nappe_is_ignored():
    ray = Ray(Vec3(0.0, 5.0, -5.0), Vec3.Z)
    assert make_cone().intersects(ray) is None


@pytest.mark.parametrize(
    "ray",
    [
        Ray(Vec3(5.0, 1.0, -5.0), Vec3.Z),
        Ray(Vec3(0.0, 1.0, -5.0), -Vec3.Z),
        Ray(Vec3(0.0, -1.0, -5.0), Vec3.Z),
        Ray(Vec3(3.0, -5.0, 0.0), Vec3.Y),
    ],
)
def test_misses(ray):
    assert make_cone().intersects(ray) is None


def test_ray_from_inside_exits_through_side():
    ray = Ray(Vec3(0.0, 2.0, 0.0), Vec3.X)
    hit = make_cone().intersects(ray)
    assert hit is not None
    assert hit.t > 0.0
    assert axis_distance(hit.p) == pytest.approx(radius_at(2.0))
    assert hit.normal.x > 0.0


def test_flipped_axis_cone():
    cone = Cone(Vec3.ZERO, -Vec3.Y, HEIGHT, RADIUS, True, Material.GREEN)
    ray = Ray(Vec3(0.0, -1.0, -5.0), Vec3.Z)
    hit = cone.intersects(ray)
    assert hit is not None
    assert axis_distance(hit.p) == pytest.approx(radius_at(-hit.p.y))
    assert hit.normal.y < 0.0
    assert hit.normal.length() == pytest.approx(1.0)