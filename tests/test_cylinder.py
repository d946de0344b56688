import math

import pytest

from raycaster.material import Material
from raycaster.ray import Ray
from raycaster.shapes.cylinder import Cylinder
from raycaster.vec3 import Vec3


def make_cylinder(has_base=True, has_top=True):
    return Cylinder(Vec3.ZERO, Vec3.Y, 4.0, 1.0, has_base, has_top, Material.BLUE)


def axis_distance(p):
    return math.hypot(p.x, p.z)


def close(a, b):
    return all(x == pytest.approx(y, abs=1e-9) for x, y in zip(a, b))


def test_side_hit_lies_on_surface():
    ray = Ray(Vec3(0.0, 2.0, -5.0), Vec3.Z)
    hit = make_cylinder().intersects(ray)
    assert hit is not None
    assert hit.t > 0.0
    assert close(hit.p, ray.at(hit.t))
    assert axis_distance(hit.p) == pytest.approx(1.0)
    assert hit.t == pytest.approx(4.0)


def test_side_normal_is_unit_and_perpendicular_to_axis():
    hit = make_cylinder().intersects(Ray(Vec3(0.0, 2.0, -5.0), Vec3.Z))
    assert hit.normal.length() == pytest.approx(1.0)
    assert hit.normal.dot(Vec3.Y) == pytest.approx(0.0, abs=1e-12)
    assert hit.normal.dot(hit.p) == pytest.approx(1.0)


def test_hit_carries_material_and_object():
    cylinder = make_cylinder()
    hit = cylinder.intersects(Ray(Vec3(0.0, 2.0, -5.0), Vec3.Z))
    assert hit.material == Material.BLUE
    assert hit.object is cylinder


def test_top_cap_hit_from_above():
    ray = Ray(Vec3(0.0, 10.0, 0.0), -Vec3.Y)
    hit = make_cylinder().intersects(ray)
    assert hit is not None
    assert hit.normal == Vec3.Y
    assert hit.p.y == pytest.approx(4.0)
    assert close(hit.p, ray.at(hit.t))


def test_base_hit_when_top_missing():
    ray = Ray(Vec3(0.0, 10.0, 0.0), -Vec3.Y)
    hit = make_cylinder(has_top=False).intersects(ray)
    assert hit is not None
    assert hit.normal == -Vec3.Y
    assert hit.p.y == pytest.approx(0.0, abs=1e-12)


def test_open_cylinder_along_axis_is_missed():
    ray = Ray(Vec3(0.0, 10.0, 0.0), -Vec3.Y)
    assert make_cylinder(has_base=False, has_top=False).intersects(ray) is None


def test_cap_hit_is_closer_than_side_hit():
    ray = Ray(Vec3(0.0, 6.0, 0.0), Vec3(0.3, -1.0, 0.0).normalize())
    capped = make_cylinder().intersects(ray)
    open_top = make_cylinder(has_top=False).intersects(ray)
    assert capped is not None and open_top is not None
    assert capped.t < open_top.t
    assert capped.normal == Vec3.Y
    assert axis_distance(open_top.p) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "ray",
    [
        Ray(Vec3(5.0, 2.0, -5.0), Vec3.Z),
        Ray(Vec3(0.0, 2.0, -5.0), -Vec3.Z),
        Ray(Vec3(0.0, 6.0, -5.0), Vec3.Z),
        Ray(Vec3(0.0, -1.0, -5.0), Vec3.Z),
    ],
)
def test_misses(ray):
    assert make_cylinder().intersects(ray) is None


def test_ray_from_inside_exits_through_side():
    ray = Ray(Vec3(0.0, 2.0, 0.0), Vec3.X)
    hit = make_cylinder().intersects(ray)
    assert hit is not None
    assert hit.t > 0.0
    assert axis_distance(hit.p) == pytest.approx(1.0)
    assert hit.normal.x == pytest.approx(1.0)


def test_tilted_axis_surface_point_distance():
    axis = Vec3(1.0, 1.0, 0.0).normalize()
    cylinder = Cylinder(Vec3.ZERO, axis, 6.0, 0.5, True, True, Material.RED)
    ray = Ray(Vec3(2.0, 2.0, -5.0), Vec3.Z)
    hit = cylinder.intersects(ray)
    assert hit is not None
    radial = hit.p.reject_from_normalized(axis)
    assert radial.length() == pytest.approx(0.5)
    assert 0.0 <= hit.p.dot(axis) <= 6.0