"""Finite cylinders with optional end caps."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..intersection import Intersection, Shape, closest
from ..material import Material
from ..ray import Ray
from ..vec3 import Vec3


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf or NaN instead of raising on zero."""
    if denominator != 0.0:
        return numerator / denominator
    if math.isnan(numerator) or numerator == 0.0:
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass
class Cylinder(Shape):
    """Cylinder given by its base centre, unit axis, height and radius."""

    cb: Vec3
    dc: Vec3
    height: float
    radius: float
    has_base: bool
    has_top: bool
    material: Material

    def intersects(self, ray: Ray) -> Intersection | None:
        """Nearest hit among the side surface, the base and the top, or None."""
        base = self._cap_intersects(ray, self.cb, -self.dc) if self.has_base else None
        top = (
            self._cap_intersects(ray, self.cb + self.dc * self.height, self.dc)
            if self.has_top
            else None
        )
        return closest([self._surface_intersects(ray), base, top])

    def _surface_intersects(self, ray: Ray) -> Intersection | None:
        w = ray.p0 - self.cb
        mdr = ray.dr.reject_from_normalized(self.dc)
        mw = w.reject_from_normalized(self.dc)

        a = mdr.length_squared()
        b = 2.0 * mdr.dot(mw)
        c = mw.length_squared() - self.radius * self.radius

        delta = b * b - 4.0 * a * c
        if delta < 0.0:
            return None

        root = math.sqrt(delta)
        roots = (_divide(-b - root, 2.0 * a), _divide(-b + root, 2.0 * a))
        positive = [t for t in roots if t > 0.0]
        if not positive:
            return None

        t = min(positive)
        p = ray.at(t)
        height = (p - self.cb).dot(self.dc)
        if height < 0.0 or height > self.height:
            return None
        normal = (p - self.cb).reject_from_normalized(self.dc).normalize()
        return Intersection(t, p, normal, self.material, self)

    def _cap_intersects(self, ray: Ray, centre: Vec3, normal: Vec3) -> Intersection | None:
        bottom = ray.dr.dot(normal)
        if abs(bottom) < 1e-8:
            return None
        t = -(ray.p0 - centre).dot(normal) / bottom
        p = ray.at(t)
        if t < 0.0 or (p - centre).length_squared() > self.radius * self.radius:
            return None
        return Intersection(t, p, normal, self.material, self)