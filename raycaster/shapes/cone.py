"""Finite cones with an optional base cap."""

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
class Cone(Shape):
    """Cone given by its base centre, unit axis, height and base radius."""

    cb: Vec3
    dc: Vec3
    height: float
    radius: float
    has_base: bool
    material: Material

    def intersects(self, ray: Ray) -> Intersection | None:
        """Nearest hit among the conical surface and the base, or None."""
        base = self._base_intersects(ray) if self.has_base else None
        return closest([self._surface_intersects(ray), base])

    def _surface_intersects(self, ray: Ray) -> Intersection | None:
        w = ray.p0 - self.cb
        mdr = ray.dr.reject_from_normalized(self.dc)
        mw = w.reject_from_normalized(self.dc)
        qdr = ray.dr.project_onto_normalized(self.dc)
        qw = w.project_onto_normalized(self.dc)
        hdc = self.dc * self.height

        h2 = self.height * self.height
        r2 = self.radius * self.radius

        a = h2 * mdr.length_squared() - r2 * qdr.length_squared()
        b = 2.0 * (h2 * mdr.dot(mw) + r2 * qdr.dot(hdc - qw))
        c = h2 * mw.length_squared() - r2 * (qw - hdc).length_squared()

        delta = b * b - 4.0 * a * c
        if delta < 0.0:
            return None

        root = math.sqrt(delta)
        roots = (_divide(-b - root, 2.0 * a), _divide(-b + root, 2.0 * a))
        # Both roots are checked: the upper nappe of the double cone yields
        # hits that must be discarded before picking the nearest one.
        vertex = self.cb + self.dc * self.height
        hits = []
        for t in roots:
            if t < 0.0:
                continue
            p = ray.at(t)
            height = (p - self.cb).dot(self.dc)
            if height < 0.0 or height > self.height:
                continue
            pv = (p - vertex).normalize()
            normal = self.dc.reject_from_normalized(pv).normalize()
            hits.append(Intersection(t, p, normal, self.material, self))
        return closest(hits)

    def _base_intersects(self, ray: Ray) -> Intersection | None:
        normal = -self.dc
        bottom = ray.dr.dot(normal)
        if abs(bottom) < 1e-8:
            return None
        t = -(ray.p0 - self.cb).dot(normal) / bottom
        p = ray.at(t)
        if t < 0.0 or (p - self.cb).length_squared() > self.radius * self.radius:
            return None
        return Intersection(t, p, normal, self.material, self)