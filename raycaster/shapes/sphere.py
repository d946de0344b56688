"""Spheres."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..intersection import Intersection, Shape
from ..material import Material
from ..ray import Ray
from ..vec3 import Vec3


@dataclass
class Sphere(Shape):
    """Sphere given by its centre and radius."""

    pos: Vec3
    radius: float
    material: Material

    def intersects(self, ray: Ray) -> Intersection | None:
        """Nearest hit with positive ``t``, or None."""
        oc = ray.p0 - self.pos
        a = ray.dr.length_squared()
        b = 2.0 * ray.dr.dot(oc)
        c = oc.length_squared() - self.radius * self.radius
        delta = b * b - 4.0 * a * c
        if delta < 0.0:
            return None

        root = math.sqrt(delta)
        roots = ((-b + root) / (2.0 * a), (-b - root) / (2.0 * a))
        positive = [t for t in roots if t > 0.0]
        if not positive:
            return None

        t = min(positive)
        p = ray.at(t)
        return Intersection(t, p, (p - self.pos).normalize(), self.material, self)