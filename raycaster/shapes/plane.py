"""Infinite planes."""

from __future__ import annotations

from dataclasses import dataclass

from ..intersection import Intersection, Shape
from ..material import Material
from ..ray import Ray
from ..vec3 import Vec3


@dataclass
class Plane(Shape):
    """Plane through point ``pc`` with normal ``normal``."""

    pc: Vec3
    normal: Vec3
    material: Material

    def intersects(self, ray: Ray) -> Intersection | None:
        """Hit with non-negative ``t``, or None when parallel or behind."""
        bottom = ray.dr.dot(self.normal)
        if abs(bottom) < 1e-8:
            return None
        t = -(ray.p0 - self.pc).dot(self.normal) / bottom
        if t < 0.0:
            return None
        return Intersection(t, ray.at(t), self.normal, self.material, self)