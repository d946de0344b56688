"""Point light sources."""

from __future__ import annotations

from dataclasses import dataclass

from ..intersection import Intersection
from ..ray import Ray
from ..scene import Light, Scene
from ..vec3 import Vec3

_SHADOW_EPSILON = 1e-6


@dataclass
class PointLight(Light):
    """Light emitted from a single position with a colour and an intensity."""

    pos: Vec3
    color: Vec3
    intensity: float

    def color_at(self, intersection: Intersection, v: Vec3, scene: Scene) -> Vec3:
        """Phong diffuse and specular contribution, or zero when in shadow."""
        light_direction = (self.pos - intersection.p).normalize()
        light_ray = Ray(intersection.p, light_direction)

        hits = (obj.intersects(light_ray) for obj in scene.objects)
        if any(hit is not None and abs(hit.t) > _SHADOW_EPSILON for hit in hits):
            return Vec3.ZERO

        l = light_direction
        n = intersection.normal
        mat = intersection.material
        light_intensity = self.color * self.intensity

        r = n * (2.0 * l.dot(n)) - l
        nl = n.dot(l)
        rv = r.dot(-v)

        # The positivity checks keep the far side of objects unlit.
        ieye = Vec3.ZERO
        if nl > 0.0:
            ieye = ieye + mat.k_dif.mul(light_intensity) * nl
        if rv > 0.0:
            ieye = ieye + mat.k_esp.mul(light_intensity) * (rv ** mat.e)
        return ieye