"""Scenes holding objects and lights, and the light interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .intersection import Intersection, Shape, closest
from .ray import Ray
from .vec3 import Vec3


class Light(ABC):
    """A light source that contributes colour at intersection points."""

    @abstractmethod
    def color_at(self, intersection: Intersection, v: Vec3, scene: Scene) -> Vec3:
        """Colour this light gives at ``intersection``.

        ``v`` is the unit direction of the viewing ray that produced the hit.
        """


@dataclass
class Scene:
    """Objects, lights and ambient light making up what the camera sees."""

    objects: list[Shape] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    ambient_light: Vec3 = Vec3.ZERO

    def closest_intersection(self, ray: Ray) -> Intersection | None:
        """Nearest hit of ``ray`` among all objects, or None if it misses them all."""
        return closest(obj.intersects(ray) for obj in self.objects)