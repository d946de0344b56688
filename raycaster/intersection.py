"""Ray/object intersections and the shape interface."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from .material import Material
from .ray import Ray
from .vec3 import Vec3


class Shape(ABC):
    """An object a ray can hit."""

    @abstractmethod
    def intersects(self, ray: Ray) -> Intersection | None:
        """Nearest intersection with positive ``t``, or None if the ray misses."""


@dataclass(frozen=True)
class Intersection:
    """Where and how a ray hit an object."""

    t: float
    p: Vec3
    normal: Vec3
    material: Material
    object: Shape


def _order_key(intersection: Intersection) -> tuple[bool, float]:
    return (math.isnan(intersection.t), intersection.t)


def closest(intersections: Iterable[Intersection | None]) -> Intersection | None:
    """Intersection with the smallest ``t``, skipping None; the first wins ties."""
    hits = [hit for hit in intersections if hit is not None]
    return min(hits, key=_order_key, default=None)