"""Phong lighting materials."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .vec3 import Vec3


@dataclass(frozen=True)
class Material:
    """Phong material: ambient, diffuse and specular coefficients and shininess."""

    k_amb: Vec3
    k_dif: Vec3
    k_esp: Vec3
    e: float

    WHITE: ClassVar[Material]
    RED: ClassVar[Material]
    GREEN: ClassVar[Material]
    BLUE: ClassVar[Material]


def _uniform(colour: Vec3) -> Material:
    return Material(colour, colour, colour, 15.0)


Material.WHITE = _uniform(Vec3.splat(0.8))
Material.RED = _uniform(Vec3(0.8, 0.3, 0.3))
Material.GREEN = _uniform(Vec3(0.3, 0.8, 0.3))
Material.BLUE = _uniform(Vec3(0.3, 0.3, 0.8))