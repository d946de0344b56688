"""Rays of the form p0 + dr * t."""

from __future__ import annotations

from dataclasses import dataclass

from .vec3 import Vec3


@dataclass(frozen=True)
class Ray:
    """A ray starting at ``p0`` with direction ``dr``."""

    p0: Vec3
    dr: Vec3

    def at(self, t: float) -> Vec3:
        """Point of the ray at parameter ``t``."""
        return self.p0 + self.dr * t