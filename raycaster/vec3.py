"""Immutable three-component vectors of floats."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Union

_Number = Union[int, float]


def _fmin(a: float, b: float) -> float:
    """Minimum of two floats that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a < b else b


@dataclass(frozen=True)
class Vec3:
    """A 3D vector with double precision components."""

    x: float
    y: float
    z: float

    ZERO: ClassVar[Vec3]
    ONE: ClassVar[Vec3]
    X: ClassVar[Vec3]
    Y: ClassVar[Vec3]
    Z: ClassVar[Vec3]

    @staticmethod
    def splat(value: float) -> Vec3:
        """Vector with every component set to ``value``."""
        return Vec3(value, value, value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Vec3 | _Number) -> Vec3:
        if isinstance(other, Vec3):
            return self.mul(other)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: _Number) -> Vec3:
        return self.__mul__(other)

    def __truediv__(self, scalar: _Number) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: Vec3) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.dot(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vec3:
        """Unit vector in the same direction; all NaN for a zero vector."""
        length = self.length()
        if length == 0.0:
            return Vec3.splat(math.nan)
        return self / length

    def mul(self, other: Vec3) -> Vec3:
        """Component-wise product."""
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def min(self, other: Vec3) -> Vec3:
        """Component-wise minimum; a NaN component yields the other value."""
        return Vec3(_fmin(self.x, other.x), _fmin(self.y, other.y), _fmin(self.z, other.z))

    def project_onto_normalized(self, other: Vec3) -> Vec3:
        """Projection of this vector onto the unit vector ``other``."""
        return other * self.dot(other)

    def reject_from_normalized(self, other: Vec3) -> Vec3:
        """Component of this vector perpendicular to the unit vector ``other``."""
        return self - self.project_onto_normalized(other)


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)
Vec3.X = Vec3(1.0, 0.0, 0.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)
Vec3.Z = Vec3(0.0, 0.0, 1.0)