"""Vectors, colours and rays."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

MAX_DISTANCE = 3.4e38


@dataclass(frozen=True)
class Vec3:
    """A point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> Vec3:
        return self.scale(factor)

    __rmul__ = __mul__

    def dot(self, other: Vec3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return self
        return Vec3(self.x / length, self.y / length, self.z / length)

    def scale(self, factor: float) -> Vec3:
        """Vector multiplied by a scalar."""
        return Vec3(self.x * factor, self.y * factor, self.z * factor)


@dataclass(frozen=True)
class Rgb:
    """An 8-bit per channel colour."""

    r: int = 0
    g: int = 0
    b: int = 0

    def to_int(self) -> int:
        """Pack the colour as 0xRRGGBB."""
        return (self.r << 16) | (self.g << 8) | self.b


@dataclass(frozen=True)
class FloatRgb:
    """A colour with floating point channels, used for light accumulation."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0


@dataclass
class Ray:
    """A ray, with the distance and colour of the nearest hit so far."""

    origin: Vec3
    direction: Vec3
    dist: float = MAX_DISTANCE
    color: Rgb = field(default_factory=Rgb)