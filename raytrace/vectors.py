"""Small immutable vector types used by the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

from .utils import random01, random_range


@dataclass(frozen=True)
class Vec2:
    """A 2D vector, also used for texture coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Vec3:
    """A 3D vector, also used for RGB colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

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

    def __mul__(self, other):
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        inv = 1 / scalar
        return Vec3(self.x * inv, self.y * inv, self.z * inv)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalized(self) -> Vec3:
        """Return the unit vector; raises ZeroDivisionError for the zero vector."""
        inv = 1 / self.length()
        return Vec3(self.x * inv, self.y * inv, self.z * inv)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Vec3) -> Vec3:
        """Reflect this vector about ``normal``."""
        return self - normal * (2 * self.dot(normal))

    def clamp(self, low: Vec3, high: Vec3) -> Vec3:
        """Clamp each component between the matching components of low and high."""

        def _clamp(value: float, lo: float, hi: float) -> float:
            if value < lo:
                return lo
            if value > hi:
                return hi
            return value

        return Vec3(
            _clamp(self.x, low.x, high.x),
            _clamp(self.y, low.y, high.y),
            _clamp(self.z, low.z, high.z),
        )

    def lerp(self, other: Vec3, t: float) -> Vec3:
        """Linear interpolation from this vector (t=0) to ``other`` (t=1)."""
        return self * (1 - t) + other * t

    def __str__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"


@dataclass(frozen=True)
class Vec4:
    """A 4D vector, used for homogeneous coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @classmethod
    def from_vec3(cls, v: Vec3, w: float) -> Vec4:
        return cls(v.x, v.y, v.z, w)

    def transform(self, matrix: Sequence[float]) -> Vec4:
        """Multiply by a row-major 4x4 matrix given as 16 numbers."""
        if len(matrix) != 16:
            raise ValueError("a 4x4 matrix needs 16 elements")
        rows = (matrix[0:4], matrix[4:8], matrix[8:12], matrix[12:16])
        x, y, z, w = (
            sum(a * b for a, b in zip(self, row)) for row in rows
        )
        return Vec4(x, y, z, w)

    def xyz(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def __str__(self) -> str:
        return f"({self.x:f}, {self.y:f}, {self.z:f}, {self.w:f})"


UV = Vec2
RGB = Vec3
RGBA = Vec4


def random_vec301() -> Vec3:
    """A vector whose components are each random in [0, 1]."""
    return Vec3(random01(), random01(), random01())


def random_vec3_range(low: float, high: float) -> Vec3:
    return Vec3(random_range(low, high), random_range(low, high), random_range(low, high))


def random_unit_vector() -> Vec3:
    """A random unit vector, found by rejection sampling."""
    while True:
        p = random_vec3_range(-1, 1)
        lensq = p.length() ** 2
        if 1e-160 < lensq <= 1:
            return p.normalized()


def random_on_hemisphere(normal: Vec3) -> Vec3:
    """A random unit vector on the hemisphere around ``normal``."""
    on_unit_sphere = random_unit_vector()
    if on_unit_sphere.dot(normal) > 0.0:
        return on_unit_sphere
    return on_unit_sphere * -1.0