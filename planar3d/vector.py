"""Vectors, rays and ulps-based float comparison."""

from __future__ import annotations

import math
import struct
import sys
from dataclasses import dataclass
from typing import Iterator

DEFAULT_EPSILON = sys.float_info.epsilon
DEFAULT_MAX_ULPS = 4


def ieee_div(numerator: float, denominator: float) -> float:
    """Divide by IEEE 754 rules, giving inf or nan instead of raising."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator) or math.isnan(denominator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _bits(value: float) -> int:
    return struct.unpack("<q", struct.pack("<d", value))[0]


def ulps_eq_scalar(a, b, epsilon=DEFAULT_EPSILON, max_ulps=DEFAULT_MAX_ULPS) -> bool:
    """True when a and b are within epsilon or max_ulps units in the last place."""
    if a == b or abs(a - b) <= epsilon:
        return True
    if math.isnan(a) or math.isnan(b) or math.copysign(1.0, a) != math.copysign(1.0, b):
        return False
    return abs(_bits(a) - _bits(b)) <= max_ulps


@dataclass(frozen=True)
class Vector3:
    """An immutable three-component vector, also used for points."""

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def unit_x(cls) -> Vector3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> Vector3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> Vector3:
        return cls(0.0, 0.0, 1.0)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(*(ieee_div(c, scalar) for c in self))

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vector3:
        return self * ieee_div(1.0, self.magnitude())

    def ulps_eq(self, other, epsilon=DEFAULT_EPSILON, max_ulps=DEFAULT_MAX_ULPS) -> bool:
        return all(ulps_eq_scalar(a, b, epsilon, max_ulps) for a, b in zip(self, other))


@dataclass(frozen=True)
class Vector4:
    """An immutable four-component vector."""

    x: float
    y: float
    z: float
    w: float


@dataclass(frozen=True)
class Ray3:
    """A half-line starting at origin and running along direction."""

    origin: Vector3
    direction: Vector3