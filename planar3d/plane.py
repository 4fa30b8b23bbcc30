"""Planes in three dimensions and their intersections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from planar3d.vector import (
    DEFAULT_EPSILON,
    DEFAULT_MAX_ULPS,
    Ray3,
    Vector3,
    Vector4,
    ieee_div,
    ulps_eq_scalar,
)


def _relative_eq(a: float, b: float, epsilon: float, max_relative: float) -> bool:
    if a == b:
        return True
    if abs(a) == float("inf") or abs(b) == float("inf"):
        return False
    diff = abs(a - b)
    return diff <= epsilon or diff <= max(abs(a), abs(b)) * max_relative


@dataclass(frozen=True)
class Plane:
    """A plane satisfying A*x + B*y + C*z - D = 0; n is (A, B, C), d is D."""

    n: Vector3
    d: float

    @classmethod
    def from_abcd(cls, a, b, c, d) -> Plane:
        return cls(Vector3(a, b, c), d)

    @classmethod
    def from_vector4(cls, v: Vector4) -> Plane:
        return cls(Vector3(v.x, v.y, v.z), v.w)

    @classmethod
    def from_vector4_alt(cls, v: Vector4) -> Plane:
        """From a four-vector in the A*x + B*y + C*z + D = 0 form."""
        return cls(Vector3(v.x, v.y, v.z), -v.w)

    @classmethod
    def from_points(cls, a: Vector3, b: Vector3, c: Vector3) -> Optional[Plane]:
        """Plane through three points, or None when they are collinear."""
        n = (b - a).cross(c - a)
        if n.ulps_eq(Vector3.zero()):
            return None
        n = n.normalize()
        return cls(n, -a.dot(n))

    @classmethod
    def from_point_normal(cls, p: Vector3, n: Vector3) -> Plane:
        return cls(n, p.dot(n))

    def normalize(self) -> Optional[Plane]:
        """Plane scaled to a unit normal, or None for a zero normal."""
        if self.n.ulps_eq(Vector3.zero()):
            return None
        denom = 1.0 / self.n.magnitude()
        return Plane(self.n * denom, self.d * denom)

    def _pairs(self, other: Plane):
        return zip((*self.n, self.d), (*other.n, other.d))

    def abs_diff_eq(self, other: Plane, epsilon=DEFAULT_EPSILON) -> bool:
        return all(a == b or abs(a - b) <= epsilon for a, b in self._pairs(other))

    def relative_eq(self, other: Plane, epsilon=DEFAULT_EPSILON, max_relative=DEFAULT_EPSILON) -> bool:
        return all(_relative_eq(a, b, epsilon, max_relative) for a, b in self._pairs(other))

    def ulps_eq(self, other: Plane, epsilon=DEFAULT_EPSILON, max_ulps=DEFAULT_MAX_ULPS) -> bool:
        return all(ulps_eq_scalar(a, b, epsilon, max_ulps) for a, b in self._pairs(other))

    def __repr__(self) -> str:
        return f"{self.n.x!r}x + {self.n.y!r}y + {self.n.z!r}z - {self.d!r} = 0"

    def _denominator(self, other) -> float:
        if isinstance(other, Ray3):
            return ieee_div(-(self.d + other.origin.dot(self.n)), other.direction.dot(self.n))
        if isinstance(other, Plane):
            direction = self.n.cross(other.n)
            return direction.dot(direction)
        if isinstance(other, (tuple, list)) and len(other) == 2 and all(
            isinstance(p, Plane) for p in other
        ):
            return abs(self.n.dot(other[0].n.cross(other[1].n)))
        raise TypeError(f"cannot intersect a plane with {type(other).__name__}")

    def intersection(self, other: Union[Ray3, Plane, tuple]) -> Optional[Union[Vector3, Ray3]]:
        """Point for a ray, line as a ray for a plane, point for a pair of planes; None if apart."""
        denom = self._denominator(other)
        if isinstance(other, Ray3):
            return None if denom < 0.0 else other.origin + other.direction * denom
        if ulps_eq_scalar(denom, 0.0):
            return None
        if isinstance(other, Plane):
            direction = self.n.cross(other.n)
            return Ray3((other.n * self.d - self.n * other.d).cross(direction) / denom, direction)
        p2, p3 = other
        u = p2.n.cross(p3.n)
        return (u * self.d + self.n.cross(p2.n * p3.d - p3.n * p2.d)) / self.n.dot(u)

    def intersects(self, other: Union[Ray3, Plane, tuple]) -> bool:
        denom = self._denominator(other)
        if isinstance(other, Ray3):
            return denom >= 0.0
        return not ulps_eq_scalar(denom, 0.0)