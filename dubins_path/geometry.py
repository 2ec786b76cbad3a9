"""
Geometry Primitives
===================

Planar value types shared by the path builders.

Two angle conventions are in use:

- ``Vector.angle`` and :func:`rotate` use the usual mathematical convention,
  counter-clockwise from the +x axis.
- Headings are measured clockwise from the start heading, which faces +y.
  Heading ``h`` points along ``(sin h, cos h)``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from beartype.typing import Union

__all__ = [
    "TAU",
    "EPS",
    "Real",
    "Point",
    "Angle",
    "Vector",
    "rotate",
    "normalize_positive",
    "normalize_signed",
    "distance",
    "midpoint",
    "heading_of",
    "right_center",
    "left_center",
    "as_angle",
    "check_radius",
]

TAU = 2 * np.pi  # one full revolution
EPS = 1e-9

Real = Union[float, int, np.floating, np.integer]


def normalize_positive(angle: Real) -> float:
    """Wrap angle to [0, 2pi)."""
    a = float(np.mod(angle, TAU))
    # np.mod can round up to exactly TAU for tiny negative inputs
    if a >= TAU:
        a = 0.0
    return a


def normalize_signed(angle: Real) -> float:
    """Wrap angle to (-pi, pi]."""
    a = normalize_positive(angle)
    if a > np.pi:
        a -= TAU
    return a


@dataclass(frozen=True)
class Point:
    x: Real
    y: Real

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __add__(self, other: Vector) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Vector:
        """Displacement from ``other`` to ``self``."""
        return Vector(self.x - other.x, self.y - other.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def approx_eq(self, other: Point, eps: float = EPS) -> bool:
        return distance(self, other) < eps


@dataclass(frozen=True)
class Angle:
    """
    Angle in radians, stored in [0, 2pi).

    Any real value is accepted and wrapped on construction. The signed reading
    in (-pi, pi] is derived on demand.
    """

    radians: Real

    def __post_init__(self):
        object.__setattr__(self, "radians", normalize_positive(self.radians))

    @classmethod
    def zero(cls) -> Angle:
        return cls(0.0)

    @classmethod
    def pi(cls) -> Angle:
        return cls(np.pi)

    @classmethod
    def frac_pi_2(cls) -> Angle:
        return cls(np.pi / 2)

    @classmethod
    def from_degrees(cls, degrees: Real) -> Angle:
        return cls(float(np.deg2rad(degrees)))

    @property
    def signed(self) -> float:
        return normalize_signed(self.radians)

    @property
    def degrees(self) -> float:
        return float(np.rad2deg(self.radians))

    def __add__(self, other: Angle) -> Angle:
        return Angle(self.radians + other.radians)

    def __sub__(self, other: Angle) -> Angle:
        return Angle(self.radians - other.radians)

    def __neg__(self) -> Angle:
        return Angle(-self.radians)

    def __float__(self) -> float:
        return self.radians

    def approx_eq(self, other: Angle, eps: float = EPS) -> bool:
        """Compare through the signed difference so 0 and 2pi - eps agree."""
        return abs(normalize_signed(self.radians - other.radians)) < eps


@dataclass(frozen=True)
class Vector:
    x: Real
    y: Real

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_angle_and_length(cls, angle: Angle, length: Real) -> Vector:
        """Vector at ``angle`` counter-clockwise from +x."""
        return cls(
            float(length * np.cos(angle.radians)),
            float(length * np.sin(angle.radians)),
        )

    @classmethod
    def from_heading_and_length(cls, heading: Angle, length: Real) -> Vector:
        """Vector along ``heading`` (clockwise from +y)."""
        return cls(
            float(length * np.sin(heading.radians)),
            float(length * np.cos(heading.radians)),
        )

    @property
    def length(self) -> float:
        return float(np.hypot(self.x, self.y))

    @property
    def angle(self) -> Angle:
        return Angle(float(np.arctan2(self.y, self.x)))

    @property
    def heading(self) -> Angle:
        return heading_of(self)

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: Real) -> Vector:
        return Vector(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y])

    def approx_eq(self, other: Vector, eps: float = EPS) -> bool:
        return (self - other).length < eps


def rotate(vector: Vector, angle: Angle) -> Vector:
    """Rotate counter-clockwise by ``angle``."""
    c = np.cos(angle.radians)
    s = np.sin(angle.radians)
    return Vector(
        float(c * vector.x - s * vector.y),
        float(s * vector.x + c * vector.y),
    )


def distance(a: Point, b: Point) -> float:
    return (b - a).length


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def heading_of(vector: Vector) -> Angle:
    """Heading of a displacement, clockwise from +y."""
    return Angle(float(np.arctan2(vector.x, vector.y)))


def _right_normal(heading: Angle, radius: Real) -> Vector:
    # unit vector pointing to the right of the heading, scaled
    return Vector(
        float(radius * np.cos(heading.radians)),
        float(-radius * np.sin(heading.radians)),
    )


def right_center(point: Point, heading: Angle, radius: Real) -> Point:
    """Center of the clockwise turning circle through ``point``."""
    return point + _right_normal(heading, radius)


def left_center(point: Point, heading: Angle, radius: Real) -> Point:
    """Center of the counter-clockwise turning circle through ``point``."""
    return point + -_right_normal(heading, radius)


def as_angle(value: Union[Angle, Real]) -> Angle:
    """Accept an :class:`Angle` or plain radians."""
    if isinstance(value, Angle):
        return value
    return Angle(float(value))


def check_radius(radius: Real) -> float:
    radius = float(radius)
    if not np.isfinite(radius) or radius <= 0:
        raise ValueError(f"turning radius must be positive and finite, got {radius}")
    return radius
