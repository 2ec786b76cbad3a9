"""
Route value types produced by the path builders.
"""

from __future__ import annotations

from dataclasses import dataclass

from beartype.typing import Iterable, Optional, Tuple, Union

from .errors import DubinsError
from .geometry import Angle, Point, Vector

__all__ = ["PathType", "CirclePath", "StraightPath", "RouteCSC", "RouteCCC", "Path", "shortest_of"]


class PathType:
    """Path type enumeration, in selector evaluation order."""

    RSR = 0  # Right-Straight-Right
    LSL = 1  # Left-Straight-Left
    RSL = 2  # Right-Straight-Left
    LSR = 3  # Left-Straight-Right
    RLR = 4  # Right-Left-Right
    LRL = 5  # Left-Right-Left

    _names = {0: "RSR", 1: "LSL", 2: "RSL", 3: "LSR", 4: "RLR", 5: "LRL"}

    @staticmethod
    def name(type_id) -> str:
        return PathType._names.get(int(type_id), "UNKNOWN")

    @staticmethod
    def turns(type_id) -> str:
        """Segment letters, e.g. ``"RSL"``."""
        name = PathType.name(type_id)
        if name == "UNKNOWN":
            raise ValueError(f"unknown path type {type_id!r}")
        return name

    @staticmethod
    def all() -> Tuple[int, ...]:
        return tuple(PathType._names)


@dataclass(frozen=True)
class CirclePath:
    """Arc on a turning circle. The turn direction comes from the route type."""

    center: Point
    radius: float
    angle: Angle  # sweep

    @property
    def length(self) -> float:
        return self.angle.radians * self.radius

    def approx_eq(self, other: CirclePath, eps: float = 1e-9) -> bool:
        return (
            self.center.approx_eq(other.center, eps)
            and abs(self.radius - other.radius) < eps
            and self.angle.approx_eq(other.angle, eps)
        )


@dataclass(frozen=True)
class StraightPath:
    origin: Point
    vector: Vector

    @property
    def length(self) -> float:
        return self.vector.length

    @property
    def heading(self) -> Angle:
        return self.vector.heading

    @property
    def end(self) -> Point:
        return self.origin + self.vector

    def approx_eq(self, other: StraightPath, eps: float = 1e-9) -> bool:
        return self.origin.approx_eq(other.origin, eps) and self.vector.approx_eq(other.vector, eps)


@dataclass(frozen=True)
class RouteCSC:
    """Circle - straight - circle route (RSR, LSL, RSL, LSR)."""

    start: CirclePath
    tangent: StraightPath
    end: CirclePath
    path_type: int

    @property
    def length(self) -> float:
        return self.start.length + self.tangent.length + self.end.length

    @property
    def name(self) -> str:
        return PathType.name(self.path_type)

    @property
    def segment_lengths(self) -> Tuple[float, float, float]:
        return (self.start.length, self.tangent.length, self.end.length)


@dataclass(frozen=True)
class RouteCCC:
    """Circle - circle - circle route (RLR, LRL)."""

    start: CirclePath
    middle: CirclePath
    end: CirclePath
    path_type: int

    @property
    def length(self) -> float:
        return self.start.length + self.middle.length + self.end.length

    @property
    def name(self) -> str:
        return PathType.name(self.path_type)

    @property
    def segment_lengths(self) -> Tuple[float, float, float]:
        return (self.start.length, self.middle.length, self.end.length)


Path = Union[RouteCSC, RouteCCC]


def shortest_of(results: Iterable) -> Optional[Path]:
    """
    Minimum-length route among builder results, skipping errors.

    A later route replaces the current best only when strictly shorter, so
    ties keep the earlier candidate. Returns None when every result failed.
    """
    best = None
    for result in results:
        if isinstance(result, DubinsError):
            continue
        if best is None or result.length < best.length:
            best = result
    return best
