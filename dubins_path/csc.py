"""
Circle-Straight-Circle Paths
============================

RSR, LSL, RSL and LSR routes from the canonical start (origin, heading 0,
facing +y) to a goal configuration.

Usage:
    >>> from dubins_path import Point, rsr
    >>> route = rsr(0.5, Point(0.0, 10.0), 0.0)
    >>> round(route.tangent.length, 6)
    10.0
"""

from __future__ import annotations

import numpy as np
from beartype.typing import Union

from .errors import CirclesTooClose
from .geometry import (
    Angle,
    Point,
    Real,
    Vector,
    as_angle,
    check_radius,
    heading_of,
    left_center,
    right_center,
)
from .route import CirclePath, PathType, RouteCSC, StraightPath, shortest_of

__all__ = ["rsr", "lsl", "rsl", "lsr", "shortest_csc", "START", "START_HEADING"]

START = Point(0.0, 0.0)
START_HEADING = Angle.zero()

# ==============================================================================
# Circle Utilities
# ==============================================================================


def turn_center(point: Point, heading: Angle, radius: float, turn: str) -> Point:
    """Center of the turning circle for ``turn`` ('R' or 'L') at a configuration."""
    if turn == "R":
        return right_center(point, heading, radius)
    return left_center(point, heading, radius)


def point_on_circle(center: Point, heading: Angle, radius: float, turn: str) -> Point:
    """
    Where the vehicle sits on a turning circle while facing ``heading``.

    The center lies to the right of the vehicle on a right circle, so the
    vehicle is at the left-circle offset from the center, and vice versa.
    """
    if turn == "R":
        return left_center(center, heading, radius)
    return right_center(center, heading, radius)


def arc_sweep(turn: str, heading_in: Angle, heading_out: Angle) -> Angle:
    """
    Non-negative sweep turning from ``heading_in`` to ``heading_out``.

    Right turns increase the heading, left turns decrease it.
    """
    if turn == "R":
        return heading_out - heading_in
    return heading_in - heading_out


# ==============================================================================
# Tangent Computations
# ==============================================================================


def outer_tangent(c0: Point, c1: Point):
    """
    Tangent between equal circles turning the same way.

    Runs parallel to the center line, so heading and length are those of
    the center-to-center vector.
    """
    v = c1 - c0
    return heading_of(v), v.length


def inner_tangent(c0: Point, c1: Point, radius: float, first_turn: str):
    """
    Tangent crossing between circles turning opposite ways.

    Returns (heading, length), or CirclesTooClose when the circles overlap.
    """
    v = c1 - c0
    d = v.length
    if d < 2 * radius:
        return CirclesTooClose(d, 2 * radius)

    length = float(np.sqrt(max(d**2 - (2 * radius) ** 2, 0.0)))
    offset = float(np.arctan2(2 * radius, length))

    # the center line leans toward the end circle's side of the tangent
    center_line = heading_of(v).radians
    if first_turn == "R":
        return Angle(center_line + offset), length
    return Angle(center_line - offset), length


# ==============================================================================
# Path Type Computations
# ==============================================================================


def _csc(radius: Real, goal_point: Point, goal_heading, path_type: int) -> Union[RouteCSC, CirclesTooClose]:
    radius = check_radius(radius)
    goal_heading = as_angle(goal_heading)
    first, _, last = PathType.turns(path_type)

    c0 = turn_center(START, START_HEADING, radius, first)
    c1 = turn_center(goal_point, goal_heading, radius, last)

    if first == last:
        heading, length = outer_tangent(c0, c1)
    else:
        tangent = inner_tangent(c0, c1, radius, first)
        if isinstance(tangent, CirclesTooClose):
            return tangent
        heading, length = tangent

    return RouteCSC(
        start=CirclePath(c0, radius, arc_sweep(first, START_HEADING, heading)),
        tangent=StraightPath(
            origin=point_on_circle(c0, heading, radius, first),
            vector=Vector.from_heading_and_length(heading, length),
        ),
        end=CirclePath(c1, radius, arc_sweep(last, heading, goal_heading)),
        path_type=path_type,
    )


def rsr(radius: Real, goal_point: Point, goal_heading: Union[Angle, Real]) -> RouteCSC:
    """Right-Straight-Right path. Always constructible."""
    return _csc(radius, goal_point, goal_heading, PathType.RSR)


def lsl(radius: Real, goal_point: Point, goal_heading: Union[Angle, Real]) -> RouteCSC:
    """Left-Straight-Left path. Always constructible."""
    return _csc(radius, goal_point, goal_heading, PathType.LSL)


def rsl(radius: Real, goal_point: Point, goal_heading: Union[Angle, Real]) -> Union[RouteCSC, CirclesTooClose]:
    """
    Right-Straight-Left path.

    Returns CirclesTooClose when the start right circle and the goal left
    circle are closer than two radii.
    """
    return _csc(radius, goal_point, goal_heading, PathType.RSL)


def lsr(radius: Real, goal_point: Point, goal_heading: Union[Angle, Real]) -> Union[RouteCSC, CirclesTooClose]:
    """
    Left-Straight-Right path.

    Returns CirclesTooClose when the start left circle and the goal right
    circle are closer than two radii.
    """
    return _csc(radius, goal_point, goal_heading, PathType.LSR)


def shortest_csc(radius: Real, goal_point: Point, goal_heading: Union[Angle, Real]) -> RouteCSC:
    """Shortest of RSR, LSL, RSL and LSR; ties keep that order."""
    return shortest_of(
        builder(radius, goal_point, goal_heading) for builder in (rsr, lsl, rsl, lsr)
    )
