"""
Circle-Circle-Circle Paths
==========================

RLR and LRL routes. The middle circle turns opposite to the two outer
circles and touches both, which is only possible while the outer centers are
at most four radii apart.
"""

from __future__ import annotations

import numpy as np
from beartype.typing import Union

from .csc import START, START_HEADING, arc_sweep, turn_center
from .errors import CirclesTooFarApart
from .geometry import Angle, Point, Real, Vector, as_angle, check_radius, heading_of, midpoint
from .route import CirclePath, PathType, RouteCCC, shortest_of

__all__ = ["rlr", "lrl", "shortest_ccc", "middle_center", "heading_on_circle"]


def heading_on_circle(center: Point, point: Point, turn: str) -> Angle:
    """Vehicle heading at ``point`` while driving around ``center``."""
    bearing = heading_of(point - center).radians
    if turn == "R":
        return Angle(bearing + np.pi / 2)
    return Angle(bearing - np.pi / 2)


def middle_center(c0: Point, c1: Point, radius: float, outer_turn: str):
    """
    Center of the circle tangent to both outer circles.

    It sits two radii from each outer center, on the side that makes the
    middle sweep at least pi. Returns CirclesTooFarApart when no such circle
    exists.
    """
    v = c1 - c0
    d = v.length
    if d > 4 * radius:
        return CirclesTooFarApart(d, 4 * radius)

    offset = float(np.arccos(min(d / (4 * radius), 1.0)))
    center_line = heading_of(v).radians
    if outer_turn == "R":
        heading = Angle(center_line + offset)
    else:
        heading = Angle(center_line - offset)
    return c0 + Vector.from_heading_and_length(heading, 2 * radius)


def _ccc(radius: Real, goal_point: Point, goal_heading, path_type: int) -> Union[RouteCCC, CirclesTooFarApart]:
    radius = check_radius(radius)
    goal_heading = as_angle(goal_heading)
    outer, inner, _ = PathType.turns(path_type)

    c0 = turn_center(START, START_HEADING, radius, outer)
    c2 = turn_center(goal_point, goal_heading, radius, outer)
    c1 = middle_center(c0, c2, radius, outer)
    if isinstance(c1, CirclesTooFarApart):
        return c1

    # contact points between tangent circles of equal radius are midpoints
    enter_middle = heading_on_circle(c0, midpoint(c0, c1), outer)
    leave_middle = heading_on_circle(c2, midpoint(c1, c2), outer)

    return RouteCCC(
        start=CirclePath(c0, radius, arc_sweep(outer, START_HEADING, enter_middle)),
        middle=CirclePath(c1, radius, arc_sweep(inner, enter_middle, leave_middle)),
        end=CirclePath(c2, radius, arc_sweep(outer, leave_middle, goal_heading)),
        path_type=path_type,
    )


def rlr(radius: Real, goal_point: Point, goal_heading: Union[Angle, Real]) -> Union[RouteCCC, CirclesTooFarApart]:
    """Right-Left-Right path, or CirclesTooFarApart."""
    return _ccc(radius, goal_point, goal_heading, PathType.RLR)


def lrl(radius: Real, goal_point: Point, goal_heading: Union[Angle, Real]) -> Union[RouteCCC, CirclesTooFarApart]:
    """Left-Right-Left path, or CirclesTooFarApart."""
    return _ccc(radius, goal_point, goal_heading, PathType.LRL)


def shortest_ccc(
    radius: Real, goal_point: Point, goal_heading: Union[Angle, Real]
) -> Union[RouteCCC, CirclesTooFarApart]:
    """Shorter of RLR and LRL; the RLR error when neither is feasible."""
    results = [rlr(radius, goal_point, goal_heading), lrl(radius, goal_point, goal_heading)]
    best = shortest_of(results)
    if best is None:
        return results[0]
    return best
