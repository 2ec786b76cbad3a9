"""
Path Evaluation
===============

Pose along a route, propagated segment by segment from the canonical start.

Usage:
    >>> from dubins_path import Point, shortest, sample
    >>> path = shortest(1.0, Point(4.0, 4.0), 1.5)
    >>> x, y, psi = sample(path, n_points=50)
    >>> x.shape
    (50,)
"""

from __future__ import annotations

import numpy as np
from beartype.typing import Tuple

from .csc import START, START_HEADING, point_on_circle, turn_center
from .geometry import Angle, Point, Real, Vector
from .route import Path, PathType

__all__ = ["pose_at", "end_pose", "sample"]


def _advance(point: Point, heading: Angle, turn: str, distance: float, radius: float) -> Tuple[Point, Angle]:
    if turn == "S":
        return point + Vector.from_heading_and_length(heading, distance), heading

    center = turn_center(point, heading, radius, turn)
    turned = Angle(distance / radius)
    heading = heading + turned if turn == "R" else heading - turned
    return point_on_circle(center, heading, radius, turn), heading


def pose_at(path: Path, s: Real) -> Tuple[Point, Angle]:
    """
    Position and heading after driving ``s`` along the path.

    ``s`` is clamped to [0, path.length].
    """
    radius = path.start.radius
    remaining = min(max(float(s), 0.0), path.length)

    point, heading = START, START_HEADING
    for turn, seg_length in zip(PathType.turns(path.path_type), path.segment_lengths):
        step = min(remaining, seg_length)
        if step > 0:
            point, heading = _advance(point, heading, turn, step, radius)
        remaining -= step
    return point, heading


def end_pose(path: Path) -> Tuple[Point, Angle]:
    """Pose at the end of the path; equals the goal configuration."""
    return pose_at(path, path.length)


def sample(path: Path, n_points: int = 200) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Evaluate the path at evenly spaced arc lengths, endpoints included.

    Returns:
        x, y: Positions
        psi: Headings in [0, 2pi), clockwise from +y
    """
    if n_points < 2:
        raise ValueError(f"n_points must be at least 2, got {n_points}")

    s_vals = np.linspace(0, path.length, n_points)
    path_x, path_y, path_psi = [], [], []
    for s in s_vals:
        point, heading = pose_at(path, float(s))
        path_x.append(point.x)
        path_y.append(point.y)
        path_psi.append(heading.radians)

    return np.array(path_x), np.array(path_y), np.array(path_psi)
