import numpy as np
from beartype import beartype

from dubins_path import Angle, CirclePath, Point, StraightPath, end_pose

EPS = 1e-9


@beartype
def point_close(p1: Point, p2: Point, eps: float = EPS) -> bool:
    """Check if two points are within eps of each other."""
    close = p1.approx_eq(p2, eps)
    if not close:
        print(p1, p2)
    return close


@beartype
def angle_close(a1: Angle, a2: Angle, eps: float = EPS) -> bool:
    """Check if two angles agree modulo 2pi."""
    close = a1.approx_eq(a2, eps)
    if not close:
        print(a1, a2)
    return close


@beartype
def circle_close(c1: CirclePath, c2: CirclePath, eps: float = EPS) -> bool:
    """Check center, radius and sweep of two arcs."""
    close = c1.approx_eq(c2, eps)
    if not close:
        print(c1, c2)
    return close


@beartype
def straight_close(s1: StraightPath, s2: StraightPath, eps: float = EPS) -> bool:
    close = s1.approx_eq(s2, eps)
    if not close:
        print(s1, s2)
    return close


def reaches_goal(path, goal_point, goal_heading, eps=1e-6):
    """Check that driving the whole path ends at the goal configuration."""
    point, heading = end_pose(path)
    return point_close(point, goal_point, eps) and angle_close(heading, Angle(float(goal_heading)), eps)


def random_goals(n=20, seed=42, spread=10.0):
    """Random goal configurations (point, heading) around the origin."""
    np.random.seed(seed)
    goals = []
    for _ in range(n):
        x, y = (np.random.rand(2) * 2 - 1) * spread
        psi = np.random.rand() * 2 * np.pi - np.pi
        goals.append((Point(float(x), float(y)), float(psi)))
    return goals
