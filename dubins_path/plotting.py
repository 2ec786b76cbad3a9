"""
Plotting Utilities
==================

Optional matplotlib rendering of a Dubins path.
"""

import warnings

import numpy as np

from .csc import START, START_HEADING
from .geometry import Angle, Point
from .route import RouteCSC
from .sampling import end_pose, sample

__all__ = ["plot_path"]


def _path_data(path, n_points):
    x, y, psi = sample(path, n_points)
    return {
        "type": path.name,
        "length": float(path.length),
        "segments": [float(s) for s in path.segment_lengths],
        "x": x,
        "y": y,
        "psi": psi,
    }


def _arrow(ax, point: Point, heading: Angle, R, color):
    ax.arrow(
        point.x,
        point.y,
        0.3 * R * np.sin(heading.radians),
        0.3 * R * np.cos(heading.radians),
        color=color,
        width=0.02 * R,
        head_width=0.15 * R,
        alpha=0.7,
    )


def plot_path(path, ax=None, n_points=200):
    """
    Plot a Dubins path.

    Args:
        path: RouteCSC or RouteCCC
        ax: Matplotlib axis (creates new if None)
        n_points: Number of points to evaluate

    Returns:
        ax: Matplotlib axis (or None if matplotlib not available)
        path_data: Dict with path information
    """
    path_data = _path_data(path, n_points)

    try:
        import matplotlib.pyplot as plt
    except ImportError:
        warnings.warn("matplotlib not available, plotting skipped")
        return None, path_data

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 10))

    R = path.start.radius

    # Draw headings
    goal, goal_heading = end_pose(path)
    _arrow(ax, START, START_HEADING, R, "green")
    _arrow(ax, goal, goal_heading, R, "red")

    # Draw circles
    circles = [path.start, path.end] if isinstance(path, RouteCSC) else [path.start, path.middle, path.end]
    for circle in circles:
        patch = plt.Circle(
            (circle.center.x, circle.center.y), R, fill=False, color="gray", alpha=0.6, linestyle="--"
        )
        ax.add_patch(patch)

    # Plot path
    ax.plot(path_data["x"], path_data["y"], "b", linewidth=2, alpha=0.8)
    if isinstance(path, RouteCSC):
        tp0, tp1 = path.tangent.origin, path.tangent.end
        ax.plot(tp0.x, tp0.y, "ko", markersize=4)
        ax.plot(tp1.x, tp1.y, "ko", markersize=4)

    ax.axis("equal")
    ax.grid(True, alpha=0.3)

    return ax, path_data
