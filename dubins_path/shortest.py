"""
Shortest Path Selection
=======================

Evaluates all six Dubins candidates and keeps the shortest feasible one.
"""

from __future__ import annotations

from beartype.typing import Dict, Union

from .ccc import lrl, rlr
from .csc import lsl, lsr, rsl, rsr
from .errors import DubinsError
from .geometry import Angle, Point, Real
from .route import Path, PathType, shortest_of

__all__ = ["BUILDERS", "candidates", "shortest"]

# evaluation order doubles as the tie-break order
BUILDERS = {
    PathType.RSR: rsr,
    PathType.LSL: lsl,
    PathType.RSL: rsl,
    PathType.LSR: lsr,
    PathType.RLR: rlr,
    PathType.LRL: lrl,
}


def candidates(
    radius: Real, goal_point: Point, goal_heading: Union[Angle, Real]
) -> Dict[int, Union[Path, DubinsError]]:
    """Result of every builder, keyed by path type, in evaluation order."""
    return {
        path_type: builder(radius, goal_point, goal_heading)
        for path_type, builder in BUILDERS.items()
    }


def shortest(radius: Real, goal_point: Point, goal_heading: Union[Angle, Real]) -> Path:
    """
    Shortest Dubins path from the canonical start to the goal configuration.

    RSR and LSL are always constructible, so this never fails. CCC routes win
    only when strictly shorter than every CSC route before them.
    """
    return shortest_of(candidates(radius, goal_point, goal_heading).values())
