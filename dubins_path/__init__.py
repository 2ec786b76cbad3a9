"""
dubins_path - Shortest paths for a forward-only vehicle with a fixed turn radius

Every path starts at the origin facing +y (heading 0) and reaches a goal
position and heading with three segments, each a circle arc of the turning
radius or a straight line. Headings are measured clockwise.

Available path types:
- CSC: RSR, LSL, RSL, LSR
- CCC: RLR, LRL
"""

from beartype.claw import beartype_package

beartype_package(__name__)

__version__ = "0.1.0"

from .errors import CirclesTooClose, CirclesTooFarApart, DubinsError
from .geometry import Angle, Point, Vector, distance, midpoint, normalize_positive, normalize_signed, rotate
from .route import CirclePath, Path, PathType, RouteCCC, RouteCSC, StraightPath
from .csc import lsl, lsr, rsl, rsr, shortest_csc
from .ccc import lrl, rlr, shortest_ccc
from .shortest import candidates, shortest
from .sampling import end_pose, pose_at, sample
from .symbolic import derive_dubins
from .plotting import plot_path

__all__ = [
    "__version__",
    "Point",
    "Angle",
    "Vector",
    "rotate",
    "distance",
    "midpoint",
    "normalize_positive",
    "normalize_signed",
    "CirclePath",
    "StraightPath",
    "RouteCSC",
    "RouteCCC",
    "Path",
    "PathType",
    "DubinsError",
    "CirclesTooClose",
    "CirclesTooFarApart",
    "rsr",
    "lsl",
    "rsl",
    "lsr",
    "shortest_csc",
    "rlr",
    "lrl",
    "shortest_ccc",
    "shortest",
    "candidates",
    "pose_at",
    "end_pose",
    "sample",
    "derive_dubins",
    "plot_path",
]
