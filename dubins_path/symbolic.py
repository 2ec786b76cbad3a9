"""
Symbolic Dubins Planner
=======================

Branch-free CasADi version of the shortest path selection, for use inside
optimization problems. Uses the same frame as the numeric builders: start at
the origin with heading 0 (facing +y), headings clockwise.

Usage:
    >>> import numpy as np
    >>> from dubins_path.symbolic import derive_dubins
    >>> plan = derive_dubins()
    >>> cost, type, a1, mid, a2 = plan(np.array([0.0, 10.0]), 0.0, 0.5)
    >>> round(float(cost), 6)
    10.0

Functions:
    - derive_dubins() -> dubins_shortest
"""

import casadi as ca

from .route import PathType

__all__ = ["derive_dubins", "casadi_min_with_cargo"]

# ==============================================================================
# Core Utilities
# ==============================================================================


def casadi_min_with_cargo(costs, cargos):
    """Select minimum cost and return its cargo (branch-free CasADi)."""
    if len(costs) == 1:
        return costs[0], cargos[0]

    current_min_cost = costs[0]
    current_min_cargo = cargos[0]

    for i in range(1, len(costs)):
        is_lower = costs[i] < current_min_cost
        current_min_cost = ca.if_else(is_lower, costs[i], current_min_cost)
        current_min_cargo = ca.if_else(is_lower, cargos[i], current_min_cargo)

    return current_min_cost, current_min_cargo


def wrap_positive(x):
    """Wrap angle to [0, 2pi)."""
    return x - 2 * ca.pi * ca.floor(x / (2 * ca.pi))


def heading_of(v):
    """Heading of a 2-vector, clockwise from +y."""
    return ca.atan2(v[0], v[1])


def heading_vector(psi):
    return ca.vertcat(ca.sin(psi), ca.cos(psi))


def compute_turn_centers(p, psi, R):
    """Compute right and left turn centers for heading psi at point p."""
    right = ca.vertcat(ca.cos(psi), -ca.sin(psi))
    return p + R * right, p - R * right


# ==============================================================================
# Path Type Computations
# ==============================================================================

# +1 turns clockwise (heading increases), -1 counter-clockwise
TURN_SIGN = {"R": 1, "L": -1}


def compute_csc_path(psi1, c0, c1, R, path_type):
    """
    Circle-Straight-Circle candidate.

    Returns:
        a1, dist, a2: Start sweep, tangent length, end sweep
        cost: Path length, inf when the inner tangent does not exist
    """
    turns = PathType.turns(path_type)
    first, last = TURN_SIGN[turns[0]], TURN_SIGN[turns[2]]

    v = c1 - c0
    d = ca.norm_2(v)

    if first == last:
        heading = heading_of(v)
        dist = d
        feasible = None
    else:
        dist = ca.sqrt(ca.fmax(d**2 - (2 * R) ** 2, 0))
        heading = heading_of(v) + first * ca.atan2(2 * R, dist)
        feasible = d >= 2 * R

    a1 = wrap_positive(first * heading)
    a2 = wrap_positive(last * (psi1 - heading))

    cost = R * (a1 + a2) + dist
    if feasible is not None:
        cost = ca.if_else(feasible, cost, ca.inf)
    return a1, dist, a2, cost


def compute_ccc_path(psi1, c0, c2, R, path_type):
    """
    Circle-Circle-Circle candidate.

    Returns:
        a1, am, a2: Start, middle and end sweeps
        cost: Path length, inf when no middle circle fits
    """
    s = TURN_SIGN[PathType.turns(path_type)[0]]

    v = c2 - c0
    d = ca.norm_2(v)
    feasible = d <= 4 * R

    psi_m = heading_of(v) + s * ca.acos(ca.fmin(d / (4 * R), 1))
    c1 = c0 + 2 * R * heading_vector(psi_m)

    enter = psi_m + s * ca.pi / 2
    leave = heading_of(c1 - c2) + s * ca.pi / 2

    a1 = wrap_positive(s * enter)
    am = wrap_positive(-s * (leave - enter))
    a2 = wrap_positive(s * (psi1 - leave))

    cost = ca.if_else(feasible, R * (a1 + am + a2), ca.inf)
    return a1, am, a2, cost


# ==============================================================================
# Main API
# ==============================================================================


def derive_dubins():
    """
    Create a CasADi function for shortest Dubins path planning.

    Returns:
        dubins_shortest: Planner function
            Inputs: p1[2], psi1, R
            Outputs: cost, type, angle1, middle, angle2

            ``middle`` is the tangent length for CSC types and the middle
            sweep for CCC types. ``type`` is a PathType id.
    """
    p1 = ca.SX.sym("p1", 2)
    psi1 = ca.SX.sym("psi1")
    R = ca.SX.sym("R")

    cr0, cl0 = compute_turn_centers(ca.DM([0.0, 0.0]), 0.0, R)
    cr1, cl1 = compute_turn_centers(p1, psi1, R)
    centers = {
        PathType.RSR: (cr0, cr1),
        PathType.LSL: (cl0, cl1),
        PathType.RSL: (cr0, cl1),
        PathType.LSR: (cl0, cr1),
        PathType.RLR: (cr0, cr1),
        PathType.LRL: (cl0, cl1),
    }

    costs, cargos = [], []
    for path_type in PathType.all():
        c0, c1 = centers[path_type]
        if path_type in (PathType.RLR, PathType.LRL):
            a1, mid, a2, cost = compute_ccc_path(psi1, c0, c1, R, path_type)
        else:
            a1, mid, a2, cost = compute_csc_path(psi1, c0, c1, R, path_type)
        costs.append(cost)
        cargos.append(ca.vertcat(path_type, a1, mid, a2))

    min_cost, best_cargo = casadi_min_with_cargo(costs=costs, cargos=cargos)

    return ca.Function(
        "dubins_shortest",
        [p1, psi1, R],
        [min_cost, best_cargo[0], best_cargo[1], best_cargo[2], best_cargo[3]],
        ["p1", "psi1", "R"],
        ["cost", "type", "angle1", "middle", "angle2"],
    )
