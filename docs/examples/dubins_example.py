"""
Dubins Path Planning Example
=============================

This example demonstrates the shortest Dubins path from the origin (facing +y)
to a goal pose, and the CasADi planner that computes the same thing
symbolically.
"""

import numpy as np

from dubins_path import PathType, Point, RouteCSC, candidates, derive_dubins, plot_path, sample, shortest

# Goal configuration relative to the start
goal = Point(10.0, 5.0)  # Goal position (x, y)
psi = np.pi / 2  # Goal heading (radians, clockwise from +y)

R = 2.0  # Turn radius

# Plan the path
path = shortest(R, goal, psi)

print(f"Path Type: {path.name}")
print(f"Total Length: {path.length:.4f}")
print(f"Arc 1 Angle: {path.start.angle.radians:.4f} rad")
if isinstance(path, RouteCSC):
    print(f"Straight Distance: {path.tangent.length:.4f}")
else:
    print(f"Arc 2 Angle: {path.middle.angle.radians:.4f} rad")
print(f"Final Arc Angle: {path.end.angle.radians:.4f} rad")

# Every candidate, including the infeasible ones
print("\nCandidates:")
for path_type, result in candidates(R, goal, psi).items():
    length = getattr(result, "length", None)
    detail = f"{length:.4f}" if length is not None else str(result)
    print(f"  {PathType.name(path_type)}: {detail}")

# Evaluate path at multiple points
x, y, heading = sample(path, n_points=5)
print("\nSampled poses:")
for xi, yi, hi in zip(x, y, heading):
    print(f"x={xi:.4f}, y={yi:.4f}, psi={hi:.4f} rad")

# Same plan through the symbolic planner
plan_fn = derive_dubins()
cost, path_type, a1, middle, a2 = plan_fn(goal.to_array(), psi, R)
print(f"\nCasADi: {PathType.name(float(path_type))} with cost {float(cost):.4f}")

# Visualize the path (optional - requires matplotlib)
try:
    import matplotlib.pyplot as plt

    ax, path_data = plot_path(path)
    plt.title(f"Dubins Path: {path_data['type']}")
    plt.xlabel("x (m)")
    plt.ylabel("y (m)")
    plt.savefig("dubins_example.png", dpi=150, bbox_inches="tight")
    print("\nPlot saved to dubins_example.png")
except ImportError:
    print("\nMatplotlib not available - skipping visualization")
