"""
Feasibility failures of the path builders.

Builders return these instead of raising them; a selector simply skips a
candidate that produced one. They are still exceptions, so a caller that
wants exception flow can ``raise`` the returned value.
"""

from __future__ import annotations

__all__ = ["DubinsError", "CirclesTooClose", "CirclesTooFarApart"]


class DubinsError(Exception):
    """A path type that cannot connect the given configurations."""

    def __init__(self, distance: float, limit: float):
        self.distance = distance
        self.limit = limit
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"center distance {self.distance:g}, limit {self.limit:g}"

    def __eq__(self, other):
        return type(self) is type(other) and (self.distance, self.limit) == (
            other.distance,
            other.limit,
        )

    def __hash__(self):
        return hash((type(self), self.distance, self.limit))


class CirclesTooClose(DubinsError):
    """Inner tangent impossible: turning circles overlap (RSL, LSR)."""

    def _describe(self) -> str:
        return f"circles too close for an inner tangent: {super()._describe()}"


class CirclesTooFarApart(DubinsError):
    """No middle circle touches both outer circles (RLR, LRL)."""

    def _describe(self) -> str:
        return f"circles too far apart for a middle circle: {super()._describe()}"
