"""Grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """An immutable (x, y) position on the maze grid, also used as a direction."""

    x: int = 0
    y: int = 0

    @property
    def is_still(self) -> bool:
        """True for the zero vector, i.e. no direction at all."""
        return self.x == 0 and self.y == 0