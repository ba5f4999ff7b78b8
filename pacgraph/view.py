"""Drawing geometry, colours, key mapping and status text for the game window."""

from __future__ import annotations

import math
from typing import Protocol

from pacgraph.graph import HEIGHT as GRID_HEIGHT
from pacgraph.graph import WIDTH as GRID_WIDTH
from pacgraph.location import Location

TILE_SIZE = 25
WIDTH = GRID_WIDTH * TILE_SIZE
HEIGHT = GRID_HEIGHT * TILE_SIZE
FRAME_MS = 250
STATUS_MS = 100

WALL_COLOR = "#2121de"
FALLBACK_MONSTER_COLOR = "#00ff00"
INITIAL_STATUS = "Time Survived: 0.0s | Use Arrow Keys to Start | R to Restart"

_KEYS = {"Up": "UP", "Down": "DOWN", "Left": "LEFT", "Right": "RIGHT", "r": "R", "R": "R"}

_MONSTER_COLORS = {
    "M1 (Dist)": "#ff0000",
    "M2 (Heur)": "#ffb8ff",
    "M3 (Dir)": "#00ffff",
    "M4 (Aggr)": "#ffb852",
}


class _Status(Protocol):
    game_over: bool
    survived_time: float


def key_for(keysym: str) -> str | None:
    """Map a keyboard key name to a game command, or None if it has no meaning."""
    return _KEYS.get(keysym)


def monster_color(name: str) -> str:
    """The fill colour of a monster, by its name."""
    return _MONSTER_COLORS.get(name, FALLBACK_MONSTER_COLOR)


def mouth_opening(milliseconds: int) -> float:
    """Pacman's mouth angle in degrees, oscillating between 0 and 30 over time."""
    return 30.0 * (0.5 + 0.5 * math.sin(milliseconds * 0.015))


def pie_angles(direction: Location, mouth_open: float) -> tuple[int, int]:
    """Start angle and extent, in degrees, of Pacman's body facing a direction."""
    if direction.x == 1:
        base = 0
    elif direction.x == -1:
        base = 180
    elif direction.y == -1:
        base = 90
    elif direction.y == 1:
        base = 270
    else:
        base = 0
    opening = int(mouth_open)
    return base + opening, 360 - 2 * opening


def ghost_outline(x: float, y: float) -> list[tuple[float, float]]:
    """Polygon points of a monster body whose tile has its top-left corner at (x, y).

    The rounded part traces an arc counter-clockwise from 180 to 360 degrees,
    then the outline runs to the bottom-right corner and back along three feet.
    """
    half = TILE_SIZE / 2
    cx, cy = x + half, y + half
    points = [(x, y + half)]
    points.extend(
        (cx + half * math.cos(math.radians(a)), cy - half * math.sin(math.radians(a)))
        for a in range(180, 361, 15)
    )
    foot = TILE_SIZE / 3.0
    points.extend(
        [
            (x + TILE_SIZE, y + TILE_SIZE),
            (x + 2 * foot, y + TILE_SIZE - 4),
            (x + foot, y + TILE_SIZE),
            (x, y + TILE_SIZE - 4),
        ]
    )
    return points


def status_text(controller: _Status) -> str:
    """The status line shown above the board."""
    if controller.game_over:
        return (
            f"GAME OVER! Final Time: {controller.survived_time:.2f}s"
            " | Press R to Restart"
        )
    return f"Time Survived: {controller.survived_time:.2f}s"