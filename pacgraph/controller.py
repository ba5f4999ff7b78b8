"""Game rules: movement, pellets, collisions, rounds and timing."""

from __future__ import annotations

import time
from collections.abc import Callable

from pacgraph.entities import Monster, Pacman
from pacgraph.graph import HEIGHT, WIDTH, Graph
from pacgraph.location import Location
from pacgraph.strategies import (
    AggressiveGreedyStrategy,
    DirectionalGreedyStrategy,
    DistanceGreedyStrategy,
    HeuristicGreedyStrategy,
)

PACMAN_START = Location(14, 14)
PELLET_POINTS = 10
WIN_PAUSE_SECONDS = 2.0

DIRECTIONS = {
    "UP": Location(0, -1),
    "DOWN": Location(0, 1),
    "LEFT": Location(-1, 0),
    "RIGHT": Location(1, 0),
}


def _starting_monsters() -> list[Monster]:
    return [
        Monster(Location(1, 1), DistanceGreedyStrategy(), "M1 (Dist)"),
        Monster(Location(26, 1), HeuristicGreedyStrategy(), "M2 (Heur)"),
        Monster(Location(1, 29), DirectionalGreedyStrategy(), "M3 (Dir)"),
        Monster(Location(26, 29), AggressiveGreedyStrategy(), "M4 (Aggr)"),
    ]


class GameController:
    """Holds the state of one game and advances it one tick at a time."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.running = False
        self.game_over = False
        self.game_won = False
        self.survived_time = 0.0
        self.score = 0
        self.round = 1
        self._start_time = clock()
        self._win_time = clock()
        self.init_game(True)

    def init_game(self, reset_score: bool = True) -> None:
        """Set up a fresh board; keep the score and advance the round unless resetting."""
        self.graph = Graph()
        self.pellets: set[Location] = {
            Location(x, y)
            for x in range(WIDTH)
            for y in range(HEIGHT)
            if not Graph.is_wall(x, y)
        }
        self.pacman = Pacman(PACMAN_START)
        self.monsters = _starting_monsters()

        self.pellets.discard(self.pacman.location)
        for monster in self.monsters:
            self.pellets.discard(monster.location)

        if reset_score:
            self.score = 0
            self.round = 1
        else:
            self.round += 1
        self.game_won = False
        self.running = False
        self.game_over = False
        self.survived_time = 0.0

    def start_game(self) -> None:
        """Start the clock and let the board move."""
        self.running = True
        self._start_time = self._clock()

    def update(self) -> None:
        """Advance the game by one tick."""
        if self.game_won:
            if self._clock() - self._win_time > WIN_PAUSE_SECONDS:
                self.init_game(False)
                self.start_game()
            return

        if not self.running or self.game_over:
            return

        self._move_pacman()
        for monster in self.monsters:
            monster.move(self.graph, self.pacman)
        self._check_collisions()
        self.survived_time = self._clock() - self._start_time

    def handle_input(self, key: str) -> None:
        """React to a key name: UP, DOWN, LEFT, RIGHT or R."""
        if key == "R" and self.game_over:
            self.init_game(True)
            self.start_game()
            return
        if key == "R" and self.game_won:
            self.init_game(False)
            self.start_game()
            return

        if not self.running and not self.game_over:
            self.start_game()

        direction = DIRECTIONS.get(key)
        if direction is not None:
            self.pacman.last_direction = direction

    def _move_pacman(self) -> None:
        heading = self.pacman.last_direction
        if heading.is_still:
            return

        here = self.pacman.location
        nx = (here.x + heading.x) % WIDTH
        ny = (here.y + heading.y) % HEIGHT
        if Graph.is_wall(nx, ny):
            return

        self.pacman.location = Location(nx, ny)
        if self.pacman.location in self.pellets:
            self.pellets.remove(self.pacman.location)
            self.score += PELLET_POINTS
            if not self.pellets:
                self.game_won = True
                self.running = False
                self._win_time = self._clock()

    def _check_collisions(self) -> None:
        if any(m.location == self.pacman.location for m in self.monsters):
            self.game_over = True
            self.running = False