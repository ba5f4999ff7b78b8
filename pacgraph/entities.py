"""Movable things on the board: Pacman and the monsters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pacgraph.location import Location

if TYPE_CHECKING:
    from pacgraph.graph import Graph
    from pacgraph.strategies import GreedyStrategy


class Entity:
    """Something with a position and the direction it last moved in."""

    def __init__(self, location: Location) -> None:
        self.location = location
        self.last_direction = Location(0, 0)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.location!r})"


class Pacman(Entity):
    """The player."""


class Monster(Entity):
    """A chaser whose steps are chosen by a greedy strategy."""

    def __init__(self, location: Location, strategy: GreedyStrategy, name: str) -> None:
        super().__init__(location)
        self.strategy = strategy
        self.name = name

    def move(self, graph: Graph, target: Entity) -> None:
        """Take one step towards the target, as the strategy decides."""
        self.location = self.strategy.find_next_move(graph, self, target)

    def __repr__(self) -> str:
        return f"Monster({self.name!r}, {self.location!r})"