"""Greedy one-step chasing strategies for monsters."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

from pacgraph.graph import HEIGHT, WIDTH, Graph, Node
from pacgraph.location import Location

if TYPE_CHECKING:
    from pacgraph.entities import Entity


def _axis_gap(a: int, b: int, size: int) -> int:
    """Distance between two coordinates on a wrapping axis, taking the shorter way."""
    gap = abs(a - b)
    return size - gap if gap > size // 2 else gap


def _neighbours(graph: Graph, location: Location) -> list[Node]:
    node = graph.get_node(location)
    if node is None:
        raise ValueError(f"{location} is not a path tile")
    return node.neighbors


def _best_step(
    graph: Graph, current: Location, cost: Callable[[Location], float]
) -> Location:
    """The neighbour of `current` with the lowest cost; the first one wins ties."""
    best = min(
        _neighbours(graph, current),
        key=lambda node: cost(node.location),
        default=None,
    )
    return current if best is None else best.location


class GreedyStrategy(ABC):
    """Chooses a monster's next tile from the tiles next to it."""

    @abstractmethod
    def find_next_move(self, graph: Graph, monster: Entity, target: Entity) -> Location:
        """Return the location the monster should move to."""


class DistanceGreedyStrategy(GreedyStrategy):
    """Steps to the neighbour with the smallest Euclidean distance to the target."""

    def find_next_move(self, graph: Graph, monster: Entity, target: Entity) -> Location:
        goal = target.location

        def cost(loc: Location) -> float:
            return math.hypot(
                _axis_gap(loc.x, goal.x, WIDTH), _axis_gap(loc.y, goal.y, HEIGHT)
            )

        return _best_step(graph, monster.location, cost)


class HeuristicGreedyStrategy(GreedyStrategy):
    """Steps to the neighbour with the smallest Manhattan distance to the target."""

    def find_next_move(self, graph: Graph, monster: Entity, target: Entity) -> Location:
        goal = target.location

        def cost(loc: Location) -> int:
            return _axis_gap(loc.x, goal.x, WIDTH) + _axis_gap(loc.y, goal.y, HEIGHT)

        return _best_step(graph, monster.location, cost)


class DirectionalGreedyStrategy(GreedyStrategy):
    """Closes the gap on whichever axis is currently the larger one first."""

    def find_next_move(self, graph: Graph, monster: Entity, target: Entity) -> Location:
        current = monster.location
        goal = target.location
        prefer_horizontal = _axis_gap(goal.x, current.x, WIDTH) >= _axis_gap(
            goal.y, current.y, HEIGHT
        )

        def cost(loc: Location) -> int:
            gap_x = _axis_gap(goal.x, loc.x, WIDTH)
            gap_y = _axis_gap(goal.y, loc.y, HEIGHT)
            return gap_x * 1000 + gap_y if prefer_horizontal else gap_y * 1000 + gap_x

        return _best_step(graph, current, cost)


class AggressiveGreedyStrategy(GreedyStrategy):
    """Aims at where the target will be two steps ahead on its current heading."""

    def find_next_move(self, graph: Graph, monster: Entity, target: Entity) -> Location:
        heading = target.last_direction
        goal = target.location
        if not heading.is_still:
            goal = Location(
                (goal.x + heading.x * 2) % WIDTH, (goal.y + heading.y * 2) % HEIGHT
            )

        def cost(loc: Location) -> float:
            return math.hypot(
                _axis_gap(loc.x, goal.x, WIDTH), _axis_gap(loc.y, goal.y, HEIGHT)
            )

        return _best_step(graph, monster.location, cost)