"""The maze as a graph of walkable tiles."""

from __future__ import annotations

from pacgraph.location import Location

WIDTH = 28
HEIGHT = 31

# 1 = path, 0 = wall; one string per row, indexed as _MAP[y][x].
_MAP = (
    "0000000000000000000000000000",
    "0111111111111001111111111110",
    "0100001000001001000001000010",
    "0100001000001001000001000010",
    "0100001000001001000001000010",
    "0111111111111111111111111110",
    "0100001001000000001001000010",
    "0100001001000000001001000010",
    "0111111001111001111001111110",
    "0100001000001001000001000010",
    "0100001000001001000001000010",
    "0100001001111111111001000010",
    "0100001001000000001001000010",
    "0100001001000000001001000010",
    "1111111111111111111111111111",
    "0100001001000000001001000010",
    "0100001001000000001001000010",
    "0100001001111111111001000010",
    "0100001001000000001001000010",
    "0100001001000000001001000010",
    "0111111111111001111111111110",
    "0100001000001001000001000010",
    "0100001000001001000001000010",
    "0111001111111111111111001110",
    "0001001001000000001001001000",
    "0001001001000000001001001000",
    "0111111001111001111001111110",
    "0100000000001001000000000010",
    "0100000000001001000000000010",
    "0111111111111111111111111110",
    "0000000000000000000000000000",
)

TUNNEL_ROW = 14


class Node:
    """A walkable tile and the tiles reachable from it in one step."""

    def __init__(self, location: Location) -> None:
        self.location = location
        self.neighbors: list[Node] = []

    def add_neighbor(self, neighbor: Node) -> None:
        """Append a tile reachable from this one."""
        self.neighbors.append(neighbor)

    def __repr__(self) -> str:
        return f"Node({self.location.x}, {self.location.y})"


class Graph:
    """The maze: a node for every path tile, joined to adjacent path tiles."""

    WIDTH = WIDTH
    HEIGHT = HEIGHT

    def __init__(self) -> None:
        self.nodes: dict[Location, Node] = {
            Location(x, y): Node(Location(x, y))
            for x in range(WIDTH)
            for y in range(HEIGHT)
            if not self.is_wall(x, y)
        }
        for node in self.nodes.values():
            x, y = node.location.x, node.location.y
            # Order matters: strategies break ties by the first neighbour.
            for nx, ny in ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)):
                neighbor = self.nodes.get(Location(nx, ny))
                if neighbor is not None:
                    node.add_neighbor(neighbor)

        left = self.nodes.get(Location(0, TUNNEL_ROW))
        right = self.nodes.get(Location(WIDTH - 1, TUNNEL_ROW))
        if left is not None and right is not None:
            left.add_neighbor(right)
            right.add_neighbor(left)

    def get_node(self, location: Location) -> Node | None:
        """Return the node at a location, or None if it is a wall or off the grid."""
        return self.nodes.get(location)

    @staticmethod
    def is_wall(x: int, y: int) -> bool:
        """True if (x, y) is a wall or lies outside the grid."""
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            return True
        return _MAP[y][x] == "0"