# pacgraph

A small maze-chase arcade game. You steer the player through a 28 × 31
maze, eating pellets, while four monsters hunt you down. Each monster
picks its next step with its own greedy rule over a graph of the maze's
walkable tiles:

| Monster     | Colour | Strategy                                                            |
|-------------|--------|---------------------------------------------------------------------|
| `M1 (Dist)` | red    | moves to the neighbour nearest the player by straight-line distance |
| `M2 (Heur)` | pink   | moves to the neighbour nearest the player by Manhattan distance     |
| `M3 (Dir)`  | cyan   | closes the larger of the horizontal and vertical gaps first         |
| `M4 (Aggr)` | orange | aims at where the player will be two steps ahead on its heading     |

Distances wrap around the edges of the board, and the middle row (row 14)
is a tunnel that joins the left and right sides. When two neighbours score
the same, a monster takes the first one in the order up, down, left, right.

## Installing

```
pip install .
```

The game window is drawn with Tkinter, which ships with most Python
installations, so a graphical display is needed to play. Python 3.10 or
later is required; there are no other dependencies.

## Playing

```
pacgraph
```

- The arrow keys start the game and set the player's direction; the
  player keeps moving that way until it meets a wall.
- Each pellet is worth 10 points. Eat them all to win the round; the next
  round starts by itself after two seconds (or at once on `R`), keeping
  your score.
- If a monster reaches your tile the game is over. Press `R` to start
  again from round 1 with the score reset.

The game advances four times a second. The bar above the board shows how
long you have survived in the current round; the score and round number
are drawn in the top-left corner of the board.

## Using the pieces

The game logic does not depend on the window and can be driven directly:

```python
from pacgraph.controller import GameController

game = GameController()
game.handle_input("RIGHT")   # starts the game and sets a direction
game.update()                # one tick: move, chase, check collisions
print(game.score, game.round, game.game_over, game.game_won)
```

`GameController` takes an optional `clock` callable (by default
`time.monotonic`) that it uses for the survival time and the pause after a
win, which makes it easy to drive in tests. `handle_input` understands the
key names `UP`, `DOWN`, `LEFT`, `RIGHT` and `R`.

The other modules:

- `pacgraph.location` – `Location`, an immutable `(x, y)` pair also used as
  a direction.
- `pacgraph.graph` – `Graph`, the maze as `Node`s joined to their walkable
  neighbours, with `Graph.get_node` and `Graph.is_wall`.
- `pacgraph.entities` – `Entity`, `Pacman` and `Monster`; `Monster.move`
  takes one step chosen by its strategy.
- `pacgraph.strategies` – `GreedyStrategy` and the four strategies
  `DistanceGreedyStrategy`, `HeuristicGreedyStrategy`,
  `DirectionalGreedyStrategy` and `AggressiveGreedyStrategy`, each with
  `find_next_move(graph, monster, target)`.
- `pacgraph.view` – window-independent helpers: `key_for` (key name to
  command), `monster_color`, `mouth_opening`, `pie_angles`,
  `ghost_outline` and `status_text`.
- `pacgraph.app` – the Tkinter `GameWidget` and `MainWindow`, and `main`,
  which the `pacgraph` command runs.

## Running the tests

```
pip install ".[test]"
pytest
```