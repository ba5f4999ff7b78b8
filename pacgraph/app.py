"""The game window: a canvas driven by a timer, and a status line above it."""

from __future__ import annotations

import itertools
import time
from typing import Any

from pacgraph.controller import GameController
from pacgraph.graph import Graph
from pacgraph.view import (
    FRAME_MS,
    HEIGHT,
    INITIAL_STATUS,
    STATUS_MS,
    TILE_SIZE,
    WALL_COLOR,
    WIDTH,
    ghost_outline,
    key_for,
    monster_color,
    mouth_opening,
    pie_angles,
    status_text,
)

_HUD_FONT = ("Arial", 14, "bold")
_BANNER_FONT = ("Arial", 48, "bold")


class GameWidget:
    """Draws the game on a canvas, ticks it every frame and forwards key presses."""

    def __init__(self, canvas: Any, controller: GameController | None = None) -> None:
        self.canvas = canvas
        self.controller = controller if controller is not None else GameController()
        canvas.bind("<KeyPress>", self.on_key)
        canvas.focus_set()
        canvas.after(FRAME_MS, self._tick)

    def _tick(self) -> None:
        self.game_loop()
        self.canvas.after(FRAME_MS, self._tick)

    def game_loop(self) -> None:
        """Advance the game one tick and repaint."""
        self.controller.update()
        self.redraw()

    def on_key(self, event: Any) -> None:
        """Pass a recognised key press on to the controller."""
        key = key_for(event.keysym)
        if key is not None:
            self.controller.handle_input(key)

    def redraw(self) -> None:
        """Paint the whole board from the controller's current state."""
        canvas = self.canvas
        game = self.controller
        canvas.delete("all")
        canvas.create_rectangle(0, 0, WIDTH, HEIGHT, fill="black", outline="")

        for x, y in itertools.product(range(Graph.WIDTH), range(Graph.HEIGHT)):
            if Graph.is_wall(x, y):
                canvas.create_rectangle(
                    x * TILE_SIZE,
                    y * TILE_SIZE,
                    (x + 1) * TILE_SIZE,
                    (y + 1) * TILE_SIZE,
                    fill=WALL_COLOR,
                    outline="",
                )

        radius = TILE_SIZE // 8
        for pellet in game.pellets:
            cx = pellet.x * TILE_SIZE + TILE_SIZE // 2
            cy = pellet.y * TILE_SIZE + TILE_SIZE // 2
            canvas.create_oval(
                cx - radius, cy - radius, cx + radius, cy + radius, fill="white", outline=""
            )

        self._draw_pacman()
        for monster in game.monsters:
            self._draw_monster(monster.location.x * TILE_SIZE, monster.location.y * TILE_SIZE,
                               monster_color(monster.name))

        canvas.create_text(8, 20, anchor="sw", text=f"Score: {game.score}",
                           fill="white", font=_HUD_FONT)
        canvas.create_text(120, 20, anchor="sw", text=f"Round: {game.round}",
                           fill="white", font=_HUD_FONT)

        if game.game_won:
            self._draw_banner("YOU WIN!", "#00ff00")
        elif game.game_over:
            self._draw_banner("GAME OVER", "#ff0000")

    def _draw_pacman(self) -> None:
        pacman = self.controller.pacman
        mouth = mouth_opening(int(time.monotonic() * 1000))
        start, extent = pie_angles(pacman.last_direction, mouth)
        px = pacman.location.x * TILE_SIZE
        py = pacman.location.y * TILE_SIZE
        self.canvas.create_arc(
            px, py, px + TILE_SIZE, py + TILE_SIZE,
            start=start, extent=extent, style="pieslice", fill="yellow", outline="",
        )

    def _draw_monster(self, mx: int, my: int, color: str) -> None:
        canvas = self.canvas
        outline = [coord for point in ghost_outline(mx, my) for coord in point]
        canvas.create_polygon(*outline, fill=color, outline="")

        eye = TILE_SIZE // 3
        eye_y = my + TILE_SIZE // 4
        pupil = eye // 2
        for eye_x in (mx + 4, mx + TILE_SIZE - 4 - eye):
            canvas.create_oval(eye_x, eye_y, eye_x + eye, eye_y + eye,
                               fill="white", outline="")
            canvas.create_oval(eye_x + 2, eye_y + 2, eye_x + 2 + pupil, eye_y + 2 + pupil,
                               fill="blue", outline="")

    def _draw_banner(self, text: str, color: str) -> None:
        self.canvas.create_rectangle(0, 0, WIDTH, HEIGHT, fill="black",
                                     stipple="gray50", outline="")
        self.canvas.create_text(WIDTH / 2, HEIGHT / 2, text=text, fill=color,
                                font=_BANNER_FONT)


class MainWindow:
    """The top-level window: status line over the game canvas."""

    def __init__(self, root: Any = None) -> None:
        import tkinter as tk

        self.root = root if root is not None else tk.Tk()
        self.root.title("Graph Pacman Survival")
        self.root.resizable(False, False)

        self.status_label = tk.Label(
            self.root,
            text=INITIAL_STATUS,
            font=("Arial", -14),
            padx=10,
            pady=10,
            bg="#333333",
            fg="white",
        )
        self.status_label.pack(fill="x")

        canvas = tk.Canvas(self.root, width=WIDTH, height=HEIGHT,
                           bg="black", highlightthickness=0)
        canvas.pack()
        self.game_widget = GameWidget(canvas)
        self.root.after(STATUS_MS, self.update_status)

    def update_status(self) -> None:
        """Refresh the status line and schedule the next refresh."""
        self.status_label.config(text=status_text(self.game_widget.controller))
        self.root.after(STATUS_MS, self.update_status)

    def run(self) -> None:
        """Enter the event loop until the window closes."""
        self.root.mainloop()


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run it."""
    MainWindow().run()
    return 0