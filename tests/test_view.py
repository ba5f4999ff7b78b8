from types import SimpleNamespace

import pytest

from pacgraph.location import Location
from pacgraph.view import (
    FALLBACK_MONSTER_COLOR,
    TILE_SIZE,
    ghost_outline,
    key_for,
    monster_color,
    mouth_opening,
    pie_angles,
    status_text,
)


@pytest.mark.parametrize(
    "keysym, command",
    [("Up", "UP"), ("Down", "DOWN"), ("Left", "LEFT"), ("Right", "RIGHT"), ("r", "R")],
)
def test_key_for_known(keysym, command):
    assert key_for(keysym) == command


def test_key_for_unknown():
    assert key_for("space") is None


def test_monster_colors_distinct():
    names = ["M1 (Dist)", "M2 (Heur)", "M3 (Dir)", "M4 (Aggr)"]
    colors = {monster_color(n) for n in names}
    assert len(colors) == 4
    assert FALLBACK_MONSTER_COLOR not in colors
    assert monster_color("other") == FALLBACK_MONSTER_COLOR


def test_mouth_opening_in_range():
    values = [mouth_opening(ms) for ms in range(0, 2000, 7)]
    assert min(values) >= 0.0
    assert max(values) <= 30.0
    assert mouth_opening(0) == pytest.approx(15.0)


@pytest.mark.parametrize(
    "direction, base",
    [
        (Location(1, 0), 0),
        (Location(-1, 0), 180),
        (Location(0, -1), 90),
        (Location(0, 1), 270),
        (Location(0, 0), 0),
    ],
)
def test_pie_angles_base(direction, base):
    assert pie_angles(direction, 0.0) == (base, 360)


@pytest.mark.parametrize("mouth", [0.0, 7.9, 15.2, 29.99])
def test_pie_angles_mouth(mouth):
    start, extent = pie_angles(Location(-1, 0), mouth)
    base, _ = pie_angles(Location(-1, 0), 0.0)
    assert start - base == int(mouth)
    assert extent == 360 - 2 * int(mouth)


def test_ghost_outline_shape():
    points = ghost_outline(50, 100)
    assert points[0] == (50, 100 + TILE_SIZE / 2)
    assert points[-1] == (50, 100 + TILE_SIZE - 4)
    assert (50 + TILE_SIZE, 100 + TILE_SIZE) in points
    for px, py in points:
        assert 50 - 1e-9 <= px <= 50 + TILE_SIZE + 1e-9
        assert 100 - 1e-9 <= py <= 100 + TILE_SIZE + 1e-9


def test_ghost_outline_arc_passes_bottom_centre():
    points = ghost_outline(0, 0)
    assert any(
        px == pytest.approx(TILE_SIZE / 2) and py == pytest.approx(TILE_SIZE)
        for px, py in points
    )


def test_status_text_running():
    status = SimpleNamespace(game_over=False, survived_time=1.5)
    assert status_text(status) == "Time Survived: 1.50s"


def test_status_text_game_over():
    status = SimpleNamespace(game_over=True, survived_time=2.25)
    assert status_text(status) == "GAME OVER! Final Time: 2.25s | Press R to Restart"