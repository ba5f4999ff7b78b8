import pytest

from pacgraph.entities import Monster, Pacman
from pacgraph.graph import WIDTH, Graph
from pacgraph.location import Location
from pacgraph.strategies import (
    AggressiveGreedyStrategy,
    DirectionalGreedyStrategy,
    DistanceGreedyStrategy,
    GreedyStrategy,
    HeuristicGreedyStrategy,
)

ALL_STRATEGIES = [
    DistanceGreedyStrategy,
    HeuristicGreedyStrategy,
    DirectionalGreedyStrategy,
    AggressiveGreedyStrategy,
]


@pytest.fixture(scope="module")
def graph():
    return Graph()


def _pacman(x, y, direction=Location(0, 0)):
    pacman = Pacman(Location(x, y))
    pacman.last_direction = direction
    return pacman


def test_base_strategy_is_abstract():
    with pytest.raises(TypeError):
        GreedyStrategy()


@pytest.mark.parametrize("strategy_cls", ALL_STRATEGIES)
@pytest.mark.parametrize(
    "start,target",
    [
        ((1, 1), (14, 14)),
        ((26, 1), (14, 14)),
        ((1, 29), (14, 14)),
        ((26, 29), (14, 14)),
        ((14, 14), (1, 1)),
    ],
)
def test_result_is_a_neighbour(graph, strategy_cls, start, target):
    monster = Monster(Location(*start), strategy_cls(), "M")
    step = strategy_cls().find_next_move(graph, monster, _pacman(*target))
    neighbours = [n.location for n in graph.get_node(Location(*start)).neighbors]
    assert step in neighbours


@pytest.mark.parametrize("strategy_cls", ALL_STRATEGIES)
def test_adjacent_target_is_caught(graph, strategy_cls):
    monster = Monster(Location(14, 14), strategy_cls(), "M")
    pacman = _pacman(15, 14)
    assert strategy_cls().find_next_move(graph, monster, pacman) == pacman.location


@pytest.mark.parametrize("strategy_cls", ALL_STRATEGIES)
def test_chase_goes_through_tunnel(graph, strategy_cls):
    monster = Monster(Location(0, 14), strategy_cls(), "M")
    step = strategy_cls().find_next_move(graph, monster, _pacman(25, 14))
    assert step == Location(WIDTH - 1, 14)


@pytest.mark.parametrize("strategy_cls", ALL_STRATEGIES)
def test_monster_off_the_path_is_an_error(graph, strategy_cls):
    monster = Monster(Location(0, 0), strategy_cls(), "M")
    with pytest.raises(ValueError):
        strategy_cls().find_next_move(graph, monster, _pacman(14, 14))


@pytest.mark.parametrize("strategy_cls", ALL_STRATEGIES)
def test_repeated_moves_reach_pacman(graph, strategy_cls):
    monster = Monster(Location(1, 14), strategy_cls(), "M")
    pacman = _pacman(14, 14)
    for _ in range(20):
        monster.move(graph, pacman)
        if monster.location == pacman.location:
            break
    assert monster.location == pacman.location


def test_aggressive_aims_ahead_of_pacman(graph):
    monster = Monster(Location(15, 14), AggressiveGreedyStrategy(), "M")
    pacman = _pacman(14, 14, Location(1, 0))
    distance_step = DistanceGreedyStrategy().find_next_move(graph, monster, pacman)
    aggressive_step = AggressiveGreedyStrategy().find_next_move(graph, monster, pacman)
    assert distance_step == pacman.location
    assert aggressive_step == Location(16, 14)


def test_aggressive_without_heading_matches_distance(graph):
    monster = Monster(Location(15, 14), AggressiveGreedyStrategy(), "M")
    pacman = _pacman(14, 14)
    assert AggressiveGreedyStrategy().find_next_move(
        graph, monster, pacman
    ) == DistanceGreedyStrategy().find_next_move(graph, monster, pacman)


def test_aggressive_prediction_wraps_around(graph):
    monster = Monster(Location(WIDTH - 1, 14), AggressiveGreedyStrategy(), "M")
    pacman = _pacman(0, 14, Location(-1, 0))
    step = AggressiveGreedyStrategy().find_next_move(graph, monster, pacman)
    assert step == Location(WIDTH - 2, 14)


def test_ties_go_to_first_neighbour(graph):
    # Both neighbours of the centre tile are equally far from a target straight above.
    monster = Monster(Location(14, 14), HeuristicGreedyStrategy(), "M")
    first = graph.get_node(Location(14, 14)).neighbors[0].location
    for strategy_cls in ALL_STRATEGIES:
        pacman = _pacman(14, 14 - 15)
        pacman.location = Location(14, 0)
        step = strategy_cls().find_next_move(graph, monster, pacman)
        assert step == first