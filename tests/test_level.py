import pytest

from quadtiles.components.level import Level
from quadtiles.events.bus import EVENT_LEVEL_SELECTED, EventBus
from quadtiles.systems.level_flow import LevelFlowSystem
from tests.helpers import capture


def test_level_from_mapping():
    level = Level.from_mapping({"dimension": 5, "obstaclePositions": [[1, 2], {"x": 3, "y": 0}]})

    assert level.dimension == 5
    assert level.positions == ((1, 2), (3, 0))


def test_level_from_mapping_accepts_positions_key_and_defaults():
    assert Level.from_mapping({"dimension": 3, "positions": [(0, 0)]}).positions == ((0, 0),)
    assert Level.from_mapping({"dimension": 3}).positions == ()
    with pytest.raises(ValueError):
        Level.from_mapping({"positions": []})


@pytest.mark.parametrize("dimension", [0, 1, 9])
def test_level_dimension_bounds(dimension):
    with pytest.raises(ValueError):
        Level(dimension=dimension)


def test_level_keeps_out_of_range_positions_for_the_board_to_skip():
    assert Level(dimension=2, positions=((5, 5),)).positions == ((5, 5),)


def test_level_flow_wraps_and_returns_home():
    bus = EventBus()
    selected = capture(bus, EVENT_LEVEL_SELECTED)
    levels = [Level(dimension=3), Level(dimension=4), Level(dimension=5)]
    flow = LevelFlowSystem(bus, levels)

    assert flow.current is levels[0]
    assert flow.next_level() is levels[1]
    assert flow.next_level() is levels[2]
    assert flow.next_level() is levels[0]
    flow.select(2)
    assert flow.home() is levels[0]
    assert [event["index"] for event in selected] == [0, 1, 2, 0, 2, 0]


def test_level_flow_validation():
    bus = EventBus()
    with pytest.raises(ValueError):
        LevelFlowSystem(bus, [])
    flow = LevelFlowSystem(bus, [Level(dimension=4)])
    with pytest.raises(IndexError):
        flow.select(1)
    assert flow.next_level() is flow.levels[0]
