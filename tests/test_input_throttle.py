import pytest

from quadtiles.components.direction import Direction
from quadtiles.utils.input_throttle import SwipeThrottle, classify_swipe


class _FakeClock:
    def __init__(self) -> None:
        self.value = 0.0

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value


@pytest.mark.parametrize(
    "end, expected",
    [
        ((180.0, 110.0), Direction.RIGHT),
        ((20.0, 90.0), Direction.LEFT),
        ((110.0, 200.0), Direction.UP),
        ((95.0, 10.0), Direction.DOWN),
        ((160.0, 160.0), Direction.UP),  # equal axes count as vertical
    ],
)
def test_classify_swipe_dominant_axis(end, expected):
    assert classify_swipe((100.0, 100.0), end) == expected


def test_classify_swipe_ignores_short_drags():
    assert classify_swipe((100.0, 100.0), (130.0, 130.0)) is None
    assert classify_swipe((100.0, 100.0), (130.0, 100.0), min_distance=20.0) == Direction.RIGHT


def test_throttle_blocks_while_presenting():
    clock = _FakeClock()
    throttle = SwipeThrottle(slide_duration=0.15, clock=clock)

    assert throttle.allow()
    throttle.block()
    assert throttle.busy
    clock.advance(0.1)
    assert not throttle.allow()
    clock.advance(0.05)
    assert not throttle.busy
    assert throttle.allow()
    assert throttle.accepted == 2


def test_throttle_keeps_longest_block_and_releases():
    clock = _FakeClock()
    throttle = SwipeThrottle(slide_duration=0.15, clock=clock)

    throttle.block(1.5)
    throttle.block()
    clock.advance(0.5)
    assert throttle.busy
    throttle.release()
    assert throttle.allow()


def test_throttle_reset_clears_state():
    clock = _FakeClock()
    throttle = SwipeThrottle(clock=clock)
    throttle.allow()
    throttle.block(10.0)

    throttle.reset()

    assert not throttle.busy
    assert throttle.accepted == 0


def test_non_positive_block_is_ignored():
    throttle = SwipeThrottle(clock=_FakeClock())
    throttle.block(0.0)
    throttle.block(-1.0)
    assert throttle.allow()
