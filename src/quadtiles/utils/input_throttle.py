from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic
from typing import Callable, Tuple

from quadtiles.components.direction import Direction
from quadtiles.constants import MIN_SWIPE_DISTANCE, SLIDE_DURATION


def classify_swipe(
	start: Tuple[float, float],
	end: Tuple[float, float],
	min_distance: float = MIN_SWIPE_DISTANCE,
) -> Direction | None:
	"""Map a drag from start to end onto a swipe direction.

	Drags shorter than ``min_distance`` are not swipes. The dominant axis
	decides; equal magnitudes count as vertical.
	"""
	dx = end[0] - start[0]
	dy = end[1] - start[1]
	if (dx * dx + dy * dy) < min_distance * min_distance:
		return None
	if abs(dx) > abs(dy):
		return Direction.RIGHT if dx > 0 else Direction.LEFT
	return Direction.UP if dy > 0 else Direction.DOWN


@dataclass(slots=True)
class SwipeThrottle:
	"""Busy gate the host holds while a move is being presented.

	* ``block`` keeps new swipes out for a duration (a slide or a win
	  celebration); ``release`` lifts the block early.
	* ``allow`` answers whether a swipe may reach the engine now and counts
	  the ones it lets through.

	"""

	slide_duration: float = SLIDE_DURATION
	clock: Callable[[], float] | None = field(default=None, repr=False)

	_clock: Callable[[], float] = field(init=False, repr=False)
	_block_until: float = field(init=False, default=0.0, repr=False)
	_sequence: int = field(init=False, default=0, repr=False)

	def __post_init__(self) -> None:
		self._clock = self.clock or monotonic
		self.slide_duration = max(0.0, float(self.slide_duration))

	@property
	def busy(self) -> bool:
		return bool(self._block_until) and self._clock() < self._block_until

	def allow(self) -> bool:
		if self.busy:
			return False
		self._sequence += 1
		return True

	def block(self, duration: float | None = None) -> None:
		duration = self.slide_duration if duration is None else float(duration)
		if duration <= 0.0:
			return
		until = self._clock() + duration
		if until > self._block_until:
			self._block_until = until

	def release(self) -> None:
		self._block_until = 0.0

	def reset(self) -> None:
		self._block_until = 0.0
		self._sequence = 0

	@property
	def accepted(self) -> int:
		return self._sequence
