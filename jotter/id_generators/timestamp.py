import time
from typing import Callable

from loguru import logger

from jotter.id_generators.base import IdGenerator


def now_millis() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


class TimestampIdGenerator(IdGenerator):
    """Ids taken from the millisecond clock.

    Raw timestamps collide when two notes are created within the same
    millisecond, or repeat when the clock is stepped back. In either case the
    generator returns the previous id plus one, so ids stay unique and
    increasing while still tracking creation time.
    """

    def __init__(self, clock: Callable[[], int] = now_millis) -> None:
        self._clock = clock
        self._last: int | None = None

    def next_id(self) -> int:
        note_id = self._clock()
        if self._last is not None and note_id <= self._last:
            logger.debug(f"Timestamp id {note_id} already used, bumping to {self._last + 1}")
            note_id = self._last + 1
        self._last = note_id
        return note_id
