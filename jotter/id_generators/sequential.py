from jotter.id_generators.base import IdGenerator


class SequentialIdGenerator(IdGenerator):
    """Hands out increasing integer ids starting from ``start``."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next_id(self) -> int:
        note_id = self._next
        self._next += 1
        return note_id
