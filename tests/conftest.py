import pytest

from jotter.id_generators import SequentialIdGenerator
from jotter.notes_stores import InMemoryNotesStore
from tests.fakes import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> InMemoryNotesStore:
    return InMemoryNotesStore(id_generator=SequentialIdGenerator(), clock=clock)


@pytest.fixture
def populated_store(store: InMemoryNotesStore, clock: FakeClock) -> InMemoryNotesStore:
    """Store holding three notes added one millisecond apart."""
    store.add_note("# Groceries\nMilk, eggs and bread")
    clock.advance()
    store.add_note("# Python tips\nUse list comprehensions for simple transforms")
    clock.advance()
    store.add_note("Meeting notes\nDiscussed the python migration", "Weekly sync")
    clock.advance()
    return store
