import pytest
from pydantic import ValidationError

from jotter.config import Settings
from jotter.notes_stores import InMemoryNotesStore
from tests.fakes import FakeClock


def test_default_settings() -> None:
    config = Settings()

    assert config.excerpt_max_length == 100
    assert config.title_max_length == 50
    assert config.untitled_title == "Untitled"
    assert config.id_strategy == "sequential"


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOTTER_EXCERPT_MAX_LENGTH", "20")
    monkeypatch.setenv("JOTTER_ID_STRATEGY", "timestamp")

    config = Settings()

    assert config.excerpt_max_length == 20
    assert config.id_strategy == "timestamp"


def test_settings_reject_invalid_values() -> None:
    with pytest.raises(ValidationError):
        Settings(excerpt_max_length=0)

    with pytest.raises(ValidationError):
        Settings(id_strategy="random")


def test_store_from_settings_applies_limits() -> None:
    config = Settings(excerpt_max_length=10, title_max_length=5, untitled_title="(none)")
    store = InMemoryNotesStore.from_settings(config, clock=FakeClock())

    note = store.add_note("Heading too long\nand a body long enough to be cut").note

    assert note.title == "Headi..."
    assert note.excerpt == "Heading to..."


def test_store_from_settings_timestamp_ids() -> None:
    clock = FakeClock(start=42_000)
    store = InMemoryNotesStore.from_settings(Settings(id_strategy="timestamp"), clock=clock)

    first = store.add_note("one").note
    second = store.add_note("two").note

    assert first.id == 42_000
    assert second.id == 42_001, "Same-millisecond notes must not share an id"
