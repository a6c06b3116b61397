from jotter.notes_stores.base import NotesStore
from jotter.notes_stores.memory_store import InMemoryNotesStore

__all__ = ["NotesStore", "InMemoryNotesStore"]
