from typing import Any, List, Mapping, Protocol

from jotter.domain.note import Note, NoteUpdate
from jotter.domain.results import DeleteResult, NoteResult


class NotesStore(Protocol):
    def add_note(self, content: str | None, title: str | None = None) -> NoteResult:
        """Validate and add a new note."""
        ...

    def get_all_notes(self) -> List[Note]:
        """Get copies of all notes in insertion order."""
        ...

    def get_note_by_id(self, note_id: int | None) -> Note | None:
        """Get a copy of a note by its ID."""
        ...

    def update_note(
        self, note_id: int | None, updates: NoteUpdate | Mapping[str, Any] | None
    ) -> NoteResult:
        """Apply a partial update to an existing note."""
        ...

    def delete_note(self, note_id: int | None) -> DeleteResult:
        """Remove a note."""
        ...

    def search_notes(self, query: str | None) -> List[Note]:
        """Get notes whose title or content contains the query, ignoring case."""
        ...

    def get_notes_ordered_by_date(self) -> List[Note]:
        """Get notes ordered by last update, most recent first."""
        ...

    def get_favorite_notes(self) -> List[Note]:
        """Get notes marked as favorite."""
        ...

    def get_notes_count(self) -> int:
        """Get the number of stored notes."""
        ...
