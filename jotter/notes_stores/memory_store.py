import threading
from typing import Any, Callable, List, Mapping

from loguru import logger
from pydantic import ValidationError

from jotter.config import Settings, settings
from jotter.derivation import derive_excerpt, derive_title
from jotter.domain.note import Note, NoteUpdate
from jotter.domain.results import (
    DeleteResult,
    ErrorKind,
    NoteDeleted,
    NoteResult,
    NoteSaved,
    OperationFailed,
)
from jotter.id_generators import (
    IdGenerator,
    SequentialIdGenerator,
    TimestampIdGenerator,
    now_millis,
)
from jotter.notes_stores.base import NotesStore

EMPTY_CONTENT_MESSAGE = "Content cannot be empty"
INVALID_ID_MESSAGE = "Invalid note ID"
NOT_FOUND_MESSAGE = "Note not found"
DELETED_MESSAGE = "Note deleted successfully"


class InMemoryNotesStore(NotesStore):
    """Notes store that keeps an ordered list of notes in process memory.

    The list is private to the store. Every note handed out is a copy, so callers
    cannot change stored state except through the store's own operations.
    All operations run under a single lock so the store can be shared between threads.
    """

    def __init__(
        self,
        *,
        id_generator: IdGenerator | None = None,
        clock: Callable[[], int] = now_millis,
        excerpt_max_length: int = settings.excerpt_max_length,
        title_max_length: int = settings.title_max_length,
        untitled_title: str = settings.untitled_title,
    ) -> None:
        """Initialize InMemoryNotesStore.

        Args:
            id_generator: Source of note IDs. Defaults to a sequential counter.
            clock: Returns the current time in milliseconds since epoch
            excerpt_max_length: Maximum excerpt length before truncation
            title_max_length: Maximum derived title length before truncation
            untitled_title: Title used when content has no usable first line
        """
        self._notes: list[Note] = []
        self._lock = threading.Lock()
        self._id_generator = id_generator or SequentialIdGenerator()
        self._clock = clock
        self._excerpt_max_length = excerpt_max_length
        self._title_max_length = title_max_length
        self._untitled_title = untitled_title

    @classmethod
    def from_settings(
        cls, config: Settings = settings, clock: Callable[[], int] = now_millis
    ) -> "InMemoryNotesStore":
        """Create a store configured from settings.

        Args:
            config: Settings to read derivation limits and ID strategy from
            clock: Clock shared by the store and a timestamp ID generator

        Returns:
            Empty InMemoryNotesStore
        """
        id_generator: IdGenerator
        if config.id_strategy == "timestamp":
            id_generator = TimestampIdGenerator(clock)
        else:
            id_generator = SequentialIdGenerator()

        return cls(
            id_generator=id_generator,
            clock=clock,
            excerpt_max_length=config.excerpt_max_length,
            title_max_length=config.title_max_length,
            untitled_title=config.untitled_title,
        )

    def add_note(self, content: str | None, title: str | None = None) -> NoteResult:
        """Validate and add a new note."""
        if not isinstance(content, str) or not content.strip():
            return self._fail(ErrorKind.VALIDATION, EMPTY_CONTENT_MESSAGE)
        if title is not None and not isinstance(title, str):
            return self._fail(ErrorKind.VALIDATION, "Title must be text")

        with self._lock:
            now = self._clock()
            note = Note(
                id=self._id_generator.next_id(),
                content=content,
                title=title or self._derive_title(content),
                excerpt=self._derive_excerpt(content),
                created_at=now,
                updated_at=now,
                favorite=False,
            )
            self._notes.append(note)

        logger.info(f"Added note {note.id}: {note.title!r}")
        return NoteSaved(note=note.model_copy())

    def get_all_notes(self) -> List[Note]:
        """Get copies of all notes in insertion order."""
        with self._lock:
            return [note.model_copy() for note in self._notes]

    def get_note_by_id(self, note_id: int | None) -> Note | None:
        """Get a copy of a note by its ID."""
        with self._lock:
            note = self._find(note_id)
            return note.model_copy() if note else None

    def update_note(
        self, note_id: int | None, updates: NoteUpdate | Mapping[str, Any] | None
    ) -> NoteResult:
        """Apply a partial update to an existing note.

        New content re-derives title and excerpt before an explicit title is
        applied, so a title passed alongside content wins. ``updated_at`` is
        refreshed on every successful call, even when nothing changed.

        Args:
            note_id: ID of the note to update
            updates: Fields to change. Missing or None fields are left untouched.

        Returns:
            NoteSaved with a copy of the updated note, or OperationFailed
        """
        if note_id is None:
            return self._fail(ErrorKind.VALIDATION, INVALID_ID_MESSAGE)

        with self._lock:
            note = self._find(note_id)
            if note is None:
                return self._fail(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE, note_id)

            try:
                update = self._parse_update(updates)
            except ValidationError as e:
                return self._fail(ErrorKind.VALIDATION, f"Invalid update: {e}", note_id)

            if update.content is not None:
                if not update.content.strip():
                    return self._fail(ErrorKind.VALIDATION, EMPTY_CONTENT_MESSAGE, note_id)
                note.content = update.content
                note.title = self._derive_title(update.content)
                note.excerpt = self._derive_excerpt(update.content)

            if update.title:
                note.title = update.title

            if update.favorite is not None:
                note.favorite = update.favorite

            # updated_at never moves backwards, even if the clock does
            note.updated_at = max(self._clock(), note.updated_at)
            saved = note.model_copy()

        logger.info(f"Updated note {note_id}")
        return NoteSaved(note=saved)

    def delete_note(self, note_id: int | None) -> DeleteResult:
        """Remove a note."""
        if note_id is None:
            return self._fail(ErrorKind.VALIDATION, INVALID_ID_MESSAGE)

        with self._lock:
            initial_count = len(self._notes)
            self._notes = [note for note in self._notes if note.id != note_id]
            if len(self._notes) == initial_count:
                return self._fail(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE, note_id)

        logger.info(f"Deleted note {note_id}")
        return NoteDeleted(message=DELETED_MESSAGE)

    def search_notes(self, query: str | None) -> List[Note]:
        """Get notes whose title or content contains the query, ignoring case."""
        if not isinstance(query, str) or not query.strip():
            return []

        normalized_query = query.strip().lower()
        with self._lock:
            results = [
                note.model_copy()
                for note in self._notes
                if normalized_query in note.title.lower()
                or normalized_query in note.content.lower()
            ]

        logger.debug(f"Search for {normalized_query!r} matched {len(results)} notes")
        return results

    def get_notes_ordered_by_date(self) -> List[Note]:
        """Get notes ordered by last update, most recent first.

        The sort is stable, so notes updated in the same millisecond keep their
        insertion order.
        """
        with self._lock:
            notes_copy = [note.model_copy() for note in self._notes]
        notes_copy.sort(key=lambda note: note.updated_at, reverse=True)
        return notes_copy

    def get_favorite_notes(self) -> List[Note]:
        """Get notes marked as favorite."""
        with self._lock:
            return [note.model_copy() for note in self._notes if note.favorite is True]

    def get_notes_count(self) -> int:
        """Get the number of stored notes."""
        with self._lock:
            return len(self._notes)

    def _find(self, note_id: int | None) -> Note | None:
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def _parse_update(self, updates: NoteUpdate | Mapping[str, Any] | None) -> NoteUpdate:
        if updates is None:
            return NoteUpdate()
        if isinstance(updates, NoteUpdate):
            return updates
        if isinstance(updates, Mapping):
            updates = dict(updates)
        return NoteUpdate.model_validate(updates, strict=True)

    def _derive_title(self, content: str) -> str:
        return derive_title(
            content, max_length=self._title_max_length, untitled=self._untitled_title
        )

    def _derive_excerpt(self, content: str) -> str:
        return derive_excerpt(content, max_length=self._excerpt_max_length)

    @staticmethod
    def _fail(kind: ErrorKind, message: str, note_id: int | None = None) -> OperationFailed:
        logger.warning(f"Rejected operation on note {note_id}: {message}")
        return OperationFailed(error=kind, message=message)
