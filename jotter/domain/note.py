"""Note domain models."""

from datetime import datetime, timezone

from pydantic import BaseModel


def _from_millis(value: int) -> datetime:
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


class Note(BaseModel):
    """Represents a single stored note.

    Attributes:
        id: Unique identifier within the store
        content: Full note body, never empty once stored
        title: Derived from the first line of content unless explicitly overridden
        excerpt: Derived from content, truncated with an ellipsis marker
        created_at: Creation timestamp (milliseconds since epoch)
        updated_at: Last successful update timestamp (milliseconds since epoch)
        favorite: Whether the note is marked as a favorite
    """

    id: int
    content: str
    title: str
    excerpt: str
    created_at: int
    updated_at: int
    favorite: bool = False

    @property
    def created(self) -> datetime:
        """Get created_at as an aware UTC datetime."""
        return _from_millis(self.created_at)

    @property
    def updated(self) -> datetime:
        """Get updated_at as an aware UTC datetime."""
        return _from_millis(self.updated_at)


class NoteUpdate(BaseModel):
    """Partial update for a note. Fields left as None are not touched."""

    content: str | None = None
    title: str | None = None
    favorite: bool | None = None
