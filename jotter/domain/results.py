"""Result models returned by store mutations.

Mutations never raise for bad input. They return either a success model
carrying the payload or an ``OperationFailed`` carrying a human-readable
message, all discriminated by the ``success`` literal.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel

from jotter.domain.note import Note


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"


class NoteSaved(BaseModel):
    """A note was added or updated."""

    success: Literal[True] = True
    note: Note


class NoteDeleted(BaseModel):
    """A note was removed."""

    success: Literal[True] = True
    message: str


class OperationFailed(BaseModel):
    """A mutation was rejected and the store was left unchanged."""

    success: Literal[False] = False
    error: ErrorKind
    message: str


NoteResult = NoteSaved | OperationFailed
DeleteResult = NoteDeleted | OperationFailed
