"""Notes kept in an SQLite table, with paging, partial updates and lookups by id."""

from __future__ import annotations

import sqlite3
import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Union

_SCHEMA = """
CREATE TABLE IF NOT EXISTS notes (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL UNIQUE,
    content TEXT NOT NULL,
    category TEXT,
    published INTEGER DEFAULT 0,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

_COLUMNS = "id, title, content, category, published, created_at, updated_at"

NoteId = Union[uuid.UUID, str]


def _timestamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _parse_id(note_id: NoteId) -> uuid.UUID:
    if isinstance(note_id, uuid.UUID):
        return note_id
    return uuid.UUID(str(note_id))


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Note:
    """One stored note."""

    id: uuid.UUID
    title: str
    content: str
    category: Optional[str]
    published: Optional[bool]
    created_at: datetime
    updated_at: datetime

    def to_json(self) -> dict[str, Any]:
        """The note as a JSON-ready mapping with camel-case timestamp keys."""
        return {
            "id": str(self.id),
            "title": self.title,
            "content": self.content,
            "category": self.category,
            "published": self.published,
            "createdAt": _timestamp(self.created_at),
            "updatedAt": _timestamp(self.updated_at),
        }

    @classmethod
    def _from_row(cls, row: tuple) -> "Note":
        note_id, title, content, category, published, created, updated = row
        return cls(
            id=uuid.UUID(note_id),
            title=title,
            content=content,
            category=category,
            published=None if published is None else bool(published),
            created_at=datetime.fromisoformat(created),
            updated_at=datetime.fromisoformat(updated),
        )


class NoteNotFound(LookupError):
    """No note has the requested id."""

    def __init__(self, note_id: object) -> None:
        super().__init__(f"Note with ID: {note_id} not found")
        self.note_id = note_id


class DuplicateTitle(ValueError):
    """Another note already has this title."""

    def __init__(self, title: str) -> None:
        super().__init__("Note with that title already exists")
        self.title = title


class NoteStore:
    """A table of notes in an SQLite database, safe to share between threads."""

    def __init__(
        self,
        database: str = ":memory:",
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._clock = clock if clock is not None else _utc_now
        self._lock = threading.RLock()
        self._conn = sqlite3.connect(database, check_same_thread=False)
        try:
            with self._conn:
                self._conn.execute(_SCHEMA)
        except sqlite3.Error:
            self._conn.close()
            raise

    def __enter__(self) -> "NoteStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def list(self, page: Optional[int] = None, limit: Optional[int] = None) -> list[Note]:
        """A page of notes ordered by id; ``limit`` defaults to 10, ``page`` to 1."""
        limit = 10 if limit is None else limit
        page = 1 if page is None else page
        if page < 1:
            raise ValueError(f"page must be at least 1, got {page}")
        if limit < 0:
            raise ValueError(f"limit must not be negative, got {limit}")
        offset = (page - 1) * limit
        with self._lock:
            rows = self._conn.execute(
                f"SELECT {_COLUMNS} FROM notes ORDER BY id LIMIT ? OFFSET ?",
                (limit, offset),
            ).fetchall()
        return [Note._from_row(row) for row in rows]

    def create(self, title: str, content: str, category: Optional[str] = None) -> Note:
        """Store a new note; a missing category is stored as an empty string."""
        now = self._clock()
        note = Note(
            id=uuid.uuid4(),
            title=title,
            content=content,
            category=category if category is not None else "",
            published=False,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            try:
                with self._conn:
                    self._conn.execute(
                        f"INSERT INTO notes ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
                        (
                            str(note.id),
                            note.title,
                            note.content,
                            note.category,
                            int(bool(note.published)),
                            now.isoformat(),
                            now.isoformat(),
                        ),
                    )
            except sqlite3.IntegrityError as exc:
                raise DuplicateTitle(title) from exc
        return note

    def get(self, note_id: NoteId) -> Note:
        """The note with ``note_id``; raises :class:`NoteNotFound` if absent."""
        key = _parse_id(note_id)
        with self._lock:
            row = self._conn.execute(
                f"SELECT {_COLUMNS} FROM notes WHERE id = ?", (str(key),)
            ).fetchone()
        if row is None:
            raise NoteNotFound(key)
        return Note._from_row(row)

    def update(
        self,
        note_id: NoteId,
        title: Optional[str] = None,
        content: Optional[str] = None,
        category: Optional[str] = None,
        published: Optional[bool] = None,
    ) -> Note:
        """Change the given fields, keep the rest, and stamp the update time."""
        key = _parse_id(note_id)
        with self._lock:
            current = self.get(key)
            now = self._clock()
            new_published = current.published if published is None else published
            try:
                with self._conn:
                    self._conn.execute(
                        "UPDATE notes SET title = ?, content = ?, category = ?, "
                        "published = ?, updated_at = ? WHERE id = ?",
                        (
                            current.title if title is None else title,
                            current.content if content is None else content,
                            current.category if category is None else category,
                            None if new_published is None else int(new_published),
                            now.isoformat(),
                            str(key),
                        ),
                    )
            except sqlite3.IntegrityError as exc:
                raise DuplicateTitle(title or current.title) from exc
            return self.get(key)

    def delete(self, note_id: NoteId) -> None:
        """Remove a note; raises :class:`NoteNotFound` if there was none."""
        key = _parse_id(note_id)
        with self._lock, self._conn:
            cursor = self._conn.execute("DELETE FROM notes WHERE id = ?", (str(key),))
        if cursor.rowcount == 0:
            raise NoteNotFound(key)

    def close(self) -> None:
        """Close the database connection."""
        with self._lock:
            self._conn.close()