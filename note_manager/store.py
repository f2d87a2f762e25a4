"""In-memory note collection for the Note Manager."""

import logging
import threading
from datetime import UTC, datetime
from uuid import uuid4

from .models import Note, NotFound

logger = logging.getLogger("note_manager.store")


class NoteStore:
    """Owns the ordered collection of notes for the lifetime of the process.

    Insertion order is display order. Every operation holds the store lock,
    so concurrent script runs see a consistent collection.
    """

    def __init__(self) -> None:
        self._notes: list[Note] = []
        self._lock = threading.RLock()

    def _index_of(self, note_id: str) -> int | None:
        for i, note in enumerate(self._notes):
            if note.id == note_id:
                return i
        return None

    def create(self, title: str, content: str) -> Note:
        """Append a new note with a freshly generated id."""
        with self._lock:
            note = Note(id=str(uuid4()), title=title, content=content)
            self._notes.append(note)
        logger.info("Created note %s: '%s'", note.id, note.title)
        return note

    def find_by_id(self, note_id: str) -> Note | NotFound:
        """Return the note with ``note_id``, or NotFound."""
        with self._lock:
            index = self._index_of(note_id)
            if index is None:
                return NotFound(note_id=note_id)
            return self._notes[index]

    def update(self, note_id: str, title: str, content: str) -> Note | NotFound:
        """Overwrite title and content, keeping id and position."""
        with self._lock:
            index = self._index_of(note_id)
            if index is None:
                logger.info("Update skipped, note %s not found", note_id)
                return NotFound(note_id=note_id)
            note = self._notes[index].model_copy(
                update={
                    "title": title,
                    "content": content,
                    "updated_at": datetime.now(UTC).isoformat(),
                }
            )
            self._notes[index] = note
        logger.info("Updated note %s: '%s'", note.id, note.title)
        return note

    def delete(self, note_id: str) -> Note | NotFound:
        """Remove the note with ``note_id`` and return it."""
        with self._lock:
            index = self._index_of(note_id)
            if index is None:
                logger.info("Delete skipped, note %s not found", note_id)
                return NotFound(note_id=note_id)
            note = self._notes.pop(index)
        logger.info("Deleted note %s: '%s'", note.id, note.title)
        return note

    def get_all(self) -> list[Note]:
        """Return every stored note in display order."""
        with self._lock:
            return list(self._notes)

    @property
    def count(self) -> int:
        """Number of stored notes."""
        with self._lock:
            return len(self._notes)

    def __len__(self) -> int:
        return self.count

    def __contains__(self, note_id: object) -> bool:
        with self._lock:
            return isinstance(note_id, str) and self._index_of(note_id) is not None
