"""Submit actions used by the screens.

Every mutation is gated on both field validators passing. Validation
failures and vanished notes come back as values on the SubmitResult;
nothing here raises for them.
"""

import logging

from .models import FieldErrors, Note, NotFound, SubmitResult
from .store import NoteStore
from .validation import validate_note

logger = logging.getLogger("note_manager.service")


class NoteService:
    """Validates input and routes mutations to a single NoteStore."""

    def __init__(self, store: NoteStore | None = None) -> None:
        self._store = store if store is not None else NoteStore()

    @property
    def store(self) -> NoteStore:
        return self._store

    def check_fields(self, title: str, content: str) -> FieldErrors:
        """Validate the current field values without touching the store."""
        return validate_note(title, content)

    def add_note(self, title: str, content: str) -> SubmitResult:
        errors = validate_note(title, content)
        if not errors.ok:
            logger.debug("Add rejected: %s", errors.model_dump(exclude_none=True))
            return SubmitResult(errors=errors)
        return SubmitResult(note=self._store.create(title, content))

    def save_changes(self, note_id: str, title: str, content: str) -> SubmitResult:
        errors = validate_note(title, content)
        if not errors.ok:
            logger.debug(
                "Save rejected for %s: %s",
                note_id,
                errors.model_dump(exclude_none=True),
            )
            return SubmitResult(errors=errors)

        result = self._store.update(note_id, title, content)
        if isinstance(result, NotFound):
            return SubmitResult(not_found=True)
        return SubmitResult(note=result)

    def remove_note(self, note_id: str) -> SubmitResult:
        result = self._store.delete(note_id)
        if isinstance(result, NotFound):
            return SubmitResult(not_found=True)
        return SubmitResult(note=result)

    def open_note(self, note_id: str) -> Note | NotFound:
        """Resolve the note an edit view was opened for."""
        return self._store.find_by_id(note_id)

    def list_notes(self) -> list[Note]:
        return self._store.get_all()
