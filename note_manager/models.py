"""Pydantic models for the Note Manager."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


def _now() -> str:
    return datetime.now(UTC).isoformat()


class Note(BaseModel):
    """A single note.

    Instances are frozen: the store replaces a note with an updated copy
    rather than mutating it, so ``id`` can never change after creation.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Opaque UUID4 identifier")
    title: str = Field(..., description="Note title")
    content: str = Field("", description="Note content, may be empty")
    created_at: str = Field(
        default_factory=_now,
        description="ISO-8601 creation timestamp",
    )
    updated_at: str = Field(
        default_factory=_now,
        description="ISO-8601 last update timestamp",
    )


class NotFound(BaseModel):
    """Returned instead of a Note when an identifier matches nothing."""

    model_config = ConfigDict(frozen=True)

    note_id: str

    def __bool__(self) -> bool:
        return False


class FieldErrors(BaseModel):
    """Violation messages for the title and content fields."""

    title: str | None = None
    content: str | None = None

    @property
    def ok(self) -> bool:
        """True when neither field has a violation."""
        return self.title is None and self.content is None


class SubmitResult(BaseModel):
    """Outcome of an add / save / delete action."""

    note: Note | None = None
    errors: FieldErrors = Field(default_factory=FieldErrors)
    not_found: bool = False

    @property
    def ok(self) -> bool:
        return self.note is not None
