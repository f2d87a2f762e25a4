"""Field validation for note titles and content.

Each check returns the violation message for the field, or ``None`` when the
value is acceptable. Lengths are counted in code points and both bounds are
inclusive.
"""

from .models import FieldErrors

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 50
CONTENT_MAX_LENGTH = 120

TITLE_TOO_SHORT = f"Title must be at least {TITLE_MIN_LENGTH} characters long"
TITLE_TOO_LONG = f"Title must be at most {TITLE_MAX_LENGTH} characters long"
CONTENT_TOO_LONG = f"Text must be at most {CONTENT_MAX_LENGTH} characters long"


def validate_title(title: str) -> str | None:
    """Check a note title against the length limits."""
    if len(title) < TITLE_MIN_LENGTH:
        return TITLE_TOO_SHORT
    if len(title) > TITLE_MAX_LENGTH:
        return TITLE_TOO_LONG
    return None


def validate_content(content: str) -> str | None:
    """Check note content against the length limit. Empty content is fine."""
    if len(content) > CONTENT_MAX_LENGTH:
        return CONTENT_TOO_LONG
    return None


def validate_note(title: str, content: str) -> FieldErrors:
    """Run both field checks and collect their messages."""
    return FieldErrors(title=validate_title(title), content=validate_content(content))
