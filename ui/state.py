"""Session navigation state and the process-wide note service.

The back stack lives in ``st.session_state`` as a list of ``(route, note_id)``
pairs. Every browser session shares the one NoteService returned by
:func:`get_service`.
"""

from __future__ import annotations

import logging

import streamlit as st

from note_manager.models import NotFound
from note_manager.service import NoteService

logger = logging.getLogger("note_manager.ui")

NOTES = "Notes"
ADD_NOTE = "AddNote"
EDIT_NOTE = "EditNoteScreen"

_STACK_KEY = "route_stack"


@st.cache_resource
def get_service() -> NoteService:
    """Return the single NoteService for this process."""
    logger.info("Creating note store")
    return NoteService()


def _stack() -> list[tuple[str, str | None]]:
    if _STACK_KEY not in st.session_state:
        st.session_state[_STACK_KEY] = [(NOTES, None)]
    return st.session_state[_STACK_KEY]


def current_route() -> tuple[str, str | None]:
    """Return the ``(route, note_id)`` at the top of the back stack."""
    return _stack()[-1]


def navigate(route: str, note_id: str | None = None) -> None:
    _stack().append((route, note_id))


def pop_back_stack() -> None:
    """Go back one screen; the listing is never popped."""
    stack = _stack()
    if len(stack) > 1:
        stack.pop()


def return_to_listing() -> None:
    del _stack()[1:]


def open_add() -> None:
    """Start the add screen with empty fields."""
    st.session_state.add_title = ""
    st.session_state.add_content = ""
    st.session_state.add_title_error = None
    st.session_state.add_content_error = None
    navigate(ADD_NOTE)


def open_edit(note_id: str) -> None:
    """Stage the note's fields for editing and show the edit screen."""
    note = get_service().open_note(note_id)
    if isinstance(note, NotFound):
        logger.info("Note %s vanished before it could be opened", note_id)
        return
    st.session_state.edit_title = note.title
    st.session_state.edit_content = note.content
    st.session_state.edit_title_error = None
    st.session_state.edit_content_error = None
    navigate(EDIT_NOTE, note.id)
