"""Edit page: change or delete one note.

If the note disappeared (deleted from another session) the page shows
nothing and returns to the listing.
"""

from __future__ import annotations

import logging

import streamlit as st

from note_manager.models import FieldErrors, NotFound
from ui import state

logger = logging.getLogger("note_manager.ui")


def _check() -> FieldErrors:
    return state.get_service().check_fields(
        st.session_state.get("edit_title", ""),
        st.session_state.get("edit_content", ""),
    )


def _on_title_change() -> None:
    st.session_state.edit_title_error = _check().title


def _on_content_change() -> None:
    st.session_state.edit_content_error = _check().content


def _save(note_id: str) -> None:
    result = state.get_service().save_changes(
        note_id, st.session_state.edit_title, st.session_state.edit_content
    )
    st.session_state.edit_title_error = result.errors.title
    st.session_state.edit_content_error = result.errors.content
    if result.ok or result.not_found:
        state.pop_back_stack()


def _delete(note_id: str) -> None:
    state.get_service().remove_note(note_id)
    state.pop_back_stack()


def render(note_id: str | None) -> None:
    """Render the edit form for ``note_id``."""
    note = state.get_service().open_note(note_id or "")
    if isinstance(note, NotFound):
        logger.info("Edit view opened for missing note %s", note.note_id)
        state.return_to_listing()
        st.rerun()

    st.button("← Back", key="edit_back", on_click=state.pop_back_stack)
    st.header("Edit Note")

    st.text_input("Title", key="edit_title", on_change=_on_title_change)
    if st.session_state.get("edit_title_error"):
        st.error(st.session_state.edit_title_error)

    st.text_area("Content", key="edit_content", on_change=_on_content_change)
    if st.session_state.get("edit_content_error"):
        st.error(st.session_state.edit_content_error)

    save_col, delete_col = st.columns(2)
    with save_col:
        st.button(
            "Save Changes",
            key="edit_save",
            on_click=_save,
            args=(note.id,),
            type="primary",
        )
    with delete_col:
        st.button("🗑️ Delete", key="edit_delete", on_click=_delete, args=(note.id,))
