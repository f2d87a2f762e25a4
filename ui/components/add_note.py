"""Add page: title and content fields validated as they change."""

from __future__ import annotations

import streamlit as st

from note_manager.models import FieldErrors
from ui import state


def _check() -> FieldErrors:
    return state.get_service().check_fields(
        st.session_state.get("add_title", ""),
        st.session_state.get("add_content", ""),
    )


def _on_title_change() -> None:
    st.session_state.add_title_error = _check().title


def _on_content_change() -> None:
    st.session_state.add_content_error = _check().content


def _submit() -> None:
    """Create the note if both fields pass, otherwise show both messages."""
    result = state.get_service().add_note(
        st.session_state.add_title, st.session_state.add_content
    )
    st.session_state.add_title_error = result.errors.title
    st.session_state.add_content_error = result.errors.content
    if result.ok:
        state.pop_back_stack()


def render() -> None:
    """Render the add-note form."""
    st.button("← Back", key="add_back", on_click=state.pop_back_stack)
    st.header("Add Note")

    st.text_input("Title", key="add_title", on_change=_on_title_change)
    if st.session_state.get("add_title_error"):
        st.error(st.session_state.add_title_error)

    st.text_area("Content", key="add_content", on_change=_on_content_change)
    if st.session_state.get("add_content_error"):
        st.error(st.session_state.add_content_error)

    st.button("Add Note", key="add_submit", on_click=_submit, type="primary")
