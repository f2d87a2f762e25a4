"""Listing page: every note's title, newest last, plus the add button."""

from __future__ import annotations

import streamlit as st

from note_manager.config import settings
from ui import state


def render() -> None:
    """Render the note listing."""
    st.title(settings.app_title)

    notes = state.get_service().list_notes()
    if not notes:
        st.caption("No notes yet. Add one to get started.")

    for note in notes:
        st.button(
            note.title,
            key=f"note_{note.id}",
            on_click=state.open_edit,
            args=(note.id,),
            use_container_width=True,
        )

    st.divider()
    st.button("➕ Add Note", key="open_add", on_click=state.open_add, type="primary")
