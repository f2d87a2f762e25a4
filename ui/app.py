"""Note Manager: Streamlit interface.

Run with:
    streamlit run ui/app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure the project root is on sys.path so `ui.*` imports resolve
# regardless of the working directory Streamlit uses.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

from note_manager.config import settings  # noqa: E402

logging.basicConfig(level=settings.log_level, format=settings.log_format)

st.set_page_config(
    page_title=settings.app_title,
    page_icon="📝",
    layout="centered",
)

from ui import state  # noqa: E402
from ui.components import add_note, edit_note, note_list  # noqa: E402

# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

route, note_id = state.current_route()

if route == state.ADD_NOTE:
    add_note.render()
elif route == state.EDIT_NOTE:
    edit_note.render(note_id)
else:
    note_list.render()
