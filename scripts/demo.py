#!/usr/bin/env python3
"""
Note Manager Walkthrough

Runs the add / edit / delete flow against an in-memory note service and
prints what each screen would show, including the validation messages a
user sees for fields that are too short or too long.
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from note_manager.config import settings  # noqa: E402
from note_manager.models import Note  # noqa: E402
from note_manager.service import NoteService  # noqa: E402

# ---------------------------------------------------------------------------
# ANSI colours
# ---------------------------------------------------------------------------
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"
CYAN = "\033[96m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"


def banner(text: str) -> None:
    """Print a bold cyan banner."""
    width = 60
    print()
    print(f"{CYAN}{BOLD}{'=' * width}{RESET}")
    print(f"{CYAN}{BOLD}  {text}{RESET}")
    print(f"{CYAN}{BOLD}{'=' * width}{RESET}")
    print()


def step(number: int, title: str) -> None:
    """Print a step header."""
    print(f"\n{YELLOW}{BOLD}--- Step {number}: {title} ---{RESET}\n")


def info(msg: str) -> None:
    print(f"  {DIM}{msg}{RESET}")


def success(msg: str) -> None:
    print(f"  {GREEN}{msg}{RESET}")


def error(msg: str) -> None:
    print(f"  {RED}{msg}{RESET}")


def show_listing(notes: list[Note]) -> None:
    """Print the listing screen."""
    info(f"[{settings.app_title}] {len(notes)} note(s)")
    for note in notes:
        print(f"    • {note.title}  {DIM}({note.id}){RESET}")


def main() -> None:
    logging.basicConfig(level=settings.log_level, format=settings.log_format)
    service = NoteService()

    banner("Note Manager Walkthrough")

    step(1, "Rejected submit")
    result = service.add_note("ab", "x" * 121)
    for message in (result.errors.title, result.errors.content):
        if message:
            error(message)
    show_listing(service.list_notes())

    step(2, "Add a note")
    result = service.add_note("My Title", "Hello")
    note = result.note
    success(f"Added '{note.title}'")
    show_listing(service.list_notes())

    step(3, "Edit it")
    result = service.save_changes(note.id, "Hi", "")
    if result.errors.title:
        error(result.errors.title)
    result = service.save_changes(note.id, "Hi!", "")
    success(f"Saved '{result.note.title}'")
    show_listing(service.list_notes())

    step(4, "Delete it")
    service.remove_note(note.id)
    success("Deleted")
    show_listing(service.list_notes())

    step(5, "Open the deleted note")
    result = service.save_changes(note.id, "Stale edit", "")
    info(f"not_found={result.not_found}; back to the listing")

    banner("Done")


if __name__ == "__main__":
    main()
