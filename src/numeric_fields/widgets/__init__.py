"""Shared widget utilities."""

from __future__ import annotations

from textual.widgets import Input

from numeric_fields.models import AcceptedEdit


def apply_accepted_edit(widget: Input, accepted: AcceptedEdit) -> None:
    """Write an accepted edit back into *widget* and move the cursor.

    The widget's ``_applying_edit`` flag is raised while the value is
    replaced, so its value watcher does not filter the accepted text again.
    """
    widget._applying_edit = True
    try:
        widget.value = accepted.text
    finally:
        widget._applying_edit = False
    widget.cursor_position = accepted.cursor_position
