"""
Terminal rendering of controller state.

Renders the status banner, the form, the lookup panel and the events
table as plain strings. Columns follow EVENT_FIELDS.
"""

import json
from typing import List, Optional, Sequence

import click

from eventdesk.src.collection_controller import StatusMessage
from eventdesk.src.form_controller import FormController
from eventdesk.src.models import EVENT_FIELDS, Event

NO_EVENTS = "No events found."
ACTIONS_HEADER = "actions"
ACTIONS_CELL = "edit | delete"


def render_message(message: StatusMessage) -> Optional[str]:
    """Styled banner for the message, or None if there is none."""
    if not message:
        return None
    color = "red" if message.is_error else "green"
    return click.style(message.text, fg=color, bold=message.is_error)


def render_table(events: Sequence[Event], actions: bool = False) -> str:
    """
    Render events as an aligned text table.

    Args:
        events: Events to render, in order
        actions: Append the row-actions column (interactive mode)
    """
    if not events:
        return NO_EVENTS

    headers: List[str] = list(EVENT_FIELDS)
    rows: List[List[str]] = [event.row() for event in events]
    if actions:
        headers.append(ACTIONS_HEADER)
        rows = [row + [ACTIONS_CELL] for row in rows]

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def fmt(cells: Sequence[str]) -> str:
        return "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells)).rstrip()

    lines = [fmt(headers), fmt(["-" * w for w in widths])]
    lines.extend(fmt(row) for row in rows)
    return "\n".join(lines)


def render_lookup(event: Optional[Event]) -> Optional[str]:
    """Pretty JSON of a looked-up event, including server-side extras."""
    if event is None:
        return None
    return "Event Found:\n" + json.dumps(event.model_dump(), indent=2)


def render_form(form: FormController) -> str:
    """Form title and current draft values."""
    lines = [form.title]
    for field in EVENT_FIELDS:
        lines.append(f"  {field:<10} {getattr(form.draft, field)}")
    return "\n".join(lines)
