"""
Interactive edit session.

Keeps one session open and drives the form and collection controllers
from a prompt, the way the form view is used: select a row, change
fields, submit or cancel.
"""

import asyncio
import shlex
from typing import List

import click

from eventdesk.cli.common import load_config, open_session
from eventdesk.src.config import ClientConfig
from eventdesk.src.main import EventSession
from eventdesk.src.rendering import render_form, render_lookup, render_message, render_table

HELP_TEXT = """Commands:
  list                 Reload and show all events
  get ID               Look up one event
  select ID            Load a listed event into the form for editing
  set FIELD VALUE      Change a form field
  show                 Show the form
  submit               Add (or update, when editing) the form's event
  cancel               Leave edit mode and clear the form
  delete ID            Delete an event
  help                 Show this help
  quit                 Leave the session"""


def _show_message(session: EventSession) -> None:
    banner = render_message(session.collection.message)
    if banner:
        click.echo(banner)


def _show_table(session: EventSession) -> None:
    click.echo(render_table(session.collection.events, actions=True))


async def _dispatch(session: EventSession, args: List[str]) -> bool:
    """
    Execute one prompt command.

    Returns:
        False when the session should end
    """
    collection = session.collection
    command, rest = args[0].lower(), args[1:]

    if command in ("quit", "exit"):
        return False
    elif command == "help":
        click.echo(HELP_TEXT)
    elif command == "list":
        await collection.refresh_all()
        _show_message(session)
        _show_table(session)
    elif command == "get":
        await collection.fetch_by_id(rest[0] if rest else "")
        _show_message(session)
        panel = render_lookup(collection.lookup_result)
        if panel and not collection.message.is_error:
            click.echo(panel)
    elif command == "select":
        if not rest:
            click.echo("Usage: select ID")
        else:
            selected = collection.select_by_id(rest[0])
            _show_message(session)
            if selected:
                click.echo(render_form(session.form))
    elif command == "set":
        if len(rest) < 2:
            click.echo("Usage: set FIELD VALUE")
        else:
            try:
                session.form.set_field(rest[0], " ".join(rest[1:]))
            except KeyError:
                click.echo(f"Unknown field: {rest[0]}")
    elif command == "show":
        click.echo(render_form(session.form))
    elif command == "submit":
        await collection.submit()
        _show_message(session)
        _show_table(session)
    elif command == "cancel":
        collection.cancel_edit()
        click.echo(render_form(session.form))
    elif command == "delete":
        if not rest:
            click.echo("Usage: delete ID")
        else:
            await collection.remove(rest[0])
            _show_message(session)
            _show_table(session)
    else:
        click.echo(f"Unknown command: {command}. Type 'help' for commands.")
    return True


async def _interactive_async(config: ClientConfig) -> None:
    """Async helper running the prompt loop inside one session."""
    async with open_session(config) as session:
        click.echo(click.style("EVENT MANAGEMENT", bold=True))
        _show_message(session)
        _show_table(session)
        click.echo("Type 'help' for commands.")

        while True:
            prompt = "edit" if session.form.is_editing else "add"
            try:
                line = click.prompt(prompt, default="", show_default=False)
            except click.Abort:
                break
            try:
                args = shlex.split(line)
            except ValueError as e:
                click.echo(f"Could not parse command: {e}")
                continue
            if not args:
                continue
            if not await _dispatch(session, args):
                break


@click.command("edit")
def edit_cmd() -> None:
    """Open an interactive session to browse and edit events.

    \b
    Examples:
        eventdesk edit
    """
    config = load_config()
    asyncio.run(_interactive_async(config))
