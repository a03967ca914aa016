"""
Event CLI commands.

One-shot commands against the EventAPI:
- list: Show all events
- get: Look up one event by id
- add: Create an event
- update: Edit an existing event
- delete: Delete an event

Each command opens a session (which loads the list, as the form view
does on open), runs one controller operation and prints the result.
"""

import asyncio
from typing import Awaitable, Callable, Dict, Optional

import click

from eventdesk.cli.common import echo_state, load_config, open_session
from eventdesk.src.collection_controller import CollectionController
from eventdesk.src.config import ClientConfig
from eventdesk.src.main import EventSession

SessionAction = Callable[[EventSession], Awaitable[None]]

EDITABLE_FIELDS = ("name", "date", "location", "organizer")


async def _run_async(config: ClientConfig, action: Optional[SessionAction] = None) -> CollectionController:
    """Async helper to run one action inside a session."""
    async with open_session(config) as session:
        if action is not None:
            await action(session)
        return session.collection


def _field_options(default: Optional[str]):
    """Add --name/--date/--location/--organizer options to a command."""

    def decorator(f):
        for field in reversed(EDITABLE_FIELDS):
            f = click.option(
                f"--{field}",
                default=default,
                help=f"Event {field}.",
            )(f)
        return f

    return decorator


# ============================================================================
# list
# ============================================================================


@click.command("list")
def list_cmd() -> None:
    """List all events.

    \b
    Examples:
        eventdesk list
    """
    config = load_config()
    collection = asyncio.run(_run_async(config))
    echo_state(collection)


# ============================================================================
# get
# ============================================================================


@click.command("get")
@click.argument("event_id", default="")
def get_cmd(event_id: str) -> None:
    """Look up a single event by EVENT_ID.

    \b
    Examples:
        eventdesk get 42
    """
    config = load_config()

    async def action(session: EventSession) -> None:
        await session.collection.fetch_by_id(event_id)

    collection = asyncio.run(_run_async(config, action))
    echo_state(collection, table=False, lookup=True)


# ============================================================================
# add
# ============================================================================


@click.command("add")
@click.option("--id", "event_id", default="", help="Event id (client-supplied).")
@_field_options(default="")
def add_cmd(event_id: str, **fields: str) -> None:
    """Create an event.

    Every field is required; the first missing one is reported and
    nothing is sent.

    \b
    Examples:
        eventdesk add --id 1 --name Launch --date 2025-01-01 \\
            --location HQ --organizer Alice
    """
    config = load_config()

    async def action(session: EventSession) -> None:
        session.form.set_field("id", event_id)
        for name, value in fields.items():
            session.form.set_field(name, value)
        await session.collection.submit()

    collection = asyncio.run(_run_async(config, action))
    echo_state(collection)


# ============================================================================
# update
# ============================================================================


@click.command("update")
@click.argument("event_id")
@_field_options(default=None)
def update_cmd(event_id: str, **fields: Optional[str]) -> None:
    """Update the event EVENT_ID.

    The record is taken from the freshly loaded list and loaded into the
    form; given options replace its fields before submitting.

    \b
    Examples:
        eventdesk update 1 --name "Launch v2"
    """
    config = load_config()
    changes: Dict[str, str] = {k: v for k, v in fields.items() if v is not None}

    async def action(session: EventSession) -> None:
        collection = session.collection
        if not collection.select_by_id(event_id):
            return
        for name, value in changes.items():
            session.form.set_field(name, value)
        await collection.submit()

    collection = asyncio.run(_run_async(config, action))
    echo_state(collection)


# ============================================================================
# delete
# ============================================================================


@click.command("delete")
@click.argument("event_id")
def delete_cmd(event_id: str) -> None:
    """Delete the event EVENT_ID. There is no confirmation.

    \b
    Examples:
        eventdesk delete 1
    """
    config = load_config()

    async def action(session: EventSession) -> None:
        await session.collection.remove(event_id)

    collection = asyncio.run(_run_async(config, action))
    echo_state(collection)
