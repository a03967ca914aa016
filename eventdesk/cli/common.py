"""
Shared helpers for EventDesk CLI commands.

Loads configuration, opens sessions and prints controller state.
"""

import sys

import click

from eventdesk.src.collection_controller import CollectionController
from eventdesk.src.config import ClientConfig, ConfigError
from eventdesk.src.main import EventSession, setup_logging
from eventdesk.src.rendering import render_lookup, render_message, render_table

# Exit codes
EXIT_CONFIG_ERROR = 1
EXIT_OPERATION_FAILED = 2


def echo_error(text: str) -> None:
    click.echo(click.style("Error: ", fg="red", bold=True) + text)


def load_config() -> ClientConfig:
    """
    Load and validate client configuration, exiting on failure.

    Also configures logging at the configured level.
    """
    try:
        config = ClientConfig()
        config.validate()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(EXIT_CONFIG_ERROR)

    if not config.is_configured:
        echo_error("No server URL configured.")
        click.echo(
            "Run 'eventdesk config set-server URL' or set EVENTDESK_SERVER_URL."
        )
        sys.exit(EXIT_CONFIG_ERROR)

    setup_logging(config.log_level)
    return config


def open_session(config: ClientConfig) -> EventSession:
    """Create a session for the configured server."""
    return EventSession(config)


def echo_state(
    collection: CollectionController,
    table: bool = True,
    lookup: bool = False,
) -> None:
    """
    Print the status banner, then the lookup panel and/or events table.

    Exits with EXIT_OPERATION_FAILED if the message is an error.
    """
    banner = render_message(collection.message)
    if banner:
        click.echo(banner)

    if lookup:
        panel = render_lookup(collection.lookup_result)
        if panel:
            click.echo(panel)

    if table:
        click.echo()
        click.echo("All Events")
        click.echo(render_table(collection.events))

    if collection.message.is_error:
        sys.exit(EXIT_OPERATION_FAILED)
