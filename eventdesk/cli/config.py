"""
Config CLI commands.

Handles client configuration, particularly the EventAPI server URL.
"""

import click

from eventdesk.src.config import ClientConfig, ConfigError, check_server_url


@click.group()
@click.pass_context
def config(ctx: click.Context) -> None:
    """
    Manage client configuration.

    The server URL is read once when a command starts; changes apply to
    the next command.
    """
    ctx.ensure_object(dict)


@config.command("set-server")
@click.argument("url")
@click.pass_context
def set_server(ctx: click.Context, url: str) -> None:
    """
    Set the EventAPI server URL.

    Example:

        eventdesk config set-server http://localhost:8080
    """
    try:
        check_server_url(url)
        client_config = ClientConfig()
        client_config.server_url = url
    except ConfigError as e:
        click.echo(click.style("Error: ", fg="red", bold=True) + str(e))
        ctx.exit(1)

    client_config.save()
    click.echo(click.style("Server URL updated: ", fg="green") + url)
    click.echo(f"  Saved to: {client_config.config_path}")
    if client_config.server_url != url:
        click.echo(
            click.style("Note: ", fg="cyan")
            + "EVENTDESK_SERVER_URL is set and overrides the saved URL."
        )


@config.command("show")
@click.pass_context
def show(ctx: click.Context) -> None:
    """
    Display the effective configuration.

    Example:

        eventdesk config show
    """
    try:
        client_config = ClientConfig()
    except ConfigError as e:
        click.echo(click.style("Error: ", fg="red", bold=True) + str(e))
        ctx.exit(1)

    click.echo(f"Config file: {client_config.config_path}")
    click.echo(f"  server_url:      {client_config.server_url or '(not set)'}")
    click.echo(f"  timeout_seconds: {client_config.timeout_seconds}")
    click.echo(f"  log_level:       {client_config.log_level}")
