"""
EventDesk CLI entry point.

Main command group for the EventDesk CLI.
"""

import click

from eventdesk.src import __version__


@click.group()
@click.version_option(version=__version__, prog_name="eventdesk")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """
    EventDesk - manage events on a remote EventAPI server.

    Use 'eventdesk COMMAND --help' for more information on a command.
    """
    ctx.ensure_object(dict)


# Import and register subcommands
from eventdesk.cli.events import add_cmd, delete_cmd, get_cmd, list_cmd, update_cmd  # noqa: E402
from eventdesk.cli.edit import edit_cmd  # noqa: E402
from eventdesk.cli.config import config  # noqa: E402

cli.add_command(list_cmd)
cli.add_command(get_cmd)
cli.add_command(add_cmd)
cli.add_command(update_cmd)
cli.add_command(delete_cmd)
cli.add_command(edit_cmd)
cli.add_command(config)


def main() -> None:
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
