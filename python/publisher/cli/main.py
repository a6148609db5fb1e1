"""
Publisher CLI - Command line interface for Publisher stores.

Usage:
    publisher list ~/Library/notes
    publisher put ~/Library/notes '{"title": "a"}'
    publisher where documents notes
"""

import click

from ..config import configure_logging
from .store import delete_command, list_command, put_command
from .where import where_command


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, verbose):
    """publisher - content-addressed JSON object stores."""
    configure_logging("DEBUG" if verbose else "WARNING")
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Add subcommands
cli.add_command(list_command, name="list")
cli.add_command(put_command, name="put")
cli.add_command(delete_command, name="delete")
cli.add_command(where_command, name="where")


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
