"""
Publisher where command - Print a well-known store directory.

Usage:
    publisher where library notes
    publisher where documents notes
"""

import sys

import click

from ..directories import user_documents_directory, user_library_directory


@click.command()
@click.argument("location", type=click.Choice(["library", "documents"]))
@click.argument("name")
def where_command(location, name):
    """Print the well-known directory for NAME under LOCATION."""
    if location == "documents":
        path = user_documents_directory(name)
    else:
        path = user_library_directory(name)
    if path is None:
        click.echo(f"[Publisher] Error: no {location} directory on this platform", err=True)
        sys.exit(1)
    click.echo(str(path))
