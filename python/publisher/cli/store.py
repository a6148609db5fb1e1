"""
Publisher store commands - inspect and edit a store directory.

Usage:
    publisher list ~/Library/notes --model notes.models:Note
    publisher put ~/Library/notes '{"title": "groceries"}'
    publisher delete ~/Library/notes '{"title": "groceries"}'
"""

import logging
import sys

import click
from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from ..errors import PublishingError
from ..objects import Publisher
from .loader import load_model

logger = logging.getLogger(__name__)

model_option = click.option(
    "--model", default=None, envvar="PUBLISHER_MODEL",
    help="Model type as module:attribute (default: plain JSON)",
)


def _open(directory, model):
    try:
        model_type = load_model(model)
    except (ValueError, ImportError, AttributeError) as e:
        raise click.BadParameter(str(e), param_hint="--model")
    logger.debug("Opening store at %s with model %r", directory, model_type)
    try:
        return Publisher(directory, model_type)
    except PydanticSchemaGenerationError as e:
        raise click.BadParameter(f"{model} is not a usable model type: {e}", param_hint="--model")


def _parse(publisher, value):
    try:
        return TypeAdapter(publisher.model_type).validate_json(value)
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="JSON")


def _fail(e: PublishingError):
    click.echo(f"[Publisher] Error: {e}", err=True)
    sys.exit(1)


@click.command()
@click.argument("directory", type=click.Path(file_okay=False))
@model_option
def list_command(directory, model):
    """List every value in DIRECTORY, one '<key> <json>' line each."""
    publisher = _open(directory, model)
    adapter = TypeAdapter(publisher.model_type)
    try:
        values = publisher.enumerate()
    except PublishingError as e:
        _fail(e)
    for value in values:
        click.echo(f"{publisher.key(value)} {adapter.dump_json(value).decode('utf-8')}")
    logger.debug("Listed %d values", len(values))


@click.command()
@click.argument("directory", type=click.Path(file_okay=False))
@click.argument("value")
@model_option
def put_command(directory, value, model):
    """Publish VALUE (a JSON document) into DIRECTORY."""
    publisher = _open(directory, model)
    obj = _parse(publisher, value)
    try:
        publisher.put(obj)
    except PublishingError as e:
        _fail(e)
    click.echo(publisher.key(obj))


@click.command()
@click.argument("directory", type=click.Path(file_okay=False))
@click.argument("value")
@model_option
def delete_command(directory, value, model):
    """Delete the stored copy of VALUE (a JSON document) from DIRECTORY."""
    publisher = _open(directory, model)
    obj = _parse(publisher, value)
    try:
        publisher.delete(obj)
    except PublishingError as e:
        _fail(e)
    click.echo(f"Deleted {publisher.key(obj)}")
