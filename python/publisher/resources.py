"""
Typed access to JSON resources bundled inside a Python package.
"""

import logging
from importlib import resources
from typing import Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import ResourceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def read_resource(package: str, resource: str) -> bytes:
    """Read the raw bytes of a resource shipped with package."""
    try:
        return resources.files(package).joinpath(resource).read_bytes()
    except (ModuleNotFoundError, FileNotFoundError, IsADirectoryError) as e:
        raise ResourceError(f"Resource not found: {package}/{resource}") from e


def load_resource(package: str, resource: str, model_type: Type[T]) -> T:
    """
    Decode a bundled JSON resource as model_type.

    Example:
        defaults = load_resource("myapp.data", "defaults.json", Defaults)
    """
    data = read_resource(package, resource)
    logger.debug("Loaded resource %s/%s (%d bytes)", package, resource, len(data))
    try:
        return TypeAdapter(model_type).validate_json(data)
    except ValidationError as e:
        raise ResourceError(f"Invalid resource {package}/{resource}: {e}") from e
