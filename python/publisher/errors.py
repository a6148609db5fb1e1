"""
Publisher errors.

Every store failure is raised synchronously as a subclass of PublishingError.
"""

from pathlib import Path
from typing import Optional, Union


class PublishingError(Exception):
    """Base error for the object store."""


class NotFoundError(PublishingError):
    """The store directory (enumerate) or a stored file (delete) is absent."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Not found: {self.path}")


class MissingEntryError(PublishingError):
    """A listed entry vanished before it could be read."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Entry disappeared before it could be read: {self.path}")


class DecodeError(PublishingError):
    """Stored bytes could not be decoded as the model type."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Could not decode stored value: {self.path}")


class DuplicateKeyError(PublishingError):
    """A value with the same digest is already published."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Duplicate key: {key}")


class InvalidKeyError(PublishingError):
    """A digest cannot be used as a file name."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Digest is not a valid file name: {key!r}")


class EncodeError(PublishingError):
    """A value could not be serialized."""


class StoreIOError(PublishingError):
    """Any other file-system failure. The OSError is chained as __cause__."""

    def __init__(self, cause: OSError, path: Optional[Union[str, Path]] = None):
        self.cause = cause
        self.path = Path(path) if path is not None else None
        where = f" ({self.path})" if self.path is not None else ""
        super().__init__(f"I/O failure{where}: {cause}")


class ConfigError(ValueError):
    """Invalid or unresolvable configuration."""


class ResourceError(Exception):
    """A bundled resource is missing or cannot be decoded."""


class PreferenceError(Exception):
    """The preference file cannot be read or written."""
