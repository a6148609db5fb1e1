"""
Publisher configuration.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Type

from .directories import user_documents_directory, user_library_directory
from .errors import ConfigError
from .objects.store import DigestFunc, Model, Publisher

LOCATIONS = ("library", "documents")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PublisherConfig:
    """Where a Publisher keeps its files."""

    # Explicit store directory; wins over location/name when set
    directory: str = ""

    # Well-known base location ("library" or "documents") and the segment under it
    location: str = "library"
    name: str = "publisher"

    log_level: str = "WARNING"

    @classmethod
    def from_yaml(cls, path: str) -> "PublisherConfig":
        """Load configuration from a YAML file."""
        import yaml
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}")
        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e

    @classmethod
    def from_env(cls, prefix: str = "PUBLISHER_") -> "PublisherConfig":
        """Load configuration from environment variables, e.g. PUBLISHER_DIR."""
        defaults = cls()
        return cls(
            directory=os.environ.get(f"{prefix}DIR", defaults.directory).strip(),
            location=os.environ.get(f"{prefix}LOCATION", defaults.location).strip().lower(),
            name=os.environ.get(f"{prefix}NAME", defaults.name).strip(),
            log_level=os.environ.get(f"{prefix}LOG_LEVEL", defaults.log_level).strip().upper(),
        )

    def validate(self) -> None:
        """Validate configuration."""
        if not self.directory:
            if self.location not in LOCATIONS:
                raise ConfigError(f"location must be one of {', '.join(LOCATIONS)}")
            if not self.name or "/" in self.name or "\\" in self.name:
                raise ConfigError("name must be a single path segment")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

    def resolve_directory(self) -> Path:
        """Return the store directory this configuration points at."""
        self.validate()
        if self.directory:
            return Path(self.directory).expanduser().absolute()

        if self.location == "documents":
            path = user_documents_directory(self.name)
        else:
            path = user_library_directory(self.name)
        if path is None:
            raise ConfigError(f"No {self.location} directory is available on this platform")
        return path

    def create_publisher(
        self, model_type: Type[Model], digest: Optional[DigestFunc] = None
    ) -> Publisher[Model]:
        """Build a Publisher bound to the resolved directory."""
        return Publisher(self.resolve_directory(), model_type, digest=digest)


def configure_logging(level: str = "WARNING") -> None:
    """Set up root logging for applications and the CLI."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
