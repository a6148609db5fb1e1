from publisher.config import PublisherConfig, configure_logging
from publisher.directories import user_documents_directory, user_library_directory
from publisher.errors import (
    ConfigError,
    DecodeError,
    DuplicateKeyError,
    EncodeError,
    InvalidKeyError,
    MissingEntryError,
    NotFoundError,
    PreferenceError,
    PublishingError,
    ResourceError,
    StoreIOError,
)
from publisher.helpers import excluding_duplicates, with_letter_spacing
from publisher.objects import Publisher, content_digest
from publisher.preferences import Preference, PreferenceStore
from publisher.resources import load_resource, read_resource

__version__ = "0.1.0"

__all__ = [
    # Object store
    "Publisher",
    "content_digest",
    # Errors
    "PublishingError",
    "NotFoundError", "MissingEntryError", "DecodeError", "DuplicateKeyError",
    "InvalidKeyError", "EncodeError", "StoreIOError",
    "ConfigError", "ResourceError", "PreferenceError",
    # Directories and configuration
    "user_library_directory", "user_documents_directory",
    "PublisherConfig", "configure_logging",
    "load_resource", "read_resource",
    "Preference", "PreferenceStore",
    # Helpers
    "with_letter_spacing", "excluding_duplicates",
]
