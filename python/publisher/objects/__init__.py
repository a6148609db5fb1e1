"""
Publisher Object System

Values are stored as JSON files in a directory, one file per value,
named by a digest of the value's content.
"""

from .digest import canonical_json, content_digest
from .store import Publisher

__all__ = [
    "Publisher",
    "canonical_json",
    "content_digest",
]
