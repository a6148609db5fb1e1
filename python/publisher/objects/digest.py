"""
Content digests used as storage keys.
"""

import hashlib
import json
from typing import Any

from pydantic import TypeAdapter

from ..errors import InvalidKeyError


def canonical_json(adapter: TypeAdapter, value: Any) -> bytes:
    """Render value as JSON with sorted keys and no insignificant whitespace."""
    data = adapter.dump_python(value, mode="json")
    return json.dumps(
        data, sort_keys=True, separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")


def content_digest(adapter: TypeAdapter, value: Any) -> str:
    """SHA-256 hex digest of the canonical JSON form of value."""
    return hashlib.sha256(canonical_json(adapter, value)).hexdigest()


def validate_key(key: str) -> str:
    """Check that key can be used as a single file name inside the store."""
    if (
        not key
        or key in (".", "..")
        or key.startswith(".")
        or "/" in key
        or "\\" in key
        or "\x00" in key
    ):
        raise InvalidKeyError(key)
    return key
