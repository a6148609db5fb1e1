"""
Persistent user preferences.

PreferenceStore keeps key-value pairs in one JSON file. Preference is a
descriptor that reads a value from a store (falling back to a default)
and writes assignments straight back to it.

Usage:
    class Settings:
        theme = Preference("theme", default="light")
        font_size = Preference("font_size", default=14)

        def __init__(self, preferences: PreferenceStore):
            self.preferences = preferences

    settings = Settings(PreferenceStore(user_library_directory("app") / "prefs.json"))
    settings.font_size = 16
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import TypeAdapter, ValidationError

from .errors import PreferenceError

logger = logging.getLogger(__name__)

_MISSING = object()


class PreferenceStore:
    """JSON-file backed key-value store."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()
        self._lock = threading.RLock()

    def _read(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            raise PreferenceError(f"Could not read preferences {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PreferenceError(f"Preferences file is not a JSON object: {self.path}")
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        try:
            text = json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True)
        except (TypeError, ValueError) as e:
            raise PreferenceError(f"Preferences are not JSON serializable: {e}") from e

        tmp = self.path.with_suffix(".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(text)
            tmp.replace(self.path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise PreferenceError(f"Could not write preferences {self.path}: {e}") from e

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def remove(self, key: str) -> bool:
        """Remove a key. Returns False if it was not set."""
        with self._lock:
            data = self._read()
            if key not in data:
                return False
            del data[key]
            self._write(data)
            return True

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._read()


class Preference:
    """
    Descriptor for a value persisted in a PreferenceStore.

    Stored values are validated against the type of the default. A stored
    value that does not validate is ignored and the default is returned.
    """

    def __init__(self, key: str, default: Any, store: Optional[PreferenceStore] = None):
        self.key = key
        self.default = default
        self.store = store
        self._adapter = TypeAdapter(type(default) if default is not None else Any)
        self.attr_name = key

    def __set_name__(self, owner, name):
        self.attr_name = name

    def _store_for(self, instance) -> PreferenceStore:
        if self.store is not None:
            return self.store
        store = getattr(instance, "preferences", None)
        if store is None:
            raise AttributeError(
                f"Preference '{self.attr_name}' has no store and "
                f"{type(instance).__name__} has no 'preferences' attribute"
            )
        return store

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        raw = self._store_for(instance).get(self.key, _MISSING)
        if raw is _MISSING:
            return self.default
        try:
            return self._adapter.validate_python(raw)
        except ValidationError:
            logger.warning(
                "Ignoring invalid stored value for preference '%s': %r", self.key, raw
            )
            return self.default

    def __set__(self, instance, value):
        self._store_for(instance).set(self.key, self._adapter.dump_python(value, mode="json"))
