"""
Well-known per-user directories for Publisher stores.

Both helpers only compute a path. They never create it, and they return
None when the platform exposes no such location.
"""

import os
import sys
from pathlib import Path
from typing import Optional


def _home() -> Optional[Path]:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def _library_base() -> Optional[Path]:
    if sys.platform == "darwin":
        home = _home()
        return home / "Library" if home else None

    if sys.platform == "win32":
        for name in ("LOCALAPPDATA", "APPDATA"):
            value = os.environ.get(name)
            if value:
                return Path(value)
        return None

    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg and os.path.isabs(xdg):
        return Path(xdg)
    home = _home()
    return home / ".local" / "share" if home else None


def _documents_base() -> Optional[Path]:
    xdg = os.environ.get("XDG_DOCUMENTS_DIR")
    if xdg and os.path.isabs(xdg):
        return Path(xdg)
    home = _home()
    return home / "Documents" if home else None


def user_library_directory(component: str) -> Optional[Path]:
    """
    Directory for data the user should not browse or edit by hand.

    Args:
        component: Final path component appended to the base location.
    """
    base = _library_base()
    return base / component if base else None


def user_documents_directory(component: str) -> Optional[Path]:
    """
    Directory for data the user can see in their file browser.

    Args:
        component: Final path component appended to the base location.
    """
    base = _documents_base()
    return base / component if base else None
