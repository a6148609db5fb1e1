"""
Unit tests for the well-known directory helpers.
"""

import sys
from pathlib import Path

import pytest

from publisher import user_documents_directory, user_library_directory


def _no_home(cls):
    raise RuntimeError("Could not determine home directory")


@pytest.fixture
def home(temp_dir, monkeypatch):
    monkeypatch.setenv("HOME", str(temp_dir))
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.delenv("XDG_DOCUMENTS_DIR", raising=False)
    return temp_dir


@pytest.mark.skipif(sys.platform == "win32", reason="HOME is not consulted on Windows")
class TestUserLibraryDirectory:
    """Tests for user_library_directory()"""

    @pytest.mark.p0
    def test_linux_default(self, home, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        assert user_library_directory("notes") == home / ".local" / "share" / "notes"

    @pytest.mark.p1
    def test_linux_xdg_data_home(self, home, monkeypatch, temp_dir):
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setenv("XDG_DATA_HOME", str(temp_dir / "data"))
        assert user_library_directory("notes") == temp_dir / "data" / "notes"

    @pytest.mark.p1
    def test_relative_xdg_is_ignored(self, home, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setenv("XDG_DATA_HOME", "relative/data")
        assert user_library_directory("notes") == home / ".local" / "share" / "notes"

    @pytest.mark.p0
    def test_macos(self, home, monkeypatch):
        monkeypatch.setattr(sys, "platform", "darwin")
        assert user_library_directory("notes") == home / "Library" / "notes"

    @pytest.mark.p1
    def test_windows(self, home, monkeypatch, temp_dir):
        monkeypatch.setattr(sys, "platform", "win32")
        monkeypatch.setenv("LOCALAPPDATA", str(temp_dir / "AppData" / "Local"))
        assert user_library_directory("notes") == temp_dir / "AppData" / "Local" / "notes"

    @pytest.mark.p1
    def test_windows_unavailable(self, home, monkeypatch):
        monkeypatch.setattr(sys, "platform", "win32")
        monkeypatch.delenv("LOCALAPPDATA", raising=False)
        monkeypatch.delenv("APPDATA", raising=False)
        assert user_library_directory("notes") is None

    @pytest.mark.p1
    def test_no_home(self, home, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        monkeypatch.setattr(Path, "home", classmethod(_no_home))
        assert user_library_directory("notes") is None

    @pytest.mark.p2
    def test_does_not_create(self, home, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")
        assert not user_library_directory("notes").exists()


@pytest.mark.skipif(sys.platform == "win32", reason="HOME is not consulted on Windows")
class TestUserDocumentsDirectory:
    """Tests for user_documents_directory()"""

    @pytest.mark.p0
    def test_default(self, home):
        assert user_documents_directory("notes") == home / "Documents" / "notes"

    @pytest.mark.p1
    def test_xdg_documents_dir(self, home, monkeypatch, temp_dir):
        monkeypatch.setenv("XDG_DOCUMENTS_DIR", str(temp_dir / "Docs"))
        assert user_documents_directory("notes") == temp_dir / "Docs" / "notes"

    @pytest.mark.p1
    def test_no_home(self, home, monkeypatch):
        monkeypatch.setattr(Path, "home", classmethod(_no_home))
        assert user_documents_directory("notes") is None
