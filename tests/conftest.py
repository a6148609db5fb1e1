"""
Pytest configuration and fixtures for Publisher tests.
"""

import os
import sys
import tempfile
import shutil
from pathlib import Path

import pytest

# Add python directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'python'))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmp = tempfile.mkdtemp(prefix="publisher-test-")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def store_dir(temp_dir):
    """A store directory that does not exist yet."""
    return temp_dir / "library" / "notes"


@pytest.fixture
def preference_store(temp_dir):
    """Create a PreferenceStore backed by a file in the temp directory."""
    from publisher import PreferenceStore
    return PreferenceStore(temp_dir / "prefs" / "preferences.json")


# Pytest markers
def pytest_configure(config):
    config.addinivalue_line("markers", "p0: Priority 0 (critical) tests")
    config.addinivalue_line("markers", "p1: Priority 1 (high) tests")
    config.addinivalue_line("markers", "p2: Priority 2 (medium) tests")
