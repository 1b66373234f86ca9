"""
Pytest configuration and shared fixtures.
"""

import pytest
import pytest_asyncio
import sys
from pathlib import Path

# Set asyncio mode
pytest_plugins = ('pytest_asyncio',)

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def pytest_configure(config):
    config.option.asyncio_mode = "auto"


@pytest.fixture
def chatshelf_home(tmp_path, monkeypatch):
    """Point CHATSHELF_HOME at a temporary directory."""
    home = tmp_path / ".chatshelf"
    home.mkdir()
    monkeypatch.setenv("CHATSHELF_HOME", str(home))
    return home
