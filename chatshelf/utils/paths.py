"""
Path utilities for chatshelf storage.
"""
import os
from pathlib import Path

def get_chatshelf_home() -> Path:
    """Get the chatshelf home directory, creating if necessary."""
    # Allow override via environment variable
    if 'CHATSHELF_HOME' in os.environ:
        home = Path(os.environ['CHATSHELF_HOME'])
    else:
        home = Path.home() / '.chatshelf'

    home.mkdir(parents=True, exist_ok=True)
    return home

def get_history_dir() -> Path:
    """Directory holding the per-user chat history documents."""
    return get_chatshelf_home() / 'history'
