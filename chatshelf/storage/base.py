"""
Base storage class for file-based JSON storage.
"""
from typing import Optional
from pathlib import Path
import json
import fcntl
from contextlib import contextmanager

from chatshelf.utils.custom_exceptions import StorageError
from chatshelf.utils.logging_utils import get_logger

logger = get_logger("storage")

class BaseStorage:
    """Base class for file-based JSON storage with locking."""

    def __init__(self, base_path: Path):
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)

    @contextmanager
    def _file_lock(self, filepath: Path, mode: str = 'r'):
        """Context manager for file locking to handle concurrent access."""
        # Ensure parent directory exists
        filepath.parent.mkdir(parents=True, exist_ok=True)

        # Create file if it doesn't exist for write modes
        if mode in ('w', 'a') and not filepath.exists():
            filepath.touch()

        with open(filepath, mode) as f:
            try:
                fcntl.flock(f.fileno(), fcntl.LOCK_EX)
                yield f
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)

    def _read_json(self, filepath: Path) -> Optional[dict]:
        """
        Read JSON file with locking.

        Returns None when the file does not exist. A file that exists but
        cannot be parsed raises StorageError so callers never mistake it for
        an empty document and overwrite it.
        """
        if not filepath.exists():
            return None
        try:
            with self._file_lock(filepath, 'r') as f:
                return json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.error(f"Error reading {filepath}: {e}")
            raise StorageError(f"Could not read {filepath.name}: {e}", path=filepath) from e

    def _write_json(self, filepath: Path, data: dict) -> None:
        """Write JSON file with locking and atomic write."""
        filepath.parent.mkdir(parents=True, exist_ok=True)

        # Write to temp file first, then rename for atomicity
        temp_path = filepath.with_suffix('.tmp')
        try:
            with self._file_lock(temp_path, 'w') as f:
                json.dump(data, f, indent=2)
            temp_path.rename(filepath)
        except (IOError, TypeError, ValueError) as e:
            # Clean up temp file on error
            if temp_path.exists():
                temp_path.unlink()
            logger.error(f"Error writing {filepath}: {e}")
            raise StorageError(f"Could not write {filepath.name}: {e}", path=filepath) from e
