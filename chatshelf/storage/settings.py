"""
Application settings storage.
"""
from pathlib import Path

from pydantic import ValidationError

from chatshelf.utils.custom_exceptions import StorageError
from chatshelf.utils.logging_utils import get_logger

from .base import BaseStorage
from ..models.settings import AppSettings

logger = get_logger("storage")

class SettingsStorage(BaseStorage):
    """Storage for the single settings.json document."""

    def __init__(self, home: Path):
        super().__init__(home)
        self.settings_file = home / "settings.json"

    def load(self) -> AppSettings:
        """Load settings, falling back to defaults for a missing or broken file."""
        try:
            data = self._read_json(self.settings_file)
            if data is None:
                return AppSettings()
            return AppSettings(**data)
        except (StorageError, ValidationError) as e:
            logger.warning(f"Using default settings, {self.settings_file} is unusable: {e}")
            return AppSettings()

    def save(self, settings: AppSettings) -> None:
        self._write_json(self.settings_file, settings.model_dump())
