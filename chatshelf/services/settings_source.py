"""
Read access to the active user and model selection.
"""
from chatshelf.config.models_config import get_web_search_support
from chatshelf.models.session_state import WebSearchSupport
from chatshelf.storage.settings import SettingsStorage


class SettingsSource:
    """Current user and provider/model, backed by settings.json."""

    def __init__(self, storage: SettingsStorage):
        self._storage = storage
        self._settings = storage.load()

    @property
    def current_user(self) -> str:
        return self._settings.currentUser

    @property
    def current_provider(self) -> str:
        return self._settings.selectedProvider

    @property
    def current_model(self) -> str:
        return self._settings.selectedModel

    @property
    def web_search_support(self) -> WebSearchSupport:
        return get_web_search_support(self.current_provider, self.current_model)

    def select(self, provider: str, model: str) -> None:
        """Persist a new provider/model selection."""
        updated = self._settings.model_copy(
            update={"selectedProvider": provider, "selectedModel": model}
        )
        self._storage.save(updated)
        self._settings = updated
