"""
Application settings model.
"""
from pydantic import BaseModel

from ..config.app_config import DEFAULT_USER
from ..config.models_config import DEFAULT_PROVIDER, DEFAULT_MODELS

class AppSettings(BaseModel):
    """The settings.json file structure."""
    currentUser: str = DEFAULT_USER
    selectedProvider: str = DEFAULT_PROVIDER
    selectedModel: str = DEFAULT_MODELS[DEFAULT_PROVIDER]
