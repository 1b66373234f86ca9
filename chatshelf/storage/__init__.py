"""
Storage layer for chatshelf.
"""
from .base import BaseStorage
from .chat_history import ChatHistoryStorage
from .settings import SettingsStorage
