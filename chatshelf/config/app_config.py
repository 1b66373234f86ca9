"""
General application configuration for chatshelf.

This module contains application-wide settings that are not specific to models.
"""
import os

# Server configuration
DEFAULT_PORT = int(os.getenv('CHATSHELF_PORT', '6970'))
DEFAULT_HOST = os.getenv('CHATSHELF_HOST', '127.0.0.1')

# User whose history is shown when settings.json does not name one
DEFAULT_USER = os.getenv('CHATSHELF_DEFAULT_USER', 'default')

# User-facing messages queued in the snackbar slot
WEB_SEARCH_REQUIRED_MESSAGE = "Web search cannot be turned off for model {model} via provider {provider}"
ADD_TO_GROUP_FAILED_MESSAGE = "Failed to add chat to group"

DEFAULT_CHAT_TITLE = "New conversation"
