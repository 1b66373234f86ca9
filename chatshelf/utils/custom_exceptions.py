"""
Custom exceptions for chatshelf.
"""

class ChatShelfError(Exception):
    """Base class for errors raised by chatshelf."""
    pass

class StorageError(ChatShelfError):
    """
    Exception raised when the chat-history store cannot be read or written.

    Callers receive it instead of a silent success so that any dialog gating
    the failed action can stay open for a retry.
    """
    def __init__(self, message="Chat history storage is unavailable.", path=None):
        self.message = message
        self.path = path
        super().__init__(self.message)

    def __str__(self):
        return self.message
