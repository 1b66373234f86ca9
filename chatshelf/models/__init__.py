"""
Data models for chatshelf.
"""
from .chat import Chat, ChatCreate, ChatUpdate, ChatGroupAssignment, Message, new_chat
from .group import ChatGroup, ChatGroupCreate, ChatGroupUpdate
from .history import ChatHistory
from .chat_list import ChatItem, ChatListItem, GroupItem, EARLIEST_TIMESTAMP
from .session_state import (
    CLOSED, Closed, GroupDialogOpen, GroupMenuOpenFor, GroupOpenFor, MenuOpenFor, OpenFor,
    Position, Screen, SessionState, WebSearchSupport
)
from .settings import AppSettings
