"""
Transient UI state owned by the session controller.

Every dialog-like surface is a slot that is either ``Closed`` or open for a
target chat. Snapshots are frozen; the controller publishes a new one for
every change.
"""
from enum import Enum
from typing import FrozenSet, List, Literal, Optional, Union

from pydantic import BaseModel

from .chat import Chat
from .group import ChatGroup


class WebSearchSupport(str, Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    UNSUPPORTED = "unsupported"


class Screen(str, Enum):
    CHAT_LIST = "chat_list"
    CHAT = "chat"


class Position(BaseModel):
    """2-D anchor of a context menu."""
    model_config = {"frozen": True}

    x: float
    y: float


class Closed(BaseModel):
    model_config = {"frozen": True}

    state: Literal["closed"] = "closed"

    @property
    def is_open(self) -> bool:
        return False


class OpenFor(BaseModel):
    model_config = {"frozen": True}

    state: Literal["open"] = "open"
    target: Chat

    @property
    def is_open(self) -> bool:
        return True


class MenuOpenFor(OpenFor):
    position: Position


class GroupOpenFor(BaseModel):
    model_config = {"frozen": True}

    state: Literal["open"] = "open"
    target: ChatGroup

    @property
    def is_open(self) -> bool:
        return True


class GroupMenuOpenFor(GroupOpenFor):
    position: Position


class GroupDialogOpen(BaseModel):
    """Group create/pick dialog; ``pending_chat`` joins whichever group comes out of it."""
    model_config = {"frozen": True}

    state: Literal["open"] = "open"
    pending_chat: Optional[Chat] = None

    @property
    def is_open(self) -> bool:
        return True


CLOSED = Closed()

DialogSlot = Union[Closed, OpenFor]
MenuSlot = Union[Closed, MenuOpenFor]
GroupDialogSlot = Union[Closed, GroupOpenFor]
GroupMenuSlot = Union[Closed, GroupMenuOpenFor]
GroupCreateSlot = Union[Closed, GroupDialogOpen]


class SessionState(BaseModel):
    """Snapshot of everything the chat list and chat screens render."""
    model_config = {"frozen": True}

    chats: List[Chat] = []
    groups: List[ChatGroup] = []
    current_chat: Optional[Chat] = None
    system_prompt: str = ""

    context_menu: MenuSlot = CLOSED
    rename_dialog: DialogSlot = CLOSED
    delete_confirmation: DialogSlot = CLOSED
    delete_chat_confirmation: DialogSlot = CLOSED

    expanded_groups: FrozenSet[str] = frozenset()
    group_dialog: GroupCreateSlot = CLOSED
    group_context_menu: GroupMenuSlot = CLOSED
    group_rename_dialog: GroupDialogSlot = CLOSED
    group_delete_confirmation: GroupDialogSlot = CLOSED

    snackbar_message: Optional[str] = None

    current_provider: str = ""
    current_model: str = ""
    web_search_support: WebSearchSupport = WebSearchSupport.UNSUPPORTED
    web_search_enabled: bool = False
