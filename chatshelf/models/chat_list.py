"""
Display items produced by the chat list aggregator.

Each item carries a derived ``timestamp`` used only for ordering. It is a
computed field: recalculated from message data whenever it is read and
never written back to the chat-history store.
"""
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, computed_field

from .chat import Chat
from .group import ChatGroup

# Sorts after every real timestamp (mirrors a 64-bit Long.MIN_VALUE)
EARLIEST_TIMESTAMP = -(2 ** 63)


def last_message_timestamp(chat: Chat) -> Optional[int]:
    """Timestamp of the chat's most recent message, or None if it has none."""
    if not chat.messages:
        return None
    return chat.messages[-1].timestamp


def chat_timestamp(chat: Chat) -> int:
    timestamp = last_message_timestamp(chat)
    return EARLIEST_TIMESTAMP if timestamp is None else timestamp


class GroupItem(BaseModel):
    kind: Literal["group"] = "group"
    group: ChatGroup
    chats: List[Chat]

    @computed_field
    @property
    def timestamp(self) -> int:
        return max((chat_timestamp(chat) for chat in self.chats), default=EARLIEST_TIMESTAMP)


class ChatItem(BaseModel):
    kind: Literal["chat"] = "chat"
    chat: Chat

    @computed_field
    @property
    def timestamp(self) -> int:
        return chat_timestamp(self.chat)


ChatListItem = Annotated[Union[GroupItem, ChatItem], Field(discriminator="kind")]
