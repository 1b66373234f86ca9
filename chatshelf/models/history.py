"""
Persisted chat-history document, one per user.

The ``with_*``/``without_*`` helpers never mutate the document; they return
an updated copy so callers can decide whether to save it.
"""
from pydantic import BaseModel
from typing import List, Optional

from .chat import Chat
from .group import ChatGroup

class ChatHistory(BaseModel):
    """The chat_history_<user>.json file structure."""
    version: int = 1
    userName: str
    chats: List[Chat] = []
    groups: List[ChatGroup] = []

    def find_chat(self, chat_id: str) -> Optional[Chat]:
        return next((c for c in self.chats if c.id == chat_id), None)

    def find_group(self, group_id: str) -> Optional[ChatGroup]:
        return next((g for g in self.groups if g.id == group_id), None)

    def _map_chats(self, chat_id: str, **changes) -> "ChatHistory":
        chats = [c.model_copy(update=changes) if c.id == chat_id else c for c in self.chats]
        return self.model_copy(update={"chats": chats})

    def with_chat(self, chat: Chat) -> "ChatHistory":
        return self.model_copy(update={"chats": [*self.chats, chat]})

    def without_chat(self, chat_id: str) -> "ChatHistory":
        return self.model_copy(update={"chats": [c for c in self.chats if c.id != chat_id]})

    def with_chat_title(self, chat_id: str, title: str) -> "ChatHistory":
        return self._map_chats(chat_id, title=title)

    def with_chat_group(self, chat_id: str, group_id: Optional[str]) -> "ChatHistory":
        return self._map_chats(chat_id, groupId=group_id)

    def with_group(self, group: ChatGroup) -> "ChatHistory":
        return self.model_copy(update={"groups": [*self.groups, group]})

    def with_group_name(self, group_id: str, name: str) -> "ChatHistory":
        groups = [g.model_copy(update={"name": name}) if g.id == group_id else g for g in self.groups]
        return self.model_copy(update={"groups": groups})

    def without_group(self, group_id: str) -> "ChatHistory":
        """Drop a group; its member chats become ungrouped."""
        chats = [
            c.model_copy(update={"groupId": None}) if c.groupId == group_id else c
            for c in self.chats
        ]
        groups = [g for g in self.groups if g.id != group_id]
        return self.model_copy(update={"chats": chats, "groups": groups})
