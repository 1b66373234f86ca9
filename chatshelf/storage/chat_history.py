"""
Chat history storage implementation.

Each user has a single JSON document holding both their chats and their
chat groups. Group membership lives on the chat (``groupId``), so every
operation that touches groups rewrites the whole document.
"""
from pathlib import Path
from typing import Optional
import uuid

from pydantic import ValidationError

from chatshelf.config.app_config import DEFAULT_CHAT_TITLE
from chatshelf.utils.custom_exceptions import StorageError
from chatshelf.utils.logging_utils import get_logger

from .base import BaseStorage
from ..models.chat import Chat, ChatCreate, new_chat
from ..models.group import ChatGroup
from ..models.history import ChatHistory

logger = get_logger("storage")

class ChatHistoryStorage(BaseStorage):
    """Storage for per-user chat history documents."""

    def __init__(self, history_dir: Path):
        super().__init__(history_dir)

    def _history_file(self, user_id: str) -> Path:
        return self.base_path / f"chat_history_{user_id}.json"

    def load(self, user_id: str) -> ChatHistory:
        """Load a user's history; a user with no file has an empty one."""
        data = self._read_json(self._history_file(user_id))
        if data is None:
            return ChatHistory(userName=user_id)
        try:
            return ChatHistory(**data)
        except (ValidationError, TypeError) as e:
            logger.error(f"Invalid chat history for user {user_id}: {e}")
            raise StorageError(
                f"Chat history for {user_id} is not valid",
                path=self._history_file(user_id),
            ) from e

    def save(self, history: ChatHistory) -> None:
        self._write_json(self._history_file(history.userName), history.model_dump())
        logger.debug(
            f"Saved chat history for {history.userName}: "
            f"{len(history.chats)} chats, {len(history.groups)} groups"
        )

    # Chats

    def create_chat(self, user_id: str, data: ChatCreate) -> Chat:
        chat = new_chat(
            data.title or DEFAULT_CHAT_TITLE,
            group_id=data.groupId,
            system_prompt=data.systemPrompt or "",
            messages=data.messages,
        )
        self.save(self.load(user_id).with_chat(chat))
        return chat

    def update_chat_name(self, user_id: str, chat_id: str, new_name: str) -> bool:
        history = self.load(user_id)
        if history.find_chat(chat_id) is None:
            return False
        self.save(history.with_chat_title(chat_id, new_name))
        return True

    def delete_chat(self, user_id: str, chat_id: str) -> bool:
        history = self.load(user_id)
        if history.find_chat(chat_id) is None:
            return False
        self.save(history.without_chat(chat_id))
        return True

    def add_chat_to_group(self, user_id: str, chat_id: str, group_id: str) -> bool:
        history = self.load(user_id)
        if history.find_group(group_id) is None or history.find_chat(chat_id) is None:
            return False
        self.save(history.with_chat_group(chat_id, group_id))
        return True

    def remove_chat_from_group(self, user_id: str, chat_id: str) -> bool:
        history = self.load(user_id)
        if history.find_chat(chat_id) is None:
            return False
        self.save(history.with_chat_group(chat_id, None))
        return True

    # Groups

    def get_group(self, user_id: str, group_id: str) -> Optional[ChatGroup]:
        return self.load(user_id).find_group(group_id)

    def create_group(self, user_id: str, name: str) -> ChatGroup:
        group = ChatGroup(id=str(uuid.uuid4()), name=name)
        self.save(self.load(user_id).with_group(group))
        return group

    def rename_group(self, user_id: str, group_id: str, new_name: str) -> bool:
        history = self.load(user_id)
        if history.find_group(group_id) is None:
            return False
        self.save(history.with_group_name(group_id, new_name))
        return True

    def delete_group(self, user_id: str, group_id: str) -> bool:
        """Delete a group; its chats become ungrouped."""
        history = self.load(user_id)
        if history.find_group(group_id) is None:
            return False
        self.save(history.without_group(group_id))
        return True
