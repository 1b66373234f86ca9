"""
Chat list, chat and chat group API endpoints.
"""
from fastapi import APIRouter, HTTPException
from typing import List

from ..models.chat import Chat, ChatCreate, ChatUpdate, ChatGroupAssignment
from ..models.chat_list import ChatListItem
from ..models.group import ChatGroup, ChatGroupCreate, ChatGroupUpdate
from ..services.chat_list import aggregate
from ..storage.chat_history import ChatHistoryStorage
from ..utils.custom_exceptions import StorageError
from ..utils.logging_utils import logger
from ..utils.paths import get_history_dir

router = APIRouter(tags=["chats"])

def get_history_storage() -> ChatHistoryStorage:
    return ChatHistoryStorage(get_history_dir())

def _storage_failure(e: StorageError) -> HTTPException:
    logger.error(f"Chat history storage failure: {e}")
    return HTTPException(status_code=500, detail=str(e))

def _require_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Name must not be blank")
    return name

# Chat list

@router.get("/api/v1/users/{user_id}/chat-list", response_model=List[ChatListItem])
async def get_chat_list(user_id: str):
    """Chats and non-empty groups, most recently active first."""
    storage = get_history_storage()
    try:
        history = storage.load(user_id)
    except StorageError as e:
        raise _storage_failure(e) from e
    return aggregate(history.chats, history.groups)

# Chats

@router.post("/api/v1/users/{user_id}/chats", response_model=Chat)
async def create_chat(user_id: str, data: ChatCreate):
    """Create a new chat."""
    storage = get_history_storage()
    try:
        if data.groupId and storage.get_group(user_id, data.groupId) is None:
            raise HTTPException(status_code=404, detail="Group not found")
        return storage.create_chat(user_id, data)
    except StorageError as e:
        raise _storage_failure(e) from e

@router.put("/api/v1/users/{user_id}/chats/{chat_id}")
async def rename_chat(user_id: str, chat_id: str, data: ChatUpdate):
    """Rename a chat."""
    title = _require_name(data.title)
    storage = get_history_storage()
    try:
        if not storage.update_chat_name(user_id, chat_id, title):
            raise HTTPException(status_code=404, detail="Chat not found")
    except StorageError as e:
        raise _storage_failure(e) from e
    return {"updated": True, "title": title}

@router.delete("/api/v1/users/{user_id}/chats/{chat_id}")
async def delete_chat(user_id: str, chat_id: str):
    """Delete a chat."""
    storage = get_history_storage()
    try:
        if not storage.delete_chat(user_id, chat_id):
            raise HTTPException(status_code=404, detail="Chat not found")
    except StorageError as e:
        raise _storage_failure(e) from e
    return {"deleted": True}

@router.put("/api/v1/users/{user_id}/chats/{chat_id}/group")
async def assign_chat_group(user_id: str, chat_id: str, data: ChatGroupAssignment):
    """Move a chat into a group, or out of its group when groupId is null."""
    storage = get_history_storage()
    try:
        if data.groupId is None:
            found = storage.remove_chat_from_group(user_id, chat_id)
        else:
            found = storage.add_chat_to_group(user_id, chat_id, data.groupId)
    except StorageError as e:
        raise _storage_failure(e) from e

    if not found:
        raise HTTPException(status_code=404, detail="Chat or group not found")
    return {"updated": True, "groupId": data.groupId}

# Chat Groups

@router.get("/api/v1/users/{user_id}/chat-groups", response_model=List[ChatGroup])
async def list_chat_groups(user_id: str):
    """List all chat groups, including empty ones."""
    storage = get_history_storage()
    try:
        return storage.load(user_id).groups
    except StorageError as e:
        raise _storage_failure(e) from e

@router.post("/api/v1/users/{user_id}/chat-groups", response_model=ChatGroup)
async def create_chat_group(user_id: str, data: ChatGroupCreate):
    """Create a chat group."""
    name = _require_name(data.name)
    storage = get_history_storage()
    try:
        return storage.create_group(user_id, name)
    except StorageError as e:
        raise _storage_failure(e) from e

@router.put("/api/v1/users/{user_id}/chat-groups/{group_id}")
async def rename_chat_group(user_id: str, group_id: str, data: ChatGroupUpdate):
    """Rename a chat group."""
    name = _require_name(data.name)
    storage = get_history_storage()
    try:
        if not storage.rename_group(user_id, group_id, name):
            raise HTTPException(status_code=404, detail="Group not found")
    except StorageError as e:
        raise _storage_failure(e) from e
    return {"updated": True, "name": name}

@router.delete("/api/v1/users/{user_id}/chat-groups/{group_id}")
async def delete_chat_group(user_id: str, group_id: str):
    """Delete a chat group (chats become ungrouped)."""
    storage = get_history_storage()
    try:
        if not storage.delete_group(user_id, group_id):
            raise HTTPException(status_code=404, detail="Group not found")
    except StorageError as e:
        raise _storage_failure(e) from e
    return {"deleted": True}
