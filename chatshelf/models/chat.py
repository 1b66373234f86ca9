"""
Chat data models.
"""
from pydantic import BaseModel
from typing import List, Optional
import time
import uuid

class Message(BaseModel):
    model_config = {"extra": "allow"}

    id: str
    role: str  # 'user' | 'assistant' | 'system' | 'tool_call' | 'tool_response'
    content: str = ""
    timestamp: Optional[int] = None  # epoch milliseconds

class Chat(BaseModel):
    # Per-chat settings written by other clients are preserved for round-tripping
    model_config = {"extra": "allow"}

    id: str
    title: str
    groupId: Optional[str] = None
    messages: List[Message] = []
    systemPrompt: str = ""
    createdAt: Optional[int] = None

def new_chat(title: str, group_id: Optional[str] = None, system_prompt: str = "",
             messages: Optional[List[Message]] = None) -> Chat:
    """A fresh chat with a generated id, stamped with the current time."""
    return Chat(
        id=str(uuid.uuid4()),
        title=title,
        groupId=group_id,
        messages=messages or [],
        systemPrompt=system_prompt,
        createdAt=int(time.time() * 1000),
    )

class ChatCreate(BaseModel):
    title: Optional[str] = None
    groupId: Optional[str] = None
    systemPrompt: Optional[str] = None
    messages: Optional[List[Message]] = None

class ChatUpdate(BaseModel):
    title: str

class ChatGroupAssignment(BaseModel):
    """Request body for moving a chat into (or out of) a group."""
    groupId: Optional[str] = None
