"""
Chat group data models.
"""
from pydantic import BaseModel

class ChatGroup(BaseModel):
    model_config = {"extra": "allow"}

    id: str
    name: str

class ChatGroupCreate(BaseModel):
    name: str

class ChatGroupUpdate(BaseModel):
    name: str
