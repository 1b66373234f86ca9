"""
FastAPI application serving the chat list API.
"""
from fastapi import FastAPI

from chatshelf.api.chats import router as chats_router

# Create the FastAPI app
app = FastAPI(
    title="chatshelf API",
    description="Chat list, chat and chat group management",
    version="0.1.0",
)

app.include_router(chats_router)
