"""
chatshelf: session-list layer for a chat application.
"""
