"""
Session controller for the chat list and chat screens.

Owns the transient UI state (context menu, rename dialog, delete
confirmations, current chat, snackbar, web search flag) and is the only
component that mutates the chat-history store in response to user actions.

Store-touching operations run under one asyncio lock, write, then re-read
the store, and publish a new SessionState only once that round trip has
succeeded. If anything fails the exception propagates and the previously
published state, including any open dialog, is left as it was.
"""
import asyncio
import uuid
from typing import Awaitable, Callable, List, Optional

from chatshelf.config.app_config import (
    ADD_TO_GROUP_FAILED_MESSAGE,
    DEFAULT_CHAT_TITLE,
    WEB_SEARCH_REQUIRED_MESSAGE,
)
from chatshelf.models.chat import Chat, new_chat
from chatshelf.models.chat_list import ChatListItem
from chatshelf.models.group import ChatGroup
from chatshelf.models.history import ChatHistory
from chatshelf.models.session_state import (
    CLOSED,
    GroupDialogOpen,
    GroupMenuOpenFor,
    GroupOpenFor,
    MenuOpenFor,
    OpenFor,
    Position,
    Screen,
    SessionState,
    WebSearchSupport,
)
from chatshelf.services.chat_list import aggregate
from chatshelf.utils.custom_exceptions import StorageError
from chatshelf.utils.logging_utils import logger

StateListener = Callable[[SessionState], None]
NameUpdater = Callable[[str, str], Awaitable[bool]]
Navigator = Callable[[Screen], None]


def _web_search_enabled_for(support: WebSearchSupport, enabled: bool) -> bool:
    if support is WebSearchSupport.REQUIRED:
        return True
    if support is WebSearchSupport.UNSUPPORTED:
        return False
    return enabled


class SessionController:
    """
    Drives the chat list: menus, dialogs, selection and chat/group mutations.

    Args:
        store: chat-history store exposing ``load(user_id)`` and ``save(history)``.
        settings: settings source (current user, provider, model, web search support).
        navigate: navigation sink, called with Screen.CHAT_LIST after the
            current chat is deleted.
        update_chat_name: async ``(chat_id, new_name) -> bool`` collaborator.
            Defaults to renaming through ``store``.
    """

    def __init__(
        self,
        store,
        settings,
        navigate: Navigator,
        update_chat_name: Optional[NameUpdater] = None,
    ):
        self._store = store
        self._settings = settings
        self._navigate = navigate
        self._update_chat_name = update_chat_name or self._rename_in_store
        self._lock = asyncio.Lock()
        self._listeners: List[StateListener] = []

        support = settings.web_search_support
        self._state = SessionState(
            current_provider=settings.current_provider,
            current_model=settings.current_model,
            web_search_support=support,
            web_search_enabled=_web_search_enabled_for(support, False),
        )

    # State publication

    @property
    def state(self) -> SessionState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener for published snapshots; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def chat_list(self) -> List[ChatListItem]:
        return aggregate(self._state.chats, self._state.groups)

    def _publish(self, **changes) -> None:
        self._state = self._state.model_copy(update=changes)
        for listener in list(self._listeners):
            listener(self._state)

    def _publish_history(self, history: ChatHistory, **changes) -> None:
        """Publish reloaded store contents, keeping current_chat in sync with it."""
        if "current_chat" not in changes and self._state.current_chat is not None:
            refreshed = history.find_chat(self._state.current_chat.id)
            if refreshed is not None:
                changes["current_chat"] = refreshed
        self._publish(chats=history.chats, groups=history.groups, **changes)

    # Store access

    @property
    def _user(self) -> str:
        return self._settings.current_user

    async def _load(self) -> ChatHistory:
        user = self._user
        try:
            return await asyncio.to_thread(self._store.load, user)
        except Exception as e:
            logger.error(f"Failed to load chat history for {user}: {e}")
            raise

    async def _commit(self, history: ChatHistory) -> ChatHistory:
        """Save, then re-read so the published state matches what the store holds."""
        try:
            await asyncio.to_thread(self._store.save, history)
        except Exception as e:
            logger.error(f"Failed to save chat history for {history.userName}: {e}")
            raise
        return await self._load()

    async def _rename_in_store(self, chat_id: str, new_name: str) -> bool:
        history = await self._load()
        if history.find_chat(chat_id) is None:
            return False
        await self._commit(history.with_chat_title(chat_id, new_name))
        return True

    async def refresh(self) -> None:
        """Reload chats and groups from the store."""
        async with self._lock:
            history = await self._load()
            self._publish_history(history)

    # Context menu

    def show_chat_context_menu(self, chat: Chat, position: Position) -> None:
        self._publish(context_menu=MenuOpenFor(target=chat, position=position))

    def hide_chat_context_menu(self) -> None:
        self._publish(context_menu=CLOSED)

    # Rename dialog

    def show_rename_dialog(self, chat: Chat) -> None:
        self._publish(rename_dialog=OpenFor(target=chat), context_menu=CLOSED)

    def hide_rename_dialog(self) -> None:
        self._publish(rename_dialog=CLOSED)

    async def rename_chat(self, chat: Chat, new_name: str) -> None:
        """Rename a chat; blank names are ignored."""
        name = new_name.strip()
        if not name:
            return

        async with self._lock:
            if not await self._update_chat_name(chat.id, name):
                logger.error(f"Rename of chat {chat.id} was rejected by the store")
                raise StorageError(f"Could not rename chat {chat.id}")
            history = await self._load()
            self._publish_history(history, rename_dialog=CLOSED)
        logger.debug(f"Renamed chat {chat.id}")

    # Delete confirmation opened from the context menu

    def show_delete_confirmation(self, chat: Chat) -> None:
        self._publish(delete_confirmation=OpenFor(target=chat), context_menu=CLOSED)

    def hide_delete_confirmation(self) -> None:
        self._publish(delete_confirmation=CLOSED)

    async def delete_chat(self, chat: Chat) -> None:
        """
        Delete a chat from the store.

        If it was the current chat, the last remaining chat in store order
        becomes current, or nothing when the store is empty.
        """
        async with self._lock:
            history = await self._load()
            history = await self._commit(history.without_chat(chat.id))

            changes = {"delete_confirmation": CLOSED}
            current = self._state.current_chat
            if current is not None and current.id == chat.id:
                changes["current_chat"] = history.chats[-1] if history.chats else None
            self._publish_history(history, **changes)
        logger.info(f"Deleted chat {chat.id}")

    # Delete confirmation for the chat currently open

    def show_delete_chat_confirmation(self) -> None:
        current = self._state.current_chat
        if current is None:
            return
        self._publish(delete_chat_confirmation=OpenFor(target=current))

    def hide_delete_chat_confirmation(self) -> None:
        self._publish(delete_chat_confirmation=CLOSED)

    async def delete_current_chat(self) -> None:
        """Delete the open chat and navigate back to the chat list."""
        target = self._state.current_chat
        if target is None:
            return

        async with self._lock:
            history = await self._load()
            history = await self._commit(history.without_chat(target.id))

            changes = {"delete_chat_confirmation": CLOSED}
            # Another chat may have been selected while waiting for the lock
            current = self._state.current_chat
            if current is None or current.id == target.id:
                changes.update(current_chat=None, system_prompt="")
            self._publish_history(history, **changes)
        logger.info(f"Deleted current chat {target.id}")

        self._navigate(Screen.CHAT_LIST)

    # Selection

    def select_chat(self, chat: Optional[Chat]) -> None:
        self._publish(
            current_chat=chat,
            system_prompt=chat.systemPrompt if chat is not None else "",
        )

    async def create_chat(self, group_id: Optional[str] = None) -> Optional[Chat]:
        """
        Start a new empty chat, make it current and open the chat screen.

        With ``group_id`` the chat is created inside that group; an unknown
        group creates nothing and returns None.
        """
        async with self._lock:
            history = await self._load()
            if group_id is not None and history.find_group(group_id) is None:
                logger.warning(f"Cannot create chat in unknown group {group_id}")
                return None
            chat = new_chat(DEFAULT_CHAT_TITLE, group_id=group_id)
            history = await self._commit(history.with_chat(chat))
            self._publish_history(
                history,
                current_chat=history.find_chat(chat.id),
                system_prompt="",
            )
        logger.info(f"Created chat {chat.id}")

        self._navigate(Screen.CHAT)
        return chat

    async def select_model(self, provider: str, model: str) -> None:
        """Switch provider/model and re-derive the web search flag."""
        await asyncio.to_thread(self._settings.select, provider, model)
        support = self._settings.web_search_support
        self._publish(
            current_provider=provider,
            current_model=model,
            web_search_support=support,
            web_search_enabled=_web_search_enabled_for(support, self._state.web_search_enabled),
        )

    # Web search

    def toggle_web_search(self) -> None:
        support = self._settings.web_search_support

        if support is WebSearchSupport.REQUIRED:
            message = WEB_SEARCH_REQUIRED_MESSAGE.format(
                model=self._settings.current_model,
                provider=self._settings.current_provider,
            )
            self._publish(web_search_support=support, snackbar_message=message)
        elif support is WebSearchSupport.OPTIONAL:
            self._publish(
                web_search_support=support,
                web_search_enabled=not self._state.web_search_enabled,
            )
        # UNSUPPORTED: the toggle is not shown, nothing to change

    # Snackbar and navigation

    def clear_snackbar(self) -> None:
        self._publish(snackbar_message=None)

    def reset_transient_state(self) -> None:
        """Close every menu and dialog; called when the visible screen changes."""
        self._publish(
            context_menu=CLOSED,
            rename_dialog=CLOSED,
            delete_confirmation=CLOSED,
            delete_chat_confirmation=CLOSED,
            group_dialog=CLOSED,
            group_context_menu=CLOSED,
            group_rename_dialog=CLOSED,
            group_delete_confirmation=CLOSED,
            snackbar_message=None,
        )

    # Group expansion and dialogs

    def toggle_group_expansion(self, group_id: str) -> None:
        expanded = self._state.expanded_groups
        if group_id in expanded:
            self._publish(expanded_groups=expanded - {group_id})
        else:
            self._publish(expanded_groups=expanded | {group_id})

    def show_group_dialog(self, chat: Optional[Chat] = None) -> None:
        self._publish(group_dialog=GroupDialogOpen(pending_chat=chat))

    def hide_group_dialog(self) -> None:
        self._publish(group_dialog=CLOSED)

    def show_group_context_menu(self, group: ChatGroup, position: Position) -> None:
        self._publish(group_context_menu=GroupMenuOpenFor(target=group, position=position))

    def hide_group_context_menu(self) -> None:
        self._publish(group_context_menu=CLOSED)

    def show_group_rename_dialog(self, group: ChatGroup) -> None:
        self._publish(group_rename_dialog=GroupOpenFor(target=group), group_context_menu=CLOSED)

    def hide_group_rename_dialog(self) -> None:
        self._publish(group_rename_dialog=CLOSED)

    def show_group_delete_confirmation(self, group: ChatGroup) -> None:
        self._publish(group_delete_confirmation=GroupOpenFor(target=group), group_context_menu=CLOSED)

    def hide_group_delete_confirmation(self) -> None:
        self._publish(group_delete_confirmation=CLOSED)

    # Group mutations

    async def create_group(self, name: str, chat: Optional[Chat] = None) -> Optional[ChatGroup]:
        """
        Create a group and expand it.

        ``chat``, or else the group dialog's pending chat, is moved into the
        new group. The group dialog is closed, which drops the pending chat.
        """
        name = name.strip()
        if not name:
            return None

        if chat is None and isinstance(self._state.group_dialog, GroupDialogOpen):
            chat = self._state.group_dialog.pending_chat

        async with self._lock:
            group = ChatGroup(id=str(uuid.uuid4()), name=name)
            history = (await self._load()).with_group(group)
            if chat is not None and history.find_chat(chat.id) is not None:
                history = history.with_chat_group(chat.id, group.id)
            history = await self._commit(history)
            self._publish_history(
                history,
                expanded_groups=self._state.expanded_groups | {group.id},
                group_dialog=CLOSED,
                context_menu=CLOSED,
            )
        logger.info(f"Created group {group.id}")
        return group

    async def add_chat_to_group(self, chat_id: str, group_id: str) -> bool:
        async with self._lock:
            history = await self._load()
            if history.find_group(group_id) is None or history.find_chat(chat_id) is None:
                self._publish(snackbar_message=ADD_TO_GROUP_FAILED_MESSAGE)
                return False
            history = await self._commit(history.with_chat_group(chat_id, group_id))
            self._publish_history(history, context_menu=CLOSED, group_dialog=CLOSED)
        return True

    async def remove_chat_from_group(self, chat_id: str) -> bool:
        async with self._lock:
            history = await self._load()
            if history.find_chat(chat_id) is None:
                return False
            history = await self._commit(history.with_chat_group(chat_id, None))
            self._publish_history(history, context_menu=CLOSED)
        return True

    async def rename_group(self, group_id: str, new_name: str) -> bool:
        """Rename a group; blank names are ignored and leave the dialog open."""
        name = new_name.strip()
        if not name:
            return False

        async with self._lock:
            history = await self._load()
            if history.find_group(group_id) is None:
                self._publish(group_rename_dialog=CLOSED)
                return False
            history = await self._commit(history.with_group_name(group_id, name))
            self._publish_history(history, group_rename_dialog=CLOSED)
        return True

    async def delete_group(self, group_id: str) -> bool:
        """Delete a group; its chats stay in the store, ungrouped."""
        async with self._lock:
            history = await self._load()
            if history.find_group(group_id) is None:
                self._publish(group_delete_confirmation=CLOSED)
                return False
            history = await self._commit(history.without_group(group_id))
            self._publish_history(
                history,
                expanded_groups=self._state.expanded_groups - {group_id},
                group_delete_confirmation=CLOSED,
            )
        logger.info(f"Deleted group {group_id}")
        return True
