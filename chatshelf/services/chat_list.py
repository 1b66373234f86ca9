"""
Chat list aggregation.

Merges a user's chats and chat groups into the single recency-ordered list
shown on the chat list screen.
"""
from collections import defaultdict
from typing import Dict, List, Sequence

from chatshelf.models.chat import Chat
from chatshelf.models.chat_list import ChatItem, ChatListItem, GroupItem
from chatshelf.models.group import ChatGroup


def aggregate(chats: Sequence[Chat], groups: Sequence[ChatGroup]) -> List[ChatListItem]:
    """
    Organize chats and groups into one list, newest activity first.

    Groups are emitted in the order given, each with its member chats in
    the order given; empty groups are skipped. Ungrouped chats follow, also
    in the order given. The result is then sorted by derived timestamp,
    descending. The sort is stable, so items with equal timestamps keep
    that emission order: groups before ungrouped chats.

    A chat whose groupId names a group not present in ``groups`` is left
    out entirely.
    """
    chats_by_group: Dict[str, List[Chat]] = defaultdict(list)
    ungrouped: List[Chat] = []
    for chat in chats:
        if chat.groupId is None:
            ungrouped.append(chat)
        else:
            chats_by_group[chat.groupId].append(chat)

    items: List[ChatListItem] = []
    for group in groups:
        members = chats_by_group.get(group.id)
        if members:
            items.append(GroupItem(group=group, chats=members))

    items.extend(ChatItem(chat=chat) for chat in ungrouped)

    return sorted(items, key=lambda item: item.timestamp, reverse=True)
