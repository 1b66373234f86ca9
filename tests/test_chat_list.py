"""
Tests for chatshelf.services.chat_list: grouping and ordering of the chat list.
"""

from chatshelf.models.chat import Chat, Message
from chatshelf.models.chat_list import EARLIEST_TIMESTAMP, ChatItem, GroupItem
from chatshelf.models.group import ChatGroup
from chatshelf.services.chat_list import aggregate


def make_chat(chat_id, *timestamps, group_id=None):
    messages = [
        Message(id=f"{chat_id}-m{i}", role="user", content="hi", timestamp=ts)
        for i, ts in enumerate(timestamps)
    ]
    return Chat(id=chat_id, title=chat_id.upper(), groupId=group_id, messages=messages)


def describe(items):
    return [
        ("group", item.group.id, [c.id for c in item.chats]) if isinstance(item, GroupItem)
        else ("chat", item.chat.id)
        for item in items
    ]


# ── Grouping ───────────────────────────────────────────────────────

class TestGrouping:

    def test_groups_and_ungrouped_chats(self):
        chats = [
            make_chat("a", 100, group_id="g1"),
            make_chat("b", 300),
            make_chat("c", 200, group_id="g1"),
        ]
        groups = [ChatGroup(id="g1", name="Work"), ChatGroup(id="g2", name="Empty")]

        items = aggregate(chats, groups)

        assert describe(items) == [
            ("chat", "b"),
            ("group", "g1", ["a", "c"]),
        ]
        assert items[0].timestamp == 300
        assert items[1].timestamp == 200

    def test_empty_groups_are_dropped(self):
        items = aggregate([], [ChatGroup(id="g1", name="Empty")])
        assert items == []

    def test_member_order_follows_input_order(self):
        chats = [
            make_chat("old", 1, group_id="g"),
            make_chat("new", 50, group_id="g"),
        ]
        items = aggregate(chats, [ChatGroup(id="g", name="G")])
        assert [c.id for c in items[0].chats] == ["old", "new"]

    def test_dangling_group_reference_is_dropped(self):
        chats = [make_chat("orphan", 10, group_id="missing"), make_chat("kept", 5)]
        assert describe(aggregate(chats, [])) == [("chat", "kept")]

    def test_every_chat_appears_once(self):
        groups = [ChatGroup(id="g1", name="One"), ChatGroup(id="g2", name="Two")]
        chats = [
            make_chat("a", 1, group_id="g1"),
            make_chat("b", 2, group_id="g2"),
            make_chat("c", 3),
            make_chat("d", 4, group_id="g1"),
        ]
        seen = []
        for item in aggregate(chats, groups):
            if isinstance(item, GroupItem):
                seen.extend(c.id for c in item.chats)
            else:
                seen.append(item.chat.id)
        assert sorted(seen) == ["a", "b", "c", "d"]

    def test_empty_inputs(self):
        assert aggregate([], []) == []


# ── Ordering ───────────────────────────────────────────────────────

class TestOrdering:

    def test_descending_by_timestamp(self):
        chats = [make_chat("a", 10), make_chat("b", 30), make_chat("c", 20)]
        assert [i.chat.id for i in aggregate(chats, [])] == ["b", "c", "a"]

    def test_last_message_determines_timestamp(self):
        chat = make_chat("a", 500, 100)
        assert ChatItem(chat=chat).timestamp == 100

    def test_chat_without_messages_sorts_last(self):
        chats = [make_chat("empty"), make_chat("active", 1)]
        items = aggregate(chats, [])
        assert [i.chat.id for i in items] == ["active", "empty"]
        assert items[1].timestamp == EARLIEST_TIMESTAMP

    def test_message_without_timestamp_counts_as_earliest(self):
        chat = Chat(id="a", title="A", messages=[Message(id="m", role="user")])
        assert ChatItem(chat=chat).timestamp == EARLIEST_TIMESTAMP

    def test_group_of_silent_chats_has_earliest_timestamp(self):
        items = aggregate([make_chat("a", group_id="g")], [ChatGroup(id="g", name="G")])
        assert items[0].timestamp == EARLIEST_TIMESTAMP

    def test_ties_keep_groups_before_chats(self):
        chats = [
            make_chat("loose", 100),
            make_chat("member", 100, group_id="g"),
        ]
        items = aggregate(chats, [ChatGroup(id="g", name="G")])
        assert describe(items) == [("group", "g", ["member"]), ("chat", "loose")]

    def test_ties_keep_input_order(self):
        chats = [make_chat("first", 7), make_chat("second", 7), make_chat("third", 7)]
        assert [i.chat.id for i in aggregate(chats, [])] == ["first", "second", "third"]

    def test_aggregation_is_idempotent(self):
        chats = [make_chat("a", 3, group_id="g"), make_chat("b", 2), make_chat("c")]
        groups = [ChatGroup(id="g", name="G")]
        assert aggregate(chats, groups) == aggregate(chats, groups)

    def test_timestamp_is_serialized(self):
        item = ChatItem(chat=make_chat("a", 42))
        dumped = item.model_dump()
        assert dumped["kind"] == "chat"
        assert dumped["timestamp"] == 42
