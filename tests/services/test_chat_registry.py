"""Chat registry tests — naming on create and first input, lookups, deletion.

Invariants:
    - New chats are named explicitly, from their prompt, or "New Chat"
    - First input renames only chats still called "New Chat", and only once
    - Unknown ids raise ResourceNotFoundError
"""

from uuid import uuid4

import pytest

from session_titles.core.chat_naming import DEFAULT_CHAT_NAME
from session_titles.core.domain_types import ChatId, ChatStatus
from session_titles.core.errors import ResourceNotFoundError


def test_create_without_prompt_uses_default_name(chat_registry):
    chat = chat_registry.create_chat()
    assert chat.name == DEFAULT_CHAT_NAME
    assert chat.status == ChatStatus.ACTIVE


def test_create_with_prompt_derives_name(chat_registry):
    chat = chat_registry.create_chat(prompt="please fix the login bug")
    assert chat.name == "Fix the login bug"
    assert chat.prompt == "please fix the login bug"


def test_create_with_explicit_name(chat_registry):
    chat = chat_registry.create_chat(prompt="please fix it", name="Hotfix")
    assert chat.name == "Hotfix"


def test_create_child_chat(chat_registry):
    parent = chat_registry.create_chat(prompt="plan the release")
    child = chat_registry.create_chat(prompt="write notes", parent_id=parent.id)
    assert child.parent_id == parent.id
    assert chat_registry.get_children(parent.id) == [child]


def test_create_child_of_unknown_parent_raises(chat_registry):
    with pytest.raises(ResourceNotFoundError):
        chat_registry.create_chat(prompt="orphan", parent_id=ChatId(uuid4()))


def test_first_input_names_default_chat(chat_registry):
    chat = chat_registry.create_chat()
    chat_registry.record_first_input(chat.id, "can you add pagination, then tests")
    assert chat_registry.get_chat(chat.id).name == "Add pagination"


def test_first_input_renames_only_once(chat_registry):
    chat = chat_registry.create_chat()
    chat_registry.record_first_input(chat.id, "first request")
    chat_registry.record_first_input(chat.id, "second request")
    assert chat.name == "First request"


def test_first_input_keeps_prompt_derived_name(chat_registry):
    chat = chat_registry.create_chat(prompt="migrate the db")
    chat_registry.record_first_input(chat.id, "something else")
    assert chat.name == "Migrate the db"


def test_first_input_touches_last_active(chat_registry):
    chat = chat_registry.create_chat()
    before = chat.last_active_at
    chat_registry.record_first_input(chat.id, "hello")
    assert chat.last_active_at >= before


def test_rename_chat(chat_registry):
    chat = chat_registry.create_chat()
    chat_registry.rename_chat(chat.id, "Renamed")
    assert chat_registry.get_chat(chat.id).name == "Renamed"


def test_list_chats_newest_first(chat_registry):
    first = chat_registry.create_chat(prompt="one")
    second = chat_registry.create_chat(prompt="two")
    second.created_at = first.created_at.replace(year=first.created_at.year + 1)
    assert [c.id for c in chat_registry.list_chats()] == [second.id, first.id]


def test_delete_chat(chat_registry):
    chat = chat_registry.create_chat()
    chat_registry.delete_chat(chat.id)
    with pytest.raises(ResourceNotFoundError):
        chat_registry.get_chat(chat.id)


def test_unknown_chat_raises(chat_registry):
    missing = ChatId(uuid4())
    with pytest.raises(ResourceNotFoundError):
        chat_registry.get_chat(missing)
    with pytest.raises(ResourceNotFoundError):
        chat_registry.record_first_input(missing, "hi")
    with pytest.raises(ResourceNotFoundError):
        chat_registry.delete_chat(missing)
    with pytest.raises(ResourceNotFoundError):
        chat_registry.get_children(missing)
