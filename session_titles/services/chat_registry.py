"""Chat Registry — in-memory chat records named through the title deriver.

Invariants:
    - Every chat has a non-empty name from creation onwards
    - Auto-renaming on first input happens at most once (see core/chat_naming.py)
    - Child chats always reference an existing parent at creation time
    - Unknown ids raise ResourceNotFoundError, never return None silently

Design Decisions:
    - Plain dict per registry instance, no persistence
      (single-process uvicorn, records lost on restart)
    - Methods are synchronous: no await between read and write, so no lock
      is needed inside the asyncio event loop
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from session_titles.core.chat_naming import initial_chat_name, name_after_first_input
from session_titles.core.domain_types import ChatId, ChatStatus
from session_titles.core.errors import ErrorContext, ResourceNotFoundError

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ChatRecord:
    """One chat as tracked by the registry."""
    name: str
    prompt: str | None = None
    parent_id: ChatId | None = None
    status: ChatStatus = ChatStatus.ACTIVE  # later states come from the PTY layer
    id: ChatId = field(default_factory=lambda: ChatId(uuid4()))
    created_at: datetime = field(default_factory=_now)
    last_active_at: datetime = field(default_factory=_now)


class ChatRegistry:
    """Holds chat records and applies naming rules on create and first input."""

    def __init__(self):
        self._chats: dict[ChatId, ChatRecord] = {}

    def create_chat(
        self,
        prompt: str | None = None,
        name: str | None = None,
        parent_id: ChatId | None = None,
    ) -> ChatRecord:
        if parent_id is not None and parent_id not in self._chats:
            raise ResourceNotFoundError(
                "Chat", str(parent_id), ErrorContext(chat_id=str(parent_id)),
            )
        chat = ChatRecord(
            name=initial_chat_name(prompt, name),
            prompt=prompt,
            parent_id=parent_id,
        )
        self._chats[chat.id] = chat
        logger.info(
            f"Chat created: {chat.name!r}",
            extra={"chat_id": str(chat.id)},
        )
        return chat

    def get_chat(self, chat_id: ChatId) -> ChatRecord:
        chat = self._chats.get(chat_id)
        if chat is None:
            raise ResourceNotFoundError(
                "Chat", str(chat_id), ErrorContext(chat_id=str(chat_id)),
            )
        return chat

    def list_chats(self) -> list[ChatRecord]:
        """All chats, newest first."""
        return sorted(
            self._chats.values(), key=lambda c: c.created_at, reverse=True,
        )

    def get_children(self, parent_id: ChatId) -> list[ChatRecord]:
        self.get_chat(parent_id)
        return [c for c in self._chats.values() if c.parent_id == parent_id]

    def record_first_input(self, chat_id: ChatId, text: str) -> ChatRecord:
        """Rename a still-default chat from the first line the user typed."""
        chat = self.get_chat(chat_id)
        chat.last_active_at = _now()
        new_name = name_after_first_input(chat.name, text)
        if new_name is not None:
            chat.name = new_name
            logger.info(
                f"Chat named from first input: {new_name!r}",
                extra={"chat_id": str(chat_id)},
            )
        return chat

    def rename_chat(self, chat_id: ChatId, name: str) -> ChatRecord:
        chat = self.get_chat(chat_id)
        chat.name = name
        logger.info(f"Chat renamed: {name!r}", extra={"chat_id": str(chat_id)})
        return chat

    def delete_chat(self, chat_id: ChatId) -> None:
        self.get_chat(chat_id)
        del self._chats[chat_id]
        logger.info("Chat deleted", extra={"chat_id": str(chat_id)})
