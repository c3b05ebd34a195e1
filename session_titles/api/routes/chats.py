"""Chats — create, name, rename and delete in-memory chats.

Invariants:
    - Routes never contain naming logic (delegated to ChatRegistry / core/chat_naming.py)
    - Unknown chat ids surface as 404 via the global SessionTitlesError handler
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from session_titles.api.dependencies import get_chat_registry
from session_titles.core.domain_types import ChatId
from session_titles.schemas.chat import (
    ChatCreate, ChatFirstInput, ChatRename, ChatResponse,
)
from session_titles.services.chat_registry import ChatRegistry

router = APIRouter(prefix="/api/v1/chats", tags=["chats"])


@router.post(
    "", response_model=ChatResponse, status_code=status.HTTP_201_CREATED,
)
async def create_chat(
    body: ChatCreate, registry: ChatRegistry = Depends(get_chat_registry),
):
    """Create a chat, named explicitly, from its prompt, or "New Chat"."""
    parent_id = ChatId(body.parent_id) if body.parent_id else None
    chat = registry.create_chat(
        prompt=body.prompt, name=body.name, parent_id=parent_id,
    )
    return ChatResponse.model_validate(chat)


@router.get("", response_model=list[ChatResponse])
async def list_chats(registry: ChatRegistry = Depends(get_chat_registry)):
    return [ChatResponse.model_validate(c) for c in registry.list_chats()]


@router.get("/{chat_id}", response_model=ChatResponse)
async def get_chat(
    chat_id: UUID, registry: ChatRegistry = Depends(get_chat_registry),
):
    return ChatResponse.model_validate(registry.get_chat(ChatId(chat_id)))


@router.get("/{chat_id}/children", response_model=list[ChatResponse])
async def get_children(
    chat_id: UUID, registry: ChatRegistry = Depends(get_chat_registry),
):
    return [
        ChatResponse.model_validate(c)
        for c in registry.get_children(ChatId(chat_id))
    ]


@router.post("/{chat_id}/first-input", response_model=ChatResponse)
async def record_first_input(
    chat_id: UUID,
    body: ChatFirstInput,
    registry: ChatRegistry = Depends(get_chat_registry),
):
    """Report the first line typed into a chat; names it if still "New Chat"."""
    chat = registry.record_first_input(ChatId(chat_id), body.input)
    return ChatResponse.model_validate(chat)


@router.patch("/{chat_id}", response_model=ChatResponse)
async def rename_chat(
    chat_id: UUID,
    body: ChatRename,
    registry: ChatRegistry = Depends(get_chat_registry),
):
    chat = registry.rename_chat(ChatId(chat_id), body.name)
    return ChatResponse.model_validate(chat)


@router.delete("/{chat_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_chat(
    chat_id: UUID, registry: ChatRegistry = Depends(get_chat_registry),
):
    registry.delete_chat(ChatId(chat_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
