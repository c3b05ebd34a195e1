"""Chat Schemas — Pydantic models with field-level validation for chat endpoints.

Invariants:
    - ChatRename.name: 1-200 chars, stripped, non-empty
    - Prompts and first inputs are kept raw (terminal noise is the deriver's job)
    - ChatResponse built from registry records via from_attributes

Design Decisions:
    - field_validator for side-effect-free transforms (strip) — keeps models pure
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from session_titles.core.domain_types import ChatStatus
from session_titles.schemas.title import MAX_PROMPT_LENGTH

MAX_NAME_LENGTH = 200


class ChatCreate(BaseModel):
    """Chat creation — name is optional; without it the prompt names the chat."""
    prompt: str | None = Field(None, max_length=MAX_PROMPT_LENGTH)
    name: str | None = Field(None, max_length=MAX_NAME_LENGTH)
    parent_id: UUID | None = None


class ChatFirstInput(BaseModel):
    input: str = Field(max_length=MAX_PROMPT_LENGTH)


class ChatRename(BaseModel):
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class ChatResponse(BaseModel):
    """Chat response — public-facing chat data."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    status: ChatStatus
    prompt: str | None = None
    parent_id: UUID | None = None
    created_at: datetime
    last_active_at: datetime
