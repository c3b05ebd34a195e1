"""Schedule Schemas — scheduled prompt creation and listing.

Invariants:
    - ScheduleCreate carries exactly one of cron / at (cross-validated)
    - ScheduleCreate.prompt: 1-100000 chars, must contain non-whitespace
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from session_titles.schemas.title import MAX_PROMPT_LENGTH


class ScheduleCreate(BaseModel):
    prompt: str = Field(min_length=1, max_length=MAX_PROMPT_LENGTH)
    cron: str | None = Field(None, min_length=1, max_length=200)
    at: datetime | None = None
    created_by: str | None = Field(None, max_length=200)

    @field_validator("prompt")
    @classmethod
    def reject_blank_prompt(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("prompt cannot be empty or whitespace")
        return v

    @model_validator(mode="after")
    def validate_trigger(self):
        if (self.cron is None) == (self.at is None):
            raise ValueError("exactly one of cron or at is required")
        return self


class ScheduleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    prompt: str
    trigger: dict
    enabled: bool
    created_by: str | None = None
    created_at: datetime
    last_run_at: datetime | None = None
    last_run_status: str | None = None
