"""Title Schemas — request/response models for the stateless title endpoint.

Invariants:
    - TitleRequest.prompt is passed through RAW (no strip): the deriver needs the
      untouched input for its noise-only fallback
    - Empty prompt is valid and yields an empty title
"""

from pydantic import BaseModel, Field

MAX_PROMPT_LENGTH = 100_000


class TitleRequest(BaseModel):
    prompt: str = Field(max_length=MAX_PROMPT_LENGTH)


class TitleResponse(BaseModel):
    title: str
