"""Titles — stateless title derivation over HTTP.

Invariants:
    - Always 200 for a valid body: the deriver is total
"""

from fastapi import APIRouter

from session_titles.core.derive_title import derive_short_title
from session_titles.schemas.title import TitleRequest, TitleResponse

router = APIRouter(prefix="/api/v1/titles", tags=["titles"])


@router.post("", response_model=TitleResponse)
async def derive_title(body: TitleRequest):
    """Derive a short display title from a raw prompt."""
    return TitleResponse(title=derive_short_title(body.prompt))
