"""Schedules — scheduled prompts named from their prompt text.

Invariants:
    - Trigger shape validated twice: by ScheduleCreate (400) and by the registry
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from session_titles.api.dependencies import get_schedule_registry
from session_titles.core.domain_types import ScheduleId
from session_titles.schemas.schedule import ScheduleCreate, ScheduleResponse
from session_titles.services.schedule_registry import ScheduleRegistry

router = APIRouter(prefix="/api/v1/schedules", tags=["schedules"])


@router.post(
    "", response_model=ScheduleResponse, status_code=status.HTTP_201_CREATED,
)
async def create_schedule(
    body: ScheduleCreate,
    registry: ScheduleRegistry = Depends(get_schedule_registry),
):
    schedule = registry.create_schedule(
        prompt=body.prompt, cron=body.cron, at=body.at,
        created_by=body.created_by,
    )
    return ScheduleResponse.model_validate(schedule)


@router.get("", response_model=list[ScheduleResponse])
async def list_schedules(
    registry: ScheduleRegistry = Depends(get_schedule_registry),
):
    return [
        ScheduleResponse.model_validate(s) for s in registry.list_schedules()
    ]


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_schedule(
    schedule_id: UUID,
    registry: ScheduleRegistry = Depends(get_schedule_registry),
):
    registry.delete_schedule(ScheduleId(schedule_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
