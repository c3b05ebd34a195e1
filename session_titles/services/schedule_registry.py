"""Schedule Registry — in-memory scheduled prompts, each named from its prompt.

Invariants:
    - A schedule has exactly one trigger: cron (recurring) or once (single instant)
    - Schedule names are always derived from the prompt, never user-supplied
    - Unknown ids raise ResourceNotFoundError

Design Decisions:
    - Registry only records schedules; running them needs a PTY and lives elsewhere
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from session_titles.core.derive_title import derive_short_title
from session_titles.core.domain_types import ScheduleId, TriggerType
from session_titles.core.errors import (
    ErrorContext, ResourceNotFoundError, ScheduleTriggerError,
)

logger = logging.getLogger(__name__)


@dataclass
class ScheduleRecord:
    """A scheduled prompt as recorded by the registry.

    enabled, last_run_at and last_run_status belong to the runner that executes
    schedules; the registry only initializes them (enabled, never run).
    """
    name: str
    prompt: str
    trigger: dict
    created_by: str | None = None
    enabled: bool = True
    id: ScheduleId = field(default_factory=lambda: ScheduleId(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_run_at: datetime | None = None
    last_run_status: str | None = None


def build_trigger(cron: str | None, at: datetime | None) -> dict:
    """Trigger dict for exactly one of cron / at."""
    if (cron is None) == (at is None):
        raise ScheduleTriggerError()
    if cron is not None:
        return {"type": TriggerType.CRON.value, "cron": cron}
    return {"type": TriggerType.ONCE.value, "at": at.isoformat()}


class ScheduleRegistry:

    def __init__(self):
        self._schedules: dict[ScheduleId, ScheduleRecord] = {}

    def create_schedule(
        self,
        prompt: str,
        cron: str | None = None,
        at: datetime | None = None,
        created_by: str | None = None,
    ) -> ScheduleRecord:
        schedule = ScheduleRecord(
            name=derive_short_title(prompt),
            prompt=prompt,
            trigger=build_trigger(cron, at),
            created_by=created_by,
        )
        self._schedules[schedule.id] = schedule
        logger.info(
            f"Schedule created: {schedule.name!r} ({schedule.trigger['type']})",
            extra={"schedule_id": str(schedule.id)},
        )
        return schedule

    def get_schedule(self, schedule_id: ScheduleId) -> ScheduleRecord:
        schedule = self._schedules.get(schedule_id)
        if schedule is None:
            raise ResourceNotFoundError(
                "Schedule", str(schedule_id),
                ErrorContext(schedule_id=str(schedule_id)),
            )
        return schedule

    def list_schedules(self) -> list[ScheduleRecord]:
        return sorted(self._schedules.values(), key=lambda s: s.created_at)

    def delete_schedule(self, schedule_id: ScheduleId) -> None:
        self.get_schedule(schedule_id)
        del self._schedules[schedule_id]
        logger.info("Schedule deleted", extra={"schedule_id": str(schedule_id)})
