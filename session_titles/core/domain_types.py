"""Domain Types — identity types and enums shared by core, services and API.

Invariants:
    - ChatId, ScheduleId wrap UUIDs — never use bare UUID in domain logic
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ChatId = NewType("ChatId", UUID)
ScheduleId = NewType("ScheduleId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class ChatStatus(str, Enum):
    """Chat lifecycle states as shown in the sidebar.

    Registries here only ever create ACTIVE chats. IDLE, DONE and ERROR are
    set by the terminal (PTY) layer that runs the chat, outside this service.
    """
    ACTIVE = "active"
    IDLE = "idle"
    DONE = "done"
    ERROR = "error"


class TriggerType(str, Enum):
    """How a schedule fires: recurring cron expression or a single instant."""
    CRON = "cron"
    ONCE = "once"
