"""Registry Dependencies — process-wide registries exposed as FastAPI dependencies.

Invariants:
    - One ChatRegistry and one ScheduleRegistry per process
    - Routes obtain registries only through get_chat_registry / get_schedule_registry

Design Decisions:
    - Singletons created on startup via init_registries (lifespan), so tests can
      swap them with app.dependency_overrides or a fresh init
"""

from session_titles.services.chat_registry import ChatRegistry
from session_titles.services.schedule_registry import ScheduleRegistry

chat_registry: ChatRegistry | None = None
schedule_registry: ScheduleRegistry | None = None


def init_registries():
    global chat_registry, schedule_registry
    chat_registry = ChatRegistry()
    schedule_registry = ScheduleRegistry()


def get_chat_registry() -> ChatRegistry:
    """FastAPI dependency for the chat registry."""
    if chat_registry is None:
        raise RuntimeError("Registries not initialized")
    return chat_registry


def get_schedule_registry() -> ScheduleRegistry:
    """FastAPI dependency for the schedule registry."""
    if schedule_registry is None:
        raise RuntimeError("Registries not initialized")
    return schedule_registry
