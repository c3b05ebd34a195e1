"""Schema validation — chat, schedule and title request boundaries.

Invariants:
    - Prompts pass through raw (no stripping) so the deriver sees terminal noise
    - Rename requires a non-blank name, stripped
    - Schedules require exactly one of cron / at
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from session_titles.schemas.chat import ChatCreate, ChatRename
from session_titles.schemas.schedule import ScheduleCreate
from session_titles.schemas.title import TitleRequest


# --- TitleRequest -------------------------------------------------------------

def test_title_request_keeps_prompt_raw():
    req = TitleRequest(prompt="  \x1b[31mhi\x1b[0m  ")
    assert req.prompt == "  \x1b[31mhi\x1b[0m  "


def test_title_request_accepts_empty_prompt():
    assert TitleRequest(prompt="").prompt == ""


def test_title_request_rejects_oversized_prompt():
    with pytest.raises(ValidationError):
        TitleRequest(prompt="x" * 100_001)


# --- ChatCreate / ChatRename --------------------------------------------------

def test_chat_create_all_optional():
    body = ChatCreate()
    assert body.prompt is None
    assert body.name is None
    assert body.parent_id is None


def test_rename_strips_name():
    assert ChatRename(name="  Release  ").name == "Release"


def test_rename_rejects_blank_name():
    with pytest.raises(ValidationError):
        ChatRename(name="   ")


def test_rename_rejects_long_name():
    with pytest.raises(ValidationError):
        ChatRename(name="n" * 201)


# --- ScheduleCreate -----------------------------------------------------------

def test_schedule_with_cron():
    body = ScheduleCreate(prompt="run nightly report", cron="0 2 * * *")
    assert body.cron == "0 2 * * *"
    assert body.at is None


def test_schedule_with_at():
    at = datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)
    body = ScheduleCreate(prompt="send reminder", at=at)
    assert body.at == at


def test_schedule_requires_a_trigger():
    with pytest.raises(ValidationError):
        ScheduleCreate(prompt="send reminder")


def test_schedule_rejects_two_triggers():
    with pytest.raises(ValidationError):
        ScheduleCreate(
            prompt="send reminder", cron="* * * * *",
            at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        )


def test_schedule_rejects_blank_prompt():
    with pytest.raises(ValidationError):
        ScheduleCreate(prompt="   ", cron="* * * * *")
