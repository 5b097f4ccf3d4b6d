"""Pytest configuration and fixtures."""

import os

import pytest

from app.core.config import get_settings
from app.core.meeting_score.types import AgendaItem, AssessmentInput, Attendee


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["SKIPSCORE_ENV"] = "test"
    os.environ.pop("DEFAULT_HOURLY_RATE", None)
    os.environ.pop("ACTION_PLAN_OPTIONAL_ATTENDEE_THRESHOLD", None)
    get_settings.cache_clear()


def build_attendees(count: int, dri: bool = True, optional: int = 0) -> list[Attendee]:
    """First attendee is the DRI (if any); the last `optional` are optional."""
    return [
        Attendee(
            id=f"a{i}",
            name=f"Attendee {i}",
            role="Member",
            is_dri=dri and i == 0,
            is_optional=i >= count - optional,
        )
        for i in range(count)
    ]


def build_assessment(
    attendee_count: int = 5,
    dri: bool = True,
    optional: int = 0,
    agenda: tuple[str, ...] = (),
    **overrides,
) -> AssessmentInput:
    """
    Build an assessment around a well-formed decision meeting.

    Defaults score 8.5: DECIDE, THIS_WEEK, 45 minutes, decision required,
    MEDIUM interactivity and complexity, agenda, 5 attendees with a DRI.
    """
    data = {
        "title": "Project sync",
        "purpose": "DECIDE",
        "urgency": "THIS_WEEK",
        "duration": 45,
        "decision_required": True,
        "interactivity": "MEDIUM",
        "complexity": "MEDIUM",
        "has_agenda": True,
        "attendees": build_attendees(attendee_count, dri=dri, optional=optional),
        "agenda_items": [AgendaItem(title=t, duration=5) for t in agenda],
    }
    data.update(overrides)
    return AssessmentInput.model_validate(data)


@pytest.fixture
def make_assessment():
    """Factory for AssessmentInput with overridable defaults."""
    return build_assessment


@pytest.fixture
def daily_standup():
    """Info-sharing standup: should land in ASYNC_FIRST."""
    return build_assessment(
        title="Daily Standup",
        purpose="INFO_SHARE",
        urgency="TODAY",
        duration=15,
        interactivity="LOW",
        complexity="LOW",
        decision_required=False,
        has_agenda=True,
        attendee_count=3,
    )


@pytest.fixture
def weekly_l10():
    """Well-run weekly L10."""
    return build_assessment(
        title="Weekly L10 Meeting",
        purpose="DECIDE",
        urgency="TODAY",
        duration=90,
        attendee_count=6,
        has_agenda=True,
        agenda=("Segue", "Scorecard", "Rock Review", "IDS", "Conclude"),
        decision_required=True,
        interactivity="HIGH",
        complexity="HIGH",
        is_recurring=True,
        recurrence_frequency="WEEKLY",
    )


@pytest.fixture
def quick_thought():
    """Large, ownerless, agenda-less broadcast."""
    return build_assessment(
        title="Quick Thought",
        purpose="INFO_SHARE",
        urgency="FLEXIBLE",
        duration=120,
        decision_required=False,
        interactivity="LOW",
        complexity="LOW",
        has_agenda=False,
        attendee_count=12,
        dri=False,
    )
