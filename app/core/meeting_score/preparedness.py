"""Preparedness scoring for protected ritual meetings (L10, IDS, Quarterly).

Starts at 5.0 and runs eight checks. Every check that is evaluated adds
exactly one strength or one tip. Checks without an ideal for the meeting
type (IDS duration and frequency) are skipped entirely.
"""

from dataclasses import dataclass
from typing import Optional

from app.core.logging import get_logger
from app.core.meeting_score.factors import clamp_score, round_score
from app.core.meeting_score.types import (
    BASELINE_SCORE,
    AssessmentInput,
    InvalidAssessmentInput,
    PreparednessLevel,
    PreparednessResult,
    ProtectedType,
    RecurrenceFrequency,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class RitualProfile:
    """Ideal setup for one protected meeting type."""

    name: str
    agenda_keywords: tuple[str, ...]
    min_attendees: int
    max_attendees: int
    ideal_duration: Optional[int] = None
    duration_tolerance: int = 0
    ideal_frequency: Optional[RecurrenceFrequency] = None


RITUAL_PROFILES: dict[ProtectedType, RitualProfile] = {
    ProtectedType.L10: RitualProfile(
        name="L10",
        agenda_keywords=(
            "segue", "scorecard", "rock", "rocks", "headlines",
            "to-do", "todos", "ids", "issues", "conclude",
        ),
        min_attendees=3,
        max_attendees=8,
        ideal_duration=90,
        duration_tolerance=15,
        ideal_frequency=RecurrenceFrequency.WEEKLY,
    ),
    ProtectedType.IDS: RitualProfile(
        name="IDS session",
        agenda_keywords=("identify", "discuss", "solve", "issues", "ids"),
        min_attendees=2,
        max_attendees=7,
    ),
    ProtectedType.QUARTERLY: RitualProfile(
        name="Quarterly",
        agenda_keywords=(
            "review", "rocks", "vision", "goals", "scorecard",
            "issues", "plan", "next quarter",
        ),
        min_attendees=4,
        max_attendees=12,
        ideal_duration=480,
        duration_tolerance=120,
        ideal_frequency=RecurrenceFrequency.QUARTERLY,
    ),
}

MIN_KEYWORD_HITS = 2
EXAMPLE_KEYWORD_COUNT = 3

# (exclusive upper bound, level), checked in order
LEVEL_THRESHOLDS: tuple[tuple[float, PreparednessLevel], ...] = (
    (3.0, PreparednessLevel.NOT_READY),
    (5.0, PreparednessLevel.NEEDS_WORK),
    (7.5, PreparednessLevel.ALMOST_READY),
)


def preparedness_level_for_score(score: float) -> PreparednessLevel:
    """Map a 0-10 preparedness score to its level."""
    for upper, level in LEVEL_THRESHOLDS:
        if score < upper:
            return level
    return PreparednessLevel.FULLY_PREPARED


def matched_agenda_keywords(assessment: AssessmentInput, keywords: tuple[str, ...]) -> set[str]:
    """Distinct keywords found in any agenda item title (case-insensitive)."""
    titles = [item.title.lower() for item in assessment.agenda_items]
    return {kw for kw in keywords if any(kw in title for title in titles)}


def score_preparedness(
    assessment: AssessmentInput,
    meeting_type: ProtectedType,
) -> PreparednessResult:
    """
    Score how ready a protected ritual meeting is.

    Args:
        assessment: Validated meeting description
        meeting_type: Type already detected from the title (must not be NONE)

    Returns:
        PreparednessResult with score, level, tips and strengths

    Raises:
        InvalidAssessmentInput: If meeting_type is ProtectedType.NONE
    """
    profile = RITUAL_PROFILES.get(meeting_type)
    if profile is None:
        raise InvalidAssessmentInput(
            f"Preparedness applies only to protected meeting types, got {meeting_type.value}"
        )

    score = BASELINE_SCORE
    tips: list[str] = []
    strengths: list[str] = []

    # ==========================================================================
    # Check 1: Agenda exists
    # ==========================================================================
    if assessment.has_agenda:
        score += 2.0
        strengths.append("Agenda is prepared")
    else:
        score -= 2.0
        tips.append(f"Prepare an agenda using the standard {profile.name} format")

    # ==========================================================================
    # Check 2: Agenda follows the ritual format
    # ==========================================================================
    if assessment.has_agenda:
        if not assessment.agenda_items:
            score -= 0.5
            tips.append("Add the agenda items so everyone knows what's covered")
        else:
            hits = matched_agenda_keywords(assessment, profile.agenda_keywords)
            if len(hits) >= MIN_KEYWORD_HITS:
                score += 1.5
                strengths.append(f"Agenda follows the {profile.name} format")
            else:
                score -= 0.5
                examples = ", ".join(profile.agenda_keywords[:EXAMPLE_KEYWORD_COUNT])
                tips.append(f"Structure the agenda around the {profile.name} format (e.g. {examples})")

    # ==========================================================================
    # Check 3: Attendee count in range
    # ==========================================================================
    count = assessment.attendee_count
    if profile.min_attendees <= count <= profile.max_attendees:
        score += 1.0
        strengths.append(f"{count} attendees is the right size for a {profile.name}")
    else:
        score -= 1.0
        if count < profile.min_attendees:
            tips.append(
                f"Too few attendees ({count}); a {profile.name} works best with "
                f"{profile.min_attendees}-{profile.max_attendees} people"
            )
        else:
            tips.append(
                f"Too many attendees ({count}); keep a {profile.name} to "
                f"{profile.min_attendees}-{profile.max_attendees} people"
            )

    # ==========================================================================
    # Check 4: DRI assigned
    # ==========================================================================
    if assessment.has_dri:
        score += 0.5
        strengths.append("A DRI owns the outcome")
    else:
        score -= 1.0
        tips.append("Assign a DRI to run the meeting and own the outcome")

    # ==========================================================================
    # Check 5: Duration near the ideal
    # ==========================================================================
    if profile.ideal_duration is not None:
        if abs(assessment.duration - profile.ideal_duration) <= profile.duration_tolerance:
            score += 1.0
            strengths.append(f"{assessment.duration} minutes fits the {profile.name} format")
        else:
            score -= 0.5
            tips.append(
                f"Plan for about {profile.ideal_duration} minutes "
                f"(currently {assessment.duration})"
            )

    # ==========================================================================
    # Check 6: Recurring
    # ==========================================================================
    if assessment.is_recurring:
        score += 0.5
        strengths.append("Scheduled as a recurring meeting")
    else:
        score -= 1.5
        tips.append(f"Make the {profile.name} a recurring meeting on a fixed schedule")

    # ==========================================================================
    # Check 7: Frequency matches the ritual cadence
    # ==========================================================================
    frequency = assessment.recurrence_frequency
    if profile.ideal_frequency is not None and assessment.is_recurring and frequency is not None:
        if frequency == profile.ideal_frequency:
            score += 0.5
            strengths.append(f"Runs {frequency.value.lower()}, the standard cadence")
        else:
            score -= 0.5
            tips.append(
                f"Run it {profile.ideal_frequency.value.lower()} instead of "
                f"{frequency.value.lower()}"
            )

    # ==========================================================================
    # Check 8: No optional attendees
    # ==========================================================================
    optional = assessment.optional_count
    if optional == 0:
        score += 0.5
        strengths.append("Everyone invited is required")
    else:
        score -= 0.5
        tips.append(f"Remove the {optional} optional attendee(s); everyone should be essential")

    final_score = round_score(clamp_score(score))
    level = preparedness_level_for_score(final_score)

    logger.debug(
        f"Preparedness type={meeting_type.value} score={final_score} level={level.value} "
        f"tips={len(tips)} strengths={len(strengths)}"
    )

    return PreparednessResult(
        score=final_score,
        level=level,
        tips=tips,
        strengths=strengths,
    )
