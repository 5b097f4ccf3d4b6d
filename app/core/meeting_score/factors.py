"""Weighted factor table for meeting viability.

The scorer sums these factors and the breakdown analyzer lists them, so both
always agree on the arithmetic. Each factor is keyed by a single input field;
the only cross-field terms are the duration exemptions and the optional
attendee check.
"""

from decimal import ROUND_HALF_UP, Decimal

from app.core.meeting_score.detector import detect_meeting_type, is_one_on_one
from app.core.meeting_score.types import (
    BASELINE_SCORE,
    MAX_SCORE,
    MIN_SCORE,
    AssessmentInput,
    Level,
    MeetingPurpose,
    MeetingUrgency,
    ProtectedType,
    ScoreFactor,
)

# =============================================================================
# Weights
# =============================================================================

PROTECTED_BOOSTS: dict[ProtectedType, float] = {
    ProtectedType.L10: 3.0,
    ProtectedType.IDS: 2.0,
    ProtectedType.QUARTERLY: 2.5,
}
ONE_ON_ONE_BOOST = 1.0

PURPOSE_WEIGHTS: dict[MeetingPurpose, float] = {
    MeetingPurpose.INFO_SHARE: -1.5,
    MeetingPurpose.DECIDE: 1.0,
    MeetingPurpose.BRAINSTORM: 0.5,
    MeetingPurpose.ALIGN: 0.5,
}

URGENCY_WEIGHTS: dict[MeetingUrgency, float] = {
    MeetingUrgency.TODAY: 0.5,
    MeetingUrgency.THIS_WEEK: 0.25,
    MeetingUrgency.FLEXIBLE: -0.5,
}

INTERACTIVITY_WEIGHTS: dict[Level, float] = {
    Level.HIGH: 1.0,
    Level.MEDIUM: 0.5,
    Level.LOW: -1.0,
}

COMPLEXITY_WEIGHTS: dict[Level, float] = {
    Level.HIGH: 0.75,
    Level.MEDIUM: 0.25,
    Level.LOW: -0.5,
}

DECISION_REQUIRED_WEIGHT = 1.0
NO_DECISION_WEIGHT = -0.5

ASYNC_POSSIBLE_WEIGHT = -1.0
NOT_ASYNC_WEIGHT = 0.75

HAS_AGENDA_WEIGHT = 0.5
NO_AGENDA_WEIGHT = -1.0

NO_DRI_WEIGHT = -0.75
OPTIONAL_HEAVY_WEIGHT = -0.25

# Long-duration penalty does not apply to rituals whose standard length exceeds 90 min
LONG_DURATION_EXEMPT_TYPES = frozenset({ProtectedType.QUARTERLY, ProtectedType.L10})

PURPOSE_LABELS: dict[MeetingPurpose, str] = {
    MeetingPurpose.INFO_SHARE: "Info Sharing",
    MeetingPurpose.DECIDE: "Decision Needed",
    MeetingPurpose.BRAINSTORM: "Brainstorming",
    MeetingPurpose.ALIGN: "Alignment",
}

PURPOSE_DESCRIPTIONS: dict[MeetingPurpose, str] = {
    MeetingPurpose.INFO_SHARE: "One-way updates usually work better as a memo or recording",
    MeetingPurpose.DECIDE: "Making a decision together is a strong reason to meet",
    MeetingPurpose.BRAINSTORM: "Generating ideas benefits from live back-and-forth",
    MeetingPurpose.ALIGN: "Getting people on the same page benefits from live discussion",
}

URGENCY_DESCRIPTIONS: dict[MeetingUrgency, str] = {
    MeetingUrgency.TODAY: "Needs to happen today",
    MeetingUrgency.THIS_WEEK: "Needs to happen this week",
    MeetingUrgency.FLEXIBLE: "No time pressure, so async is easy to try first",
}


# =============================================================================
# Factor computation
# =============================================================================


def compute_factors(assessment: AssessmentInput, protected_mode: bool) -> list[ScoreFactor]:
    """
    Compute every viability term for an assessment.

    Duration, group size and DRI rows are always produced (possibly with zero
    impact). The boost, async and optional-attendee rows only appear when
    they apply.

    Args:
        assessment: Validated meeting description
        protected_mode: Whether ritual-meeting boosts are enabled

    Returns:
        Factors in table order
    """
    meeting_type = detect_meeting_type(assessment.title)
    factors: list[ScoreFactor] = []

    boost = _protected_boost(assessment, meeting_type, protected_mode)
    if boost is not None:
        factors.append(boost)

    purpose = assessment.purpose
    factors.append(ScoreFactor(
        key="purpose",
        label=PURPOSE_LABELS[purpose],
        impact=PURPOSE_WEIGHTS[purpose],
        description=PURPOSE_DESCRIPTIONS[purpose],
    ))

    urgency = assessment.urgency
    factors.append(ScoreFactor(
        key="urgency",
        label="Urgent" if urgency != MeetingUrgency.FLEXIBLE else "Flexible Timing",
        impact=URGENCY_WEIGHTS[urgency],
        description=URGENCY_DESCRIPTIONS[urgency],
    ))

    if assessment.decision_required:
        factors.append(ScoreFactor(
            key="decision",
            label="Decision Required",
            impact=DECISION_REQUIRED_WEIGHT,
            description="A decision must come out of this meeting",
        ))
    else:
        factors.append(ScoreFactor(
            key="decision",
            label="No Decision Required",
            impact=NO_DECISION_WEIGHT,
            description="Nothing needs to be decided live",
        ))

    interactivity = assessment.interactivity
    factors.append(ScoreFactor(
        key="interactivity",
        label=f"{interactivity.value.title()} Interactivity",
        impact=INTERACTIVITY_WEIGHTS[interactivity],
        description=f"Expected discussion level is {interactivity.value.lower()}",
    ))

    complexity = assessment.complexity
    factors.append(ScoreFactor(
        key="complexity",
        label=f"{complexity.value.title()} Complexity",
        impact=COMPLEXITY_WEIGHTS[complexity],
        description=f"Topic complexity is {complexity.value.lower()}",
    ))

    if assessment.async_possible is True:
        factors.append(ScoreFactor(
            key="async",
            label="Could Be Async",
            impact=ASYNC_POSSIBLE_WEIGHT,
            description="This could be handled by message, doc or recording",
        ))
    elif assessment.async_possible is False:
        factors.append(ScoreFactor(
            key="async",
            label="Needs Live Discussion",
            impact=NOT_ASYNC_WEIGHT,
            description="This cannot be handled asynchronously",
        ))

    if assessment.has_agenda:
        factors.append(ScoreFactor(
            key="agenda",
            label="Has Agenda",
            impact=HAS_AGENDA_WEIGHT,
            description="An agenda keeps the meeting on track",
        ))
    else:
        factors.append(ScoreFactor(
            key="agenda",
            label="No Agenda",
            impact=NO_AGENDA_WEIGHT,
            description="Meetings without an agenda tend to drift",
        ))

    factors.append(_duration_factor(assessment, meeting_type))
    factors.append(_group_size_factor(assessment.attendee_count))

    if assessment.has_dri:
        factors.append(ScoreFactor(
            key="dri",
            label="Has DRI",
            impact=0.0,
            description="Someone is accountable for the outcome",
        ))
    else:
        factors.append(ScoreFactor(
            key="dri",
            label="No DRI",
            impact=NO_DRI_WEIGHT,
            description="Nobody is accountable for the outcome",
        ))

    count = assessment.attendee_count
    optional = assessment.optional_count
    if count > 2 and optional > count / 2:
        factors.append(ScoreFactor(
            key="optional_attendees",
            label="Mostly Optional Attendees",
            impact=OPTIONAL_HEAVY_WEIGHT,
            description=f"{optional} of {count} attendees are optional",
        ))

    return factors


def _protected_boost(
    assessment: AssessmentInput,
    meeting_type: ProtectedType,
    protected_mode: bool,
) -> ScoreFactor | None:
    """Boost for recognized ritual meetings, only in protected mode."""
    if not protected_mode:
        return None

    if meeting_type == ProtectedType.L10:
        return ScoreFactor(
            key="protected_type",
            label="EOS L10 Meeting",
            impact=PROTECTED_BOOSTS[ProtectedType.L10],
            description="Weekly L10 meetings are a core operating rhythm",
        )
    if meeting_type == ProtectedType.IDS:
        return ScoreFactor(
            key="protected_type",
            label="IDS Session",
            impact=PROTECTED_BOOSTS[ProtectedType.IDS],
            description="Identify, Discuss, Solve sessions resolve real issues",
        )
    if meeting_type == ProtectedType.QUARTERLY:
        return ScoreFactor(
            key="protected_type",
            label="Quarterly Planning",
            impact=PROTECTED_BOOSTS[ProtectedType.QUARTERLY],
            description="Quarterly planning sets Rocks for the next quarter",
        )
    if is_one_on_one(assessment.title):
        return ScoreFactor(
            key="protected_type",
            label="1:1 Meeting",
            impact=ONE_ON_ONE_BOOST,
            description="One-on-ones build accountability and trust",
        )
    return None


def _duration_factor(assessment: AssessmentInput, meeting_type: ProtectedType) -> ScoreFactor:
    minutes = assessment.duration
    high_complexity = assessment.complexity == Level.HIGH
    high_interactivity = assessment.interactivity == Level.HIGH

    if minutes <= 15:
        return ScoreFactor(
            key="duration", label="Short Meeting", impact=0.5,
            description=f"{minutes} minutes keeps it focused",
        )
    if minutes <= 30:
        return ScoreFactor(
            key="duration", label="Short Meeting", impact=0.25,
            description=f"{minutes} minutes is a reasonable length",
        )
    if minutes <= 60:
        return ScoreFactor(
            key="duration", label="Standard Length", impact=0.0,
            description=f"{minutes} minutes is a standard length",
        )
    if minutes <= 90:
        if high_complexity or high_interactivity:
            return ScoreFactor(
                key="duration", label="Long Meeting", impact=0.0,
                description=f"{minutes} minutes is justified by the topic",
            )
        return ScoreFactor(
            key="duration", label="Long Meeting", impact=-0.5,
            description=f"{minutes} minutes is long for this kind of meeting",
        )
    if meeting_type in LONG_DURATION_EXEMPT_TYPES or high_complexity:
        return ScoreFactor(
            key="duration", label="Very Long Meeting", impact=0.0,
            description=f"{minutes} minutes is expected for this meeting",
        )
    return ScoreFactor(
        key="duration", label="Very Long Meeting", impact=-0.75,
        description=f"{minutes} minutes is a big block of everyone's time",
    )


def _group_size_factor(count: int) -> ScoreFactor:
    if count == 0:
        return ScoreFactor(
            key="group_size", label="No Attendees", impact=0.0,
            description="No attendees listed yet",
        )
    if count <= 4:
        return ScoreFactor(
            key="group_size", label="Small Group", impact=0.5,
            description=f"{count} attendees keeps discussion efficient",
        )
    if count <= 7:
        return ScoreFactor(
            key="group_size", label="Mid-Size Group", impact=0.0,
            description=f"{count} attendees",
        )
    if count <= 10:
        return ScoreFactor(
            key="group_size", label="Large Group", impact=-0.25,
            description=f"{count} attendees makes it hard for everyone to contribute",
        )
    return ScoreFactor(
        key="group_size", label="Very Large Group", impact=-0.75,
        description=f"{count} attendees is more of a broadcast than a meeting",
    )


def raw_score(factors: list[ScoreFactor]) -> float:
    """Sum the factors onto the baseline without clamping."""
    return BASELINE_SCORE + sum(f.impact for f in factors)


def clamp_score(score: float) -> float:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def round_score(score: float) -> float:
    """Round to one decimal, halves away from zero (3.25 -> 3.3)."""
    return float(Decimal(str(score)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
