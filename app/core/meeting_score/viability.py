"""Meeting viability scoring.

Score = 5.0 baseline + every term from the factor table, clamped to [0, 10]
and rounded to one decimal. The rounded score is then binned:

    [0, 3)   SKIP
    [3, 5)   ASYNC_FIRST
    [5, 7)   SHORTEN
    [7, 10]  PROCEED
"""

from app.core.logging import get_logger
from app.core.meeting_score.detector import RITUAL_LABELS, detect_meeting_type
from app.core.meeting_score.factors import clamp_score, compute_factors, raw_score, round_score
from app.core.meeting_score.types import (
    AssessmentInput,
    ProtectedType,
    Recommendation,
    ScoreResult,
)

logger = get_logger(__name__)

# (exclusive upper bound, recommendation), checked in order
RECOMMENDATION_THRESHOLDS: tuple[tuple[float, Recommendation], ...] = (
    (3.0, Recommendation.SKIP),
    (5.0, Recommendation.ASYNC_FIRST),
    (7.0, Recommendation.SHORTEN),
)

# Reasoning keyed by (recommendation, protected_mode, is_l10_or_ids).
# Ritual templates may reference {meeting}.
REASONING_TEMPLATES: dict[tuple[Recommendation, bool, bool], str] = {
    (Recommendation.SKIP, False, False): (
        "This meeting lacks a decision maker and interactivity. "
        "Consider an async update instead."
    ),
    (Recommendation.ASYNC_FIRST, False, False): (
        "This appears to be an info-sharing session. "
        "A memo or video update is often more effective."
    ),
    (Recommendation.SHORTEN, False, False): (
        "Good intent, but the attendee list is high for the purpose. "
        "Try 15-20 mins max."
    ),
    (Recommendation.PROCEED, False, False): (
        "This meeting has a clear purpose and the right people. "
        "Proceed with a solid agenda."
    ),
    (Recommendation.SKIP, True, False): (
        "This doesn't earn a spot on the calendar. "
        "Drop the topic on the Issues List and handle it in your next L10."
    ),
    (Recommendation.ASYNC_FIRST, True, False): (
        "This reads like a headline, not an issue. "
        "Share it as a headline or to-do and keep the L10 for IDS."
    ),
    (Recommendation.SHORTEN, True, False): (
        "Worth meeting, but keep it tight. "
        "Bring only the people who own the issue and timebox it."
    ),
    (Recommendation.PROCEED, True, False): (
        "This meeting has a clear owner and a real decision to make. "
        "Proceed, and capture to-dos before you conclude."
    ),
    (Recommendation.SKIP, True, True): (
        "This {meeting} is missing the basics. "
        "Fix the agenda, the attendee list and the owner before holding it."
    ),
    (Recommendation.ASYNC_FIRST, True, True): (
        "This {meeting} isn't set up to solve anything yet. "
        "Get the scorecard and issues list in order first."
    ),
    (Recommendation.SHORTEN, True, True): (
        "Protect the {meeting}, but tighten it up. "
        "Stick to the standard agenda and start on time."
    ),
    (Recommendation.PROCEED, True, True): (
        "This {meeting} is a core part of your operating rhythm. "
        "Protect it, start on time and spend most of it in IDS."
    ),
}


def recommendation_for_score(score: float) -> Recommendation:
    """
    Map a 0-10 score to its recommendation bin.

    Args:
        score: Viability score

    Returns:
        Recommendation whose half-open interval contains the score
    """
    for upper, recommendation in RECOMMENDATION_THRESHOLDS:
        if score < upper:
            return recommendation
    return Recommendation.PROCEED


def reasoning_for(
    recommendation: Recommendation,
    protected_mode: bool,
    meeting_type: ProtectedType,
) -> str:
    """Pick the fixed reasoning template for a verdict."""
    protected_mode = bool(protected_mode)
    is_ritual = protected_mode and meeting_type in (ProtectedType.L10, ProtectedType.IDS)
    template = REASONING_TEMPLATES[(recommendation, protected_mode, is_ritual)]
    if is_ritual:
        return template.format(meeting=RITUAL_LABELS[meeting_type])
    return template


def unrounded_score(assessment: AssessmentInput, protected_mode: bool) -> float:
    """Clamped score before the final one-decimal rounding."""
    return clamp_score(raw_score(compute_factors(assessment, protected_mode)))


def score_viability(assessment: AssessmentInput, protected_mode: bool = False) -> ScoreResult:
    """
    Score whether a proposed meeting is worth holding.

    Args:
        assessment: Validated meeting description
        protected_mode: Enables ritual-meeting boosts and EOS wording

    Returns:
        ScoreResult with score, recommendation and reasoning
    """
    score = round_score(unrounded_score(assessment, protected_mode))
    recommendation = recommendation_for_score(score)
    meeting_type = detect_meeting_type(assessment.title)

    logger.debug(
        f"Viability score={score} recommendation={recommendation.value} "
        f"type={meeting_type.value} protected_mode={protected_mode}"
    )

    return ScoreResult(
        score=score,
        recommendation=recommendation,
        reasoning=reasoning_for(recommendation, protected_mode, meeting_type),
    )
