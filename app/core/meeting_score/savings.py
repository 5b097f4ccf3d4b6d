"""Time and cost reclaimed by following a recommendation."""

from typing import Iterable, Optional

from app.core.config import get_settings
from app.core.meeting_score.types import (
    AssessmentInput,
    Recommendation,
    SavingsEstimate,
    SavingsSummary,
)

# Share of the meeting's person-hours given back
SAVINGS_FRACTIONS: dict[Recommendation, float] = {
    Recommendation.SKIP: 1.0,
    Recommendation.ASYNC_FIRST: 0.8,
    Recommendation.SHORTEN: 0.4,
    Recommendation.PROCEED: 0.0,
}


def estimate_savings(
    assessment: AssessmentInput,
    score: float,
    recommendation: Recommendation,
    hourly_rate: Optional[float] = None,
) -> SavingsEstimate:
    """
    Estimate reclaimed person-hours and cost.

    Args:
        assessment: Validated meeting description
        score: Viability score (informational; the fraction depends only on
            the recommendation)
        recommendation: Verdict from score_viability()
        hourly_rate: Cost per attendee-hour, defaults to DEFAULT_HOURLY_RATE

    Returns:
        SavingsEstimate
    """
    if hourly_rate is None:
        hourly_rate = get_settings().DEFAULT_HOURLY_RATE

    hours = assessment.duration / 60
    fraction = SAVINGS_FRACTIONS[recommendation]
    person_hours = hours * assessment.attendee_count
    total_cost = person_hours * hourly_rate

    return SavingsEstimate(
        potential_hours_saved=person_hours * fraction,
        total_cost=total_cost,
        cost_saved=total_cost * fraction,
    )


def summarize_savings(
    records: Iterable[tuple[AssessmentInput, Recommendation]],
    hourly_rate: Optional[float] = None,
) -> SavingsSummary:
    """
    Total the savings across assessed meetings (dashboard view).

    Args:
        records: (assessment, recommendation) pairs; date filtering is up to the caller
        hourly_rate: Cost per attendee-hour, defaults to DEFAULT_HOURLY_RATE

    Returns:
        SavingsSummary with every recommendation present in the counts
    """
    counts = {rec: 0 for rec in Recommendation}
    total_hours = 0.0
    total_cost = 0.0
    n = 0

    for assessment, recommendation in records:
        estimate = estimate_savings(assessment, 0.0, recommendation, hourly_rate)
        total_hours += estimate.potential_hours_saved
        total_cost += estimate.cost_saved
        counts[recommendation] += 1
        n += 1

    return SavingsSummary(
        assessments=n,
        total_hours_saved=total_hours,
        total_cost_saved=total_cost,
        recommendation_counts=counts,
    )
