"""Explain a viability score as signed factors."""

from app.core.meeting_score.factors import compute_factors
from app.core.meeting_score.types import AssessmentInput, Breakdown

# Rows listed even when they contribute nothing
ALWAYS_LISTED_KEYS = frozenset({"dri"})


def analyze_breakdown(assessment: AssessmentInput, protected_mode: bool = False) -> Breakdown:
    """
    List the factors behind a viability score.

    Zero-impact duration and group-size rows are dropped; the DRI row is
    always kept and lands in ``neutral`` when a DRI is present.

    Args:
        assessment: Validated meeting description
        protected_mode: Same flag passed to score_viability()

    Returns:
        Breakdown with helping (largest first), hurting (most negative first)
        and neutral factors
    """
    listed = [
        f for f in compute_factors(assessment, protected_mode)
        if f.impact != 0 or f.key in ALWAYS_LISTED_KEYS
    ]

    return Breakdown(
        helping=sorted((f for f in listed if f.impact > 0), key=lambda f: -f.impact),
        hurting=sorted((f for f in listed if f.impact < 0), key=lambda f: f.impact),
        neutral=[f for f in listed if f.impact == 0],
    )
