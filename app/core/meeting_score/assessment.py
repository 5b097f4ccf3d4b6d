"""Full meeting assessment.

Runs every component for one meeting:
1. Detect the protected meeting type from the title
2. Score viability
3. Score preparedness (protected mode and a recognized type only)
4. Build the factor breakdown
5. Estimate savings and pick next steps

Always computed fresh from the input; nothing is cached or stored.
"""

import logging
from typing import Optional

from app.core.logging import get_logger, log_with_context
from app.core.meeting_score.actions import plan_actions
from app.core.meeting_score.breakdown import analyze_breakdown
from app.core.meeting_score.detector import detect_meeting_type
from app.core.meeting_score.preparedness import score_preparedness
from app.core.meeting_score.savings import estimate_savings
from app.core.meeting_score.types import AssessmentInput, MeetingAssessment, ProtectedType
from app.core.meeting_score.viability import score_viability

logger = get_logger(__name__)


def assess_meeting(
    assessment: AssessmentInput,
    protected_mode: bool = False,
    hourly_rate: Optional[float] = None,
) -> MeetingAssessment:
    """
    Assess a proposed meeting end to end.

    Args:
        assessment: Validated meeting description
        protected_mode: EOS mode flag, threaded through every component
        hourly_rate: Cost per attendee-hour for savings, defaults to settings

    Returns:
        MeetingAssessment with score, breakdown, preparedness, savings and actions
    """
    meeting_type = detect_meeting_type(assessment.title)
    result = score_viability(assessment, protected_mode)

    preparedness = None
    if protected_mode and meeting_type != ProtectedType.NONE:
        preparedness = score_preparedness(assessment, meeting_type)

    savings = estimate_savings(assessment, result.score, result.recommendation, hourly_rate)

    log_with_context(
        logger,
        logging.INFO,
        "Assessed meeting",
        score=result.score,
        recommendation=result.recommendation.value,
        meeting_type=meeting_type.value,
        protected_mode=protected_mode,
        hours_saved=round(savings.potential_hours_saved, 2),
    )

    return MeetingAssessment(
        meeting_type=meeting_type,
        protected_mode=protected_mode,
        result=result,
        breakdown=analyze_breakdown(assessment, protected_mode),
        preparedness=preparedness,
        savings=savings,
        actions=plan_actions(assessment, result.recommendation, protected_mode),
    )
