"""Meeting viability scoring engine.

Turns a structured description of a proposed meeting into:
- a 0-10 viability score and SKIP / ASYNC_FIRST / SHORTEN / PROCEED verdict
- the signed factors behind the score
- a preparedness score for protected ritual meetings (L10, IDS, Quarterly)
- estimated time and cost savings, and a list of next steps

Usage:
    from app.core.meeting_score import assess_meeting, parse_assessment

    assessment = parse_assessment(payload)
    report = assess_meeting(assessment, protected_mode=True)
    print(f"{report.result.recommendation.value} ({report.result.score}/10)")
"""

from app.core.meeting_score.actions import plan_actions
from app.core.meeting_score.agenda import suggest_agenda
from app.core.meeting_score.assessment import assess_meeting
from app.core.meeting_score.breakdown import analyze_breakdown
from app.core.meeting_score.detector import detect_meeting_type
from app.core.meeting_score.preparedness import preparedness_level_for_score, score_preparedness
from app.core.meeting_score.savings import estimate_savings, summarize_savings
from app.core.meeting_score.types import (
    AgendaItem,
    AssessmentInput,
    Attendee,
    Breakdown,
    InvalidAssessmentInput,
    MeetingAssessment,
    PreparednessLevel,
    PreparednessResult,
    ProtectedType,
    Recommendation,
    SavingsEstimate,
    SavingsSummary,
    ScoreFactor,
    ScoreResult,
    parse_assessment,
)
from app.core.meeting_score.viability import recommendation_for_score, score_viability

__all__ = [
    "assess_meeting",
    "detect_meeting_type",
    "score_viability",
    "score_preparedness",
    "analyze_breakdown",
    "estimate_savings",
    "summarize_savings",
    "plan_actions",
    "suggest_agenda",
    "parse_assessment",
    "recommendation_for_score",
    "preparedness_level_for_score",
    "AgendaItem",
    "AssessmentInput",
    "Attendee",
    "Breakdown",
    "InvalidAssessmentInput",
    "MeetingAssessment",
    "PreparednessLevel",
    "PreparednessResult",
    "ProtectedType",
    "Recommendation",
    "SavingsEstimate",
    "SavingsSummary",
    "ScoreFactor",
    "ScoreResult",
]
