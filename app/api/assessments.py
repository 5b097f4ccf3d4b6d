"""API endpoints for meeting assessments."""

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from app.core.logging import get_logger
from app.core.meeting_score import (
    AssessmentInput,
    InvalidAssessmentInput,
    MeetingAssessment,
    ProtectedType,
    Recommendation,
    SavingsSummary,
    assess_meeting,
    detect_meeting_type,
    suggest_agenda,
    summarize_savings,
)
from app.core.meeting_score.types import SuggestedAgendaItem

logger = get_logger(__name__)

router = APIRouter()


class ScoreAssessmentRequest(BaseModel):
    """Request to score a proposed meeting."""

    assessment: AssessmentInput = Field(..., description="Meeting description")
    protected_mode: bool = Field(default=False, description="EOS mode")
    hourly_rate: Optional[float] = Field(
        None, ge=0, description="Cost per attendee-hour (defaults to DEFAULT_HOURLY_RATE)"
    )


class SuggestAgendaRequest(BaseModel):
    """Request to suggest an agenda."""

    assessment: AssessmentInput
    protected_mode: bool = False


class SuggestAgendaResponse(BaseModel):
    """Suggested agenda for a meeting."""

    meeting_type: ProtectedType
    items: list[SuggestedAgendaItem]


class AssessedMeeting(BaseModel):
    """A previously scored meeting, as held by the caller."""

    assessment: AssessmentInput
    recommendation: Recommendation


class SavingsSummaryRequest(BaseModel):
    """Request to total savings over past assessments."""

    records: list[AssessedMeeting] = Field(default_factory=list)
    hourly_rate: Optional[float] = Field(None, ge=0)


@router.post("/assessments/score", response_model=MeetingAssessment)
async def score_assessment_api(request: ScoreAssessmentRequest) -> MeetingAssessment:
    """
    Score a proposed meeting.

    Returns the viability score and recommendation, the factor breakdown,
    preparedness (protected mode, recognized ritual titles only), savings
    and next steps.

    Raises:
        HTTPException 422: If the assessment violates the input contract
    """
    try:
        return assess_meeting(
            request.assessment,
            protected_mode=request.protected_mode,
            hourly_rate=request.hourly_rate,
        )
    except InvalidAssessmentInput as e:
        logger.warning(f"Rejected assessment: {e}")
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/assessments/agenda", response_model=SuggestAgendaResponse)
async def suggest_agenda_api(request: SuggestAgendaRequest) -> SuggestAgendaResponse:
    """Suggest a template agenda for a meeting."""
    return SuggestAgendaResponse(
        meeting_type=detect_meeting_type(request.assessment.title),
        items=suggest_agenda(request.assessment, request.protected_mode),
    )


@router.post("/assessments/summary", response_model=SavingsSummary)
async def savings_summary_api(request: SavingsSummaryRequest) -> SavingsSummary:
    """Total the savings across previously assessed meetings."""
    summary = summarize_savings(
        ((r.assessment, r.recommendation) for r in request.records),
        hourly_rate=request.hourly_rate,
    )
    logger.info(
        f"Savings summary: assessments={summary.assessments} "
        f"hours={summary.total_hours_saved:.2f}"
    )
    return summary
