"""Pydantic models for the meeting viability engine."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_DURATION_MINUTES = 30
BASELINE_SCORE = 5.0
MIN_SCORE = 0.0
MAX_SCORE = 10.0


# =============================================================================
# Enums
# =============================================================================


class MeetingPurpose(str, Enum):
    """Why the meeting is being called."""

    INFO_SHARE = "INFO_SHARE"
    DECIDE = "DECIDE"
    BRAINSTORM = "BRAINSTORM"
    ALIGN = "ALIGN"


class MeetingUrgency(str, Enum):
    """How soon the meeting needs to happen."""

    TODAY = "TODAY"
    THIS_WEEK = "THIS_WEEK"
    FLEXIBLE = "FLEXIBLE"


class Level(str, Enum):
    """Three-step scale shared by interactivity and complexity."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class RecurrenceFrequency(str, Enum):
    """How often a recurring meeting repeats."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    BIWEEKLY = "BIWEEKLY"
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"


class ProtectedType(str, Enum):
    """Recurring ritual meeting category derived from the title."""

    L10 = "L10"
    IDS = "IDS"
    QUARTERLY = "QUARTERLY"
    NONE = "NONE"


class Recommendation(str, Enum):
    """Four-way verdict, ordered from worst to best score bin."""

    SKIP = "SKIP"
    ASYNC_FIRST = "ASYNC_FIRST"
    SHORTEN = "SHORTEN"
    PROCEED = "PROCEED"


class PreparednessLevel(str, Enum):
    """Readiness tier for protected meetings."""

    NOT_READY = "NOT_READY"
    NEEDS_WORK = "NEEDS_WORK"
    ALMOST_READY = "ALMOST_READY"
    FULLY_PREPARED = "FULLY_PREPARED"


# =============================================================================
# Errors
# =============================================================================


class InvalidAssessmentInput(Exception):
    """Raised when an assessment violates the input contract."""

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


# =============================================================================
# Input models
# =============================================================================


class Attendee(BaseModel):
    """A person invited to the meeting."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Caller-owned attendee identifier")
    name: str = Field(default="", description="Display name")
    role: str = Field(default="", description="Free-text role")
    is_dri: bool = Field(default=False, description="Directly responsible individual")
    is_optional: bool = Field(default=False, description="Invited as optional")


class AgendaItem(BaseModel):
    """One line of the meeting agenda."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Agenda item title")
    duration: int = Field(default=0, ge=0, description="Minutes allotted")
    notes: Optional[str] = Field(None, description="Optional notes")


class AssessmentInput(BaseModel):
    """Structured description of a proposed meeting."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="", description="Meeting title, may be empty")
    purpose: MeetingPurpose
    urgency: MeetingUrgency
    duration: int = Field(default=DEFAULT_DURATION_MINUTES, description="Minutes")
    decision_required: bool = Field(default=False)
    interactivity: Level
    complexity: Level
    async_possible: Optional[bool] = Field(
        None, description="Tri-state: None means the question was not answered"
    )
    has_agenda: bool = Field(default=False)
    agenda_items: list[AgendaItem] = Field(default_factory=list)
    attendees: list[Attendee] = Field(default_factory=list)
    is_recurring: Optional[bool] = Field(None)
    recurrence_frequency: Optional[RecurrenceFrequency] = Field(
        None, description="Only meaningful when is_recurring is true"
    )

    @field_validator("title", mode="before")
    @classmethod
    def _title_none_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("decision_required", "has_agenda", mode="before")
    @classmethod
    def _absent_flag_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("duration", mode="before")
    @classmethod
    def _default_duration(cls, value: Any) -> Any:
        # falsy duration falls back to the standard half hour
        if value is None or value == 0:
            return DEFAULT_DURATION_MINUTES
        return value

    @field_validator("duration")
    @classmethod
    def _positive_duration(cls, value: int) -> int:
        if value < 0:
            raise ValueError("duration must be a positive number of minutes")
        return value

    @property
    def attendee_count(self) -> int:
        return len(self.attendees)

    @property
    def optional_count(self) -> int:
        return sum(1 for a in self.attendees if a.is_optional)

    @property
    def has_dri(self) -> bool:
        return any(a.is_dri for a in self.attendees)


def parse_assessment(data: dict[str, Any]) -> AssessmentInput:
    """
    Validate raw caller data into an AssessmentInput.

    Args:
        data: Mapping with AssessmentInput fields

    Returns:
        Validated, immutable AssessmentInput

    Raises:
        InvalidAssessmentInput: If a required field is missing or a value is invalid
    """
    try:
        return AssessmentInput.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise InvalidAssessmentInput(
            f"Invalid assessment input: {fields}",
            errors=e.errors(include_url=False),
        ) from e


# =============================================================================
# Result models
# =============================================================================


class ScoreResult(BaseModel):
    """Viability score and verdict for one meeting."""

    score: float = Field(..., ge=MIN_SCORE, le=MAX_SCORE, description="0-10, one decimal")
    recommendation: Recommendation
    reasoning: str


class ScoreFactor(BaseModel):
    """One signed term of the viability score."""

    key: str = Field(..., description="Stable factor identifier")
    label: str = Field(..., description="Short display label")
    impact: float = Field(..., description="Signed contribution to the score")
    description: str = Field(..., description="Why the factor applied")


class Breakdown(BaseModel):
    """Viability factors partitioned by sign."""

    helping: list[ScoreFactor] = Field(default_factory=list, description="impact > 0, largest first")
    hurting: list[ScoreFactor] = Field(default_factory=list, description="impact < 0, most negative first")
    neutral: list[ScoreFactor] = Field(default_factory=list, description="Emitted rows with zero impact")


class PreparednessResult(BaseModel):
    """Readiness of a protected ritual meeting."""

    score: float = Field(..., ge=MIN_SCORE, le=MAX_SCORE)
    level: PreparednessLevel
    tips: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)


class SavingsEstimate(BaseModel):
    """Person-hours and cost reclaimed by following the recommendation."""

    potential_hours_saved: float
    total_cost: float = Field(..., description="attendees x hours x hourly rate")
    cost_saved: float


class SavingsSummary(BaseModel):
    """Savings totals over many assessed meetings."""

    assessments: int = 0
    total_hours_saved: float = 0.0
    total_cost_saved: float = 0.0
    recommendation_counts: dict[Recommendation, int] = Field(default_factory=dict)


class SuggestedAgendaItem(BaseModel):
    """Template agenda line."""

    title: str
    duration: int


class MeetingAssessment(BaseModel):
    """Everything the results display needs for one meeting."""

    meeting_type: ProtectedType
    protected_mode: bool
    result: ScoreResult
    breakdown: Breakdown
    preparedness: Optional[PreparednessResult] = None
    savings: SavingsEstimate
    actions: list[str] = Field(default_factory=list)
