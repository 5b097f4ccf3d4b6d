"""Template agendas.

Protected mode uses the standard EOS formats for the detected meeting type.
Standard mode splits the meeting duration across purpose-specific sections.
"""

from app.core.meeting_score.detector import detect_meeting_type
from app.core.meeting_score.types import (
    AssessmentInput,
    MeetingPurpose,
    ProtectedType,
    SuggestedAgendaItem,
)

# Fixed-length EOS formats, (title, minutes)
RITUAL_AGENDAS: dict[ProtectedType, tuple[tuple[str, int], ...]] = {
    ProtectedType.L10: (
        ("Segue", 5),
        ("Scorecard", 5),
        ("Rock Review", 5),
        ("Customer & Employee Headlines", 5),
        ("To-Do List", 5),
        ("IDS", 60),
        ("Conclude", 5),
    ),
    ProtectedType.QUARTERLY: (
        ("Segue", 15),
        ("Prior Quarter Review", 60),
        ("Review V/TO", 60),
        ("Establish Next Quarter Rocks", 120),
        ("Tackle Key Issues (IDS)", 120),
        ("Next Steps", 30),
        ("Conclude & Rate", 15),
    ),
    ProtectedType.IDS: (
        ("List & Prioritize Issues", 5),
        ("IDS (Identify, Discuss, Solve)", 50),
        ("Recap To-Dos", 5),
    ),
}

# Unrecognized titles in protected mode; IDS gets whatever time is left
DEFAULT_RITUAL_OPENING = (("Segue", 5), ("Review & Updates", 10))
DEFAULT_RITUAL_CLOSING = (("Conclude", 5),)
DEFAULT_DISCUSSION_TITLE = "IDS"
MIN_DISCUSSION_MINUTES = 10

# Share of the meeting per section, in percent
STANDARD_SECTIONS: dict[MeetingPurpose, tuple[tuple[str, int], ...]] = {
    MeetingPurpose.INFO_SHARE: (
        ("Welcome & Overview", 10),
        ("Updates / Presentations", 50),
        ("Key Takeaways", 15),
        ("Q&A", 15),
        ("Action Items", 10),
    ),
    MeetingPurpose.DECIDE: (
        ("Context & Background", 15),
        ("Options Review", 25),
        ("Discussion", 30),
        ("Decision", 20),
        ("Next Steps & Owners", 10),
    ),
    MeetingPurpose.BRAINSTORM: (
        ("Problem Statement", 10),
        ("Ideation / Free Discussion", 45),
        ("Group & Prioritize", 25),
        ("Select Top Ideas", 10),
        ("Action Items", 10),
    ),
    MeetingPurpose.ALIGN: (
        ("Current State Review", 20),
        ("Goals & Objectives", 20),
        ("Discussion & Alignment", 30),
        ("Commitments", 20),
        ("Follow-up Plan", 10),
    ),
}
MIN_SECTION_MINUTES = 5


def suggest_agenda(assessment: AssessmentInput, protected_mode: bool = False) -> list[SuggestedAgendaItem]:
    """
    Suggest agenda items for a meeting.

    Args:
        assessment: Validated meeting description
        protected_mode: Use EOS meeting formats

    Returns:
        Ordered agenda items with minute allocations
    """
    if protected_mode:
        return _ritual_agenda(assessment)
    return _standard_agenda(assessment)


def _ritual_agenda(assessment: AssessmentInput) -> list[SuggestedAgendaItem]:
    meeting_type = detect_meeting_type(assessment.title)
    template = RITUAL_AGENDAS.get(meeting_type)
    if template is None:
        discussion = max(MIN_DISCUSSION_MINUTES, assessment.duration - 20)
        template = (
            *DEFAULT_RITUAL_OPENING,
            (DEFAULT_DISCUSSION_TITLE, discussion),
            *DEFAULT_RITUAL_CLOSING,
        )
    return [SuggestedAgendaItem(title=title, duration=minutes) for title, minutes in template]


def _standard_agenda(assessment: AssessmentInput) -> list[SuggestedAgendaItem]:
    items = []
    for title, pct in STANDARD_SECTIONS[assessment.purpose]:
        # integer half-up rounding of duration * pct / 100
        minutes = (assessment.duration * pct + 50) // 100
        items.append(SuggestedAgendaItem(title=title, duration=max(MIN_SECTION_MINUTES, minutes)))
    return items
