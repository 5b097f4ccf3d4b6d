"""Title-based classification of protected ritual meetings.

Every component that cares about the meeting type goes through
detect_meeting_type() so the keyword table lives in exactly one place.
"""

from typing import Optional

from app.core.meeting_score.types import ProtectedType

# Priority order matters: first matching row wins
PROTECTED_TYPE_PATTERNS: tuple[tuple[ProtectedType, tuple[str, ...]], ...] = (
    (ProtectedType.L10, ("l10", "level 10", "weekly l10")),
    (ProtectedType.IDS, ("ids", "issues")),
    (ProtectedType.QUARTERLY, ("quarterly", "annual")),
)

ONE_ON_ONE_PATTERNS: tuple[str, ...] = ("1:1", "1on1", "one on one")

RITUAL_LABELS: dict[ProtectedType, str] = {
    ProtectedType.L10: "L10",
    ProtectedType.IDS: "IDS session",
    ProtectedType.QUARTERLY: "Quarterly planning",
}


def detect_meeting_type(title: Optional[str]) -> ProtectedType:
    """
    Classify a meeting title into a protected type.

    Case-insensitive substring match against PROTECTED_TYPE_PATTERNS.

    Args:
        title: Free-text meeting title (None or empty allowed)

    Returns:
        Matching ProtectedType, or ProtectedType.NONE
    """
    text = (title or "").lower()
    for meeting_type, patterns in PROTECTED_TYPE_PATTERNS:
        if any(p in text for p in patterns):
            return meeting_type
    return ProtectedType.NONE


def is_one_on_one(title: Optional[str]) -> bool:
    """Whether the title looks like a one-on-one."""
    text = (title or "").lower()
    return any(p in text for p in ONE_ON_ONE_PATTERNS)
