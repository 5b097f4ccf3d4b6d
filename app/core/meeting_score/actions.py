"""Next steps for each recommendation."""

from app.core.config import get_settings
from app.core.meeting_score.types import AssessmentInput, Recommendation

ACTION_PLANS: dict[tuple[Recommendation, bool], tuple[str, ...]] = {
    (Recommendation.SKIP, False): (
        "Cancel the calendar invite.",
        "Send a status update email instead.",
        "Check in with key stakeholders 1:1 if needed.",
    ),
    (Recommendation.ASYNC_FIRST, False): (
        "Create a Slack thread or channel for this topic.",
        "Record a <5min Loom/Video update.",
        "Solicit feedback via document comments.",
    ),
    (Recommendation.SHORTEN, False): (
        "Cut duration by 50% (e.g. 30min -> 15min).",
        "Remove 'Update' agenda items - send them pre-read.",
    ),
    (Recommendation.PROCEED, False): (
        "Send a detailed agenda 24hrs in advance.",
        "Assign a note-taker for the session.",
        "Define the absolute decision required by the end.",
    ),
    (Recommendation.SKIP, True): (
        "Cancel the calendar invite.",
        "Add the topic to the Issues List for your next L10.",
        "Share any updates as headlines instead.",
    ),
    (Recommendation.ASYNC_FIRST, True): (
        "Post it as a headline before the next L10.",
        "Capture follow-ups as to-dos with a single owner.",
        "Only bring it to IDS if it turns into a real issue.",
    ),
    (Recommendation.SHORTEN, True): (
        "Timebox the meeting and stick to the standard agenda.",
        "Move reporting items to the scorecard review.",
    ),
    (Recommendation.PROCEED, True): (
        "Send the agenda and scorecard ahead of time.",
        "Prioritize the top three issues for IDS.",
        "Recap to-dos and rate the meeting before you conclude.",
    ),
}

OPTIONAL_ATTENDEES_ACTION = "Mark non-essential attendees as Optional."


def plan_actions(
    assessment: AssessmentInput,
    recommendation: Recommendation,
    protected_mode: bool = False,
) -> list[str]:
    """
    Select the follow-up actions for a verdict.

    Args:
        assessment: Validated meeting description
        recommendation: Verdict from score_viability()
        protected_mode: Use EOS wording

    Returns:
        Ordered list of action strings
    """
    actions = list(ACTION_PLANS[(recommendation, bool(protected_mode))])

    threshold = get_settings().ACTION_PLAN_OPTIONAL_ATTENDEE_THRESHOLD
    if recommendation == Recommendation.SHORTEN and assessment.attendee_count > threshold:
        actions.append(OPTIONAL_ATTENDEES_ACTION)

    return actions
