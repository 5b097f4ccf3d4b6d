"""Tests for template agenda suggestions."""

from app.core.meeting_score.agenda import RITUAL_AGENDAS, STANDARD_SECTIONS, suggest_agenda
from app.core.meeting_score.types import MeetingPurpose, ProtectedType


def _pairs(items):
    return [(i.title, i.duration) for i in items]


class TestProtectedMode:
    def test_l10_format(self, make_assessment):
        items = suggest_agenda(make_assessment(title="Weekly L10"), protected_mode=True)
        assert _pairs(items) == list(RITUAL_AGENDAS[ProtectedType.L10])
        assert sum(i.duration for i in items) == 90

    def test_quarterly_format(self, make_assessment):
        items = suggest_agenda(make_assessment(title="Quarterly Planning"), protected_mode=True)
        assert items[3].title == "Establish Next Quarter Rocks"
        assert sum(i.duration for i in items) == 420

    def test_ids_format(self, make_assessment):
        items = suggest_agenda(make_assessment(title="IDS session"), protected_mode=True)
        assert [i.title for i in items][1] == "IDS (Identify, Discuss, Solve)"

    def test_unrecognized_title_fills_ids_slot(self, make_assessment):
        items = suggest_agenda(make_assessment(title="Ops sync", duration=60), protected_mode=True)
        assert _pairs(items) == [("Segue", 5), ("Review & Updates", 10), ("IDS", 40), ("Conclude", 5)]

    def test_ids_slot_has_minimum(self, make_assessment):
        items = suggest_agenda(make_assessment(title="Ops sync", duration=25), protected_mode=True)
        assert dict(_pairs(items))["IDS"] == 10


class TestStandardMode:
    def test_decide_sections(self, make_assessment):
        items = suggest_agenda(make_assessment(purpose="DECIDE", duration=60))
        assert [i.duration for i in items] == [9, 15, 18, 12, 6]
        assert [i.title for i in items] == [t for t, _ in STANDARD_SECTIONS[MeetingPurpose.DECIDE]]

    def test_sections_have_minimum_and_round_half_up(self, make_assessment):
        items = suggest_agenda(make_assessment(purpose="INFO_SHARE", duration=30))
        # 3 -> 5, 15, 4.5 -> 5, 4.5 -> 5, 3 -> 5
        assert [i.duration for i in items] == [5, 15, 5, 5, 5]

    def test_ritual_title_ignored_outside_protected_mode(self, make_assessment):
        items = suggest_agenda(make_assessment(title="Weekly L10", purpose="ALIGN", duration=60))
        assert items[0].title == "Current State Review"
