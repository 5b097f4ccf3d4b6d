"""Tests for the viability factor breakdown."""

import itertools

import pytest

from app.core.meeting_score.breakdown import analyze_breakdown
from app.core.meeting_score.factors import clamp_score
from app.core.meeting_score.viability import unrounded_score


def _labels(factors):
    return [f.label for f in factors]


def _keys(factors):
    return {f.key for f in factors}


class TestPartition:
    def test_helping_sorted_descending(self, weekly_l10):
        breakdown = analyze_breakdown(weekly_l10, protected_mode=True)
        impacts = [f.impact for f in breakdown.helping]
        assert impacts == sorted(impacts, reverse=True)
        assert all(i > 0 for i in impacts)
        assert breakdown.helping[0].label == "EOS L10 Meeting"

    def test_hurting_sorted_most_negative_first(self, quick_thought):
        breakdown = analyze_breakdown(quick_thought)
        impacts = [f.impact for f in breakdown.hurting]
        assert impacts == sorted(impacts)
        assert all(i < 0 for i in impacts)
        assert breakdown.hurting[0].impact == -1.5

    def test_has_dri_listed_as_neutral(self, make_assessment):
        breakdown = analyze_breakdown(make_assessment())
        assert [f.label for f in breakdown.neutral] == ["Has DRI"]
        assert breakdown.neutral[0].impact == 0.0

    def test_no_dri_listed_as_hurting(self, make_assessment):
        breakdown = analyze_breakdown(make_assessment(dri=False))
        assert "No DRI" in _labels(breakdown.hurting)
        assert breakdown.neutral == []


class TestOmittedFactors:
    def test_standard_length_omitted(self, make_assessment):
        breakdown = analyze_breakdown(make_assessment(duration=45))
        all_keys = _keys(breakdown.helping) | _keys(breakdown.hurting) | _keys(breakdown.neutral)
        assert "duration" not in all_keys

    def test_mid_size_group_omitted(self, make_assessment):
        breakdown = analyze_breakdown(make_assessment(attendee_count=6))
        all_keys = _keys(breakdown.helping) | _keys(breakdown.hurting) | _keys(breakdown.neutral)
        assert "group_size" not in all_keys

    def test_unset_async_has_no_row(self, make_assessment):
        breakdown = analyze_breakdown(make_assessment(async_possible=None))
        labels = _labels(breakdown.helping) + _labels(breakdown.hurting) + _labels(breakdown.neutral)
        assert "Could Be Async" not in labels
        assert "Needs Live Discussion" not in labels

    def test_async_rows_when_set(self, make_assessment):
        assert "Could Be Async" in _labels(analyze_breakdown(make_assessment(async_possible=True)).hurting)
        assert "Needs Live Discussion" in _labels(
            analyze_breakdown(make_assessment(async_possible=False)).helping
        )

    def test_no_boost_row_outside_protected_mode(self, weekly_l10):
        breakdown = analyze_breakdown(weekly_l10, protected_mode=False)
        assert "protected_type" not in _keys(breakdown.helping)


class TestQuickThought:
    def test_hurting_factors_present(self, quick_thought):
        hurting = _keys(analyze_breakdown(quick_thought).hurting)
        assert {"group_size", "dri", "agenda", "duration"} <= hurting

    def test_descriptions_come_from_input(self, quick_thought):
        hurting = {f.key: f for f in analyze_breakdown(quick_thought).hurting}
        assert "12 attendees" in hurting["group_size"].description
        assert "120 minutes" in hurting["duration"].description


class TestConsistencyWithScorer:
    @pytest.mark.parametrize("protected_mode", [True, False])
    def test_factors_reproduce_score(self, make_assessment, protected_mode):
        grid = itertools.product(
            ["Project sync", "Weekly L10", "IDS session", "Quarterly Planning", "1:1 with Sam"],
            ["INFO_SHARE", "DECIDE", "BRAINSTORM"],
            ["TODAY", "FLEXIBLE"],
            ["HIGH", "LOW"],
            [None, True, False],
            [15, 75, 120],
            [(3, True, 0), (9, False, 5), (12, True, 0)],
        )
        for title, purpose, urgency, level, async_possible, minutes, people in grid:
            count, dri, optional = people
            assessment = make_assessment(
                title=title,
                purpose=purpose,
                urgency=urgency,
                interactivity=level,
                complexity=level,
                async_possible=async_possible,
                duration=minutes,
                attendee_count=count,
                dri=dri,
                optional=optional,
            )
            breakdown = analyze_breakdown(assessment, protected_mode)
            total = 5.0 + sum(f.impact for f in breakdown.helping) + sum(
                f.impact for f in breakdown.hurting
            )
            assert clamp_score(total) == unrounded_score(assessment, protected_mode)

    def test_deterministic(self, daily_standup):
        assert analyze_breakdown(daily_standup, True) == analyze_breakdown(daily_standup, True)
