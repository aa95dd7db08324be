"""Tests for results view selection state and queries."""

import pytest
from pydantic import ValidationError

from auditlens.core.output import Finding
from auditlens.core.severity import FILTER_LEVELS, Severity, SeverityFilter
from auditlens.core.view import (
    ViewSelection,
    collapse_all,
    counts_by_level,
    expand_all,
    is_expanded,
    set_filter,
    toggle,
    visible,
)


@pytest.fixture
def findings():
    """Findings as extraction would order them."""
    return (
        Finding(id="critical-0", severity=Severity.CRITICAL, title="Reentrancy bug"),
        Finding(id="high-0", severity=Severity.HIGH, title="Missing access control"),
        Finding(id="high-1", severity=Severity.HIGH, title="Unchecked transfer"),
        Finding(id="low-0", severity=Severity.LOW, title="Floating pragma"),
    )


@pytest.fixture
def selection():
    """Default selection."""
    return ViewSelection()


def test_selection_defaults(selection):
    """Verify a new selection shows everything with nothing expanded."""
    assert selection.active_filter == SeverityFilter.ALL
    assert selection.expanded_ids == frozenset()


def test_selection_immutable(selection):
    """Verify selections are values and cannot be mutated in place."""
    with pytest.raises(ValidationError):
        selection.active_filter = SeverityFilter.HIGH


# visible / counts_by_level


def test_visible_all_is_identity(findings, selection):
    """Verify the ALL filter returns the findings unchanged."""
    assert visible(findings, selection) is findings


def test_visible_filters_by_severity(findings, selection):
    """Verify a severity filter keeps only matching findings in order."""
    shown = visible(findings, set_filter(selection, SeverityFilter.HIGH))

    assert [f.id for f in shown] == ["high-0", "high-1"]


def test_visible_empty_for_absent_severity(findings, selection):
    """Verify filtering on a severity with no findings yields nothing."""
    assert list(visible(findings, set_filter(selection, "medium"))) == []


def test_counts_by_level(findings):
    """Verify counts for every filter level."""
    counts = counts_by_level(findings)

    assert counts == {
        SeverityFilter.ALL: 4,
        SeverityFilter.CRITICAL: 1,
        SeverityFilter.HIGH: 2,
        SeverityFilter.MEDIUM: 0,
        SeverityFilter.LOW: 1,
    }


def test_counts_match_visible(findings, selection):
    """Verify each count equals the visible length under that filter."""
    counts = counts_by_level(findings)

    for level in FILTER_LEVELS:
        assert len(visible(findings, set_filter(selection, level))) == counts[level]


def test_counts_for_no_findings():
    """Verify every level counts zero for an empty result."""
    assert set(counts_by_level(()).values()) == {0}


# set_filter


def test_set_filter_accepts_names_and_severities(selection):
    """Verify filters parse from names, severities and filter members."""
    assert set_filter(selection, "critical").active_filter == SeverityFilter.CRITICAL
    assert set_filter(selection, Severity.LOW).active_filter == SeverityFilter.LOW
    assert set_filter(selection, SeverityFilter.ALL).active_filter == SeverityFilter.ALL


def test_set_filter_ignores_unknown_level(selection):
    """Verify an unknown level leaves the selection unchanged."""
    narrowed = set_filter(selection, "high")

    assert set_filter(narrowed, "severe") is narrowed
    assert set_filter(narrowed, "").active_filter == SeverityFilter.HIGH


def test_set_filter_keeps_expanded(findings, selection):
    """Verify changing the filter does not touch expanded ids."""
    expanded = toggle(selection, "critical-0", findings)

    assert set_filter(expanded, "low").expanded_ids == {"critical-0"}


# toggle


def test_toggle_adds_and_removes(findings, selection):
    """Verify toggle opens then closes a finding."""
    opened = toggle(selection, "high-0", findings)
    assert is_expanded(opened, "high-0")

    closed = toggle(opened, "high-0", findings)
    assert not is_expanded(closed, "high-0")


def test_toggle_is_involution(findings, selection):
    """Verify toggling twice restores the original expanded ids."""
    start = expand_all(selection, findings[:2])

    for finding in findings:
        twice = toggle(toggle(start, finding.id, findings), finding.id, findings)
        assert twice.expanded_ids == start.expanded_ids


def test_toggle_unknown_id_ignored(findings, selection):
    """Verify ids that match no finding are ignored."""
    assert toggle(selection, "medium-7", findings) is selection


# expand_all / collapse_all


def test_expand_all_uses_visible_subset(findings, selection):
    """Verify expand_all expands exactly the visible findings."""
    highs = set_filter(selection, "high")
    expanded = expand_all(highs, visible(findings, highs))

    assert expanded.expanded_ids == {"high-0", "high-1"}
    assert expanded.active_filter == SeverityFilter.HIGH


def test_expand_all_collapses_hidden(findings, selection):
    """Verify findings outside the visible subset are collapsed."""
    start = toggle(selection, "low-0", findings)
    criticals = set_filter(start, "critical")
    expanded = expand_all(criticals, visible(findings, criticals))

    assert expanded.expanded_ids == {"critical-0"}


def test_collapse_all(findings, selection):
    """Verify collapse_all always empties the expanded ids."""
    expanded = expand_all(selection, findings)

    assert collapse_all(expanded).expanded_ids == frozenset()
    assert collapse_all(selection).expanded_ids == frozenset()
