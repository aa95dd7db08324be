"""Selection state for the findings results view.

A ViewSelection is an immutable value. Every intent takes the current
selection and returns the next one; nothing here touches the report text or
the extracted findings. No operation raises: unknown filter levels and ids
are ignored and the previous selection is returned.

Provides:
- ViewSelection: Active severity filter plus expanded finding ids
- set_filter / toggle / expand_all / collapse_all: Selection intents
- visible: Findings shown under a selection
- counts_by_level: Filter-chip counts for every filter level
- is_expanded: Whether a finding's detail panel is open
"""

from collections.abc import Iterable, Sequence

import structlog
from pydantic import BaseModel, ConfigDict, Field

from auditlens.core.output import Finding
from auditlens.core.severity import FILTER_LEVELS, Severity, SeverityFilter

logger = structlog.get_logger()


class ViewSelection(BaseModel):
    """Transient, non-persisted user selections over one findings sequence.

    Attributes:
        active_filter: Severity filter applied to the list (default ALL)
        expanded_ids: Ids of findings whose detail panel is open
    """

    model_config = ConfigDict(frozen=True)

    active_filter: SeverityFilter = SeverityFilter.ALL
    expanded_ids: frozenset[str] = Field(default_factory=frozenset)


def set_filter(
    selection: ViewSelection, level: "SeverityFilter | Severity | str"
) -> ViewSelection:
    """Select a severity filter. Expanded ids are left untouched.

    Args:
        selection: Current selection
        level: Filter level, severity, or case-insensitive name

    Returns:
        Selection with the new filter, or the unchanged selection if level
        is not a known filter level
    """
    try:
        active = SeverityFilter.parse(level)
    except ValueError:
        logger.debug("filter_ignored", level=str(level))
        return selection
    return selection.model_copy(update={"active_filter": active})


def toggle(
    selection: ViewSelection, finding_id: str, findings: Iterable[Finding]
) -> ViewSelection:
    """Open or close one finding's detail panel.

    Applying toggle twice with the same id restores the original selection.
    Ids that do not belong to any current finding are ignored.
    """
    if not any(f.id == finding_id for f in findings):
        logger.debug("toggle_ignored", finding_id=finding_id)
        return selection

    if finding_id in selection.expanded_ids:
        expanded = selection.expanded_ids - {finding_id}
    else:
        expanded = selection.expanded_ids | {finding_id}
    return selection.model_copy(update={"expanded_ids": expanded})


def expand_all(selection: ViewSelection, visible_findings: Iterable[Finding]) -> ViewSelection:
    """Expand exactly the given (currently visible) findings.

    Findings outside visible_findings that were expanded are collapsed.
    """
    expanded = frozenset(f.id for f in visible_findings)
    return selection.model_copy(update={"expanded_ids": expanded})


def collapse_all(selection: ViewSelection) -> ViewSelection:
    """Collapse every detail panel."""
    return selection.model_copy(update={"expanded_ids": frozenset()})


def is_expanded(selection: ViewSelection, finding_id: str) -> bool:
    return finding_id in selection.expanded_ids


def _matches(finding: Finding, level: SeverityFilter) -> bool:
    return level is SeverityFilter.ALL or finding.severity == level.severity


def visible(findings: Sequence[Finding], selection: ViewSelection) -> Sequence[Finding]:
    """Findings shown under the selection's filter.

    Returns findings itself for ALL; otherwise a tuple holding the findings
    of the selected severity in their original relative order.
    """
    if selection.active_filter is SeverityFilter.ALL:
        return findings
    return tuple(f for f in findings if _matches(f, selection.active_filter))


def counts_by_level(findings: Sequence[Finding]) -> dict[SeverityFilter, int]:
    """Count findings for every filter level.

    ALL maps to len(findings). Each count equals the length of visible()
    under the corresponding filter.

    Example:
        >>> counts_by_level(findings)[SeverityFilter.ALL] == len(findings)
        True
    """
    return {
        level: sum(1 for f in findings if _matches(f, level))
        for level in FILTER_LEVELS
    }
