"""Results view owning one displayed audit report.

The view holds the report text, the findings extracted from it and the
current ViewSelection. Loading different text re-extracts and resets the
selection; loading the same text again keeps both.
"""

from collections.abc import Sequence

import structlog

from auditlens.core.extraction import ReportExtractor, get_extractor
from auditlens.core.output import Finding
from auditlens.core.severity import Severity, SeverityFilter
from auditlens.core.view import state
from auditlens.core.view.state import ViewSelection

logger = structlog.get_logger()


class ResultsView:
    """Findings list for one report plus its filter and expansion state.

    Example:
        >>> view = ResultsView("Critical\\nReentrancy bug\\nHigh\\nMissing check")
        >>> view.set_filter("high")
        >>> [f.id for f in view.visible]
        ['high-0']
    """

    def __init__(self, report: str = "", extractor: ReportExtractor | None = None):
        """Initialize the view and load the initial report.

        Args:
            report: Raw report payload (narrative text or structured JSON)
            extractor: Extractor to use (defaults to the shared extractor)
        """
        self.extractor = extractor or get_extractor()
        self.log = logger.bind(component="results_view")
        self._report: str | None = None
        self._findings: tuple[Finding, ...] = ()
        self.selection = ViewSelection()
        self.load(report)

    def load(self, report: str | None) -> bool:
        """Load report text, re-extracting only if it changed.

        Returns:
            True if the text changed and the selection was reset
        """
        report = report or ""
        if report == self._report:
            return False

        self._report = report
        self._findings = self.extractor.load_report(report)
        self.selection = ViewSelection()
        self.log.info("report_loaded", findings=len(self._findings))
        return True

    @property
    def report(self) -> str:
        return self._report or ""

    @property
    def findings(self) -> tuple[Finding, ...]:
        return self._findings

    @property
    def is_empty(self) -> bool:
        """True when the report has no findings ("no vulnerabilities detected")."""
        return not self._findings

    @property
    def visible(self) -> Sequence[Finding]:
        return state.visible(self._findings, self.selection)

    @property
    def counts(self) -> dict[SeverityFilter, int]:
        return state.counts_by_level(self._findings)

    def is_expanded(self, finding_id: str) -> bool:
        return state.is_expanded(self.selection, finding_id)

    def set_filter(self, level: "SeverityFilter | Severity | str") -> None:
        self.selection = state.set_filter(self.selection, level)

    def toggle(self, finding_id: str) -> None:
        self.selection = state.toggle(self.selection, finding_id, self._findings)

    def expand_all(self) -> None:
        """Expand every finding currently visible under the active filter."""
        self.selection = state.expand_all(self.selection, self.visible)

    def collapse_all(self) -> None:
        self.selection = state.collapse_all(self.selection)
