"""Core audit findings functionality.

Provides:
- Severity levels and view filters
- Finding model and plain-text formatting
- Extraction of findings from report text or structured payloads
"""

from .output import Finding, format_counts, format_finding_brief, format_output
from .severity import FILTER_LEVELS, SEVERITY_ORDER, Severity, SeverityFilter
from .extraction import ReportExtractor, extract, extract_structured, load_report

__all__ = [
    "Finding",
    "format_counts",
    "format_finding_brief",
    "format_output",
    "FILTER_LEVELS",
    "SEVERITY_ORDER",
    "Severity",
    "SeverityFilter",
    "ReportExtractor",
    "extract",
    "extract_structured",
    "load_report",
]
