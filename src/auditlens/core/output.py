"""Finding model and plain-text formatting.

Provides:
- Finding: Immutable severity-tagged record extracted from an audit report
- format_output: Format a finding as a framed plain-text block
- format_finding_brief: Format a finding as a one-liner
- format_counts: Format per-level counts as one line
"""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from auditlens.core.severity import FILTER_LEVELS, Severity, SeverityFilter


class Finding(BaseModel):
    """Single reported issue extracted from an audit report.

    Findings are produced once per extraction and never mutated.

    Attributes:
        id: "<severity>-<ordinal>", unique within one extraction result
        severity: Severity bucket the finding was matched under
        title: First line of the matched span with markdown markers stripped
        description: Remaining lines of the span, may be empty
        chain: Placeholder chain metadata
        file: Placeholder file metadata
        line: Placeholder line metadata
    """

    model_config = ConfigDict(frozen=True)

    id: str
    severity: Severity
    title: str
    description: str = ""
    chain: str = "Ethereum/All EVM chains"
    file: str = "Contract.sol"
    line: str = "Multiple lines"


def format_output(finding: Finding) -> str:
    """Format finding as a framed plain-text block.

    Args:
        finding: The finding to format

    Returns:
        Multi-line string with title, severity, location and description
    """
    output = []
    output.append(f"{'=' * 60}")
    output.append(f"Finding: {finding.title}")
    output.append(f"Severity: {finding.severity.value.upper()} | ID: {finding.id}")
    output.append(f"Location: {finding.file} ({finding.line}) | Chain: {finding.chain}")
    output.append(f"{'=' * 60}")
    if finding.description:
        output.append(f"\n{finding.description}\n")
    output.append(f"{'=' * 60}")
    return "\n".join(output)


def format_finding_brief(finding: Finding) -> str:
    """Format single finding as one-liner.

    Example:
        >>> format_finding_brief(finding)
        '[CRITICAL] critical-0: Reentrancy bug'
    """
    return f"[{finding.severity.value.upper()}] {finding.id}: {finding.title}"


def format_counts(counts: Mapping[SeverityFilter, int]) -> str:
    """Format per-level counts in filter-chip order.

    Args:
        counts: Mapping from filter level to count (see counts_by_level)

    Returns:
        One line such as "All: 3 | Critical: 1 | High: 2 | Medium: 0 | Low: 0"
    """
    return " | ".join(f"{level.value}: {counts.get(level, 0)}" for level in FILTER_LEVELS)
