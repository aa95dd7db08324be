"""Markdown rendering of a results view with Jinja2 templates.

Renders filter chips with counts, one card per visible finding, and a
detail panel for every expanded finding. A report without findings renders
the explicit "No vulnerabilities detected" state.
"""

from pathlib import Path

import structlog
from jinja2 import Environment, FileSystemLoader

from auditlens.core.output import Finding
from auditlens.core.severity import FILTER_LEVELS, SeverityFilter
from auditlens.core.view import ResultsView

logger = structlog.get_logger()

NO_FINDINGS_HEADING = "No vulnerabilities detected"

DEFAULT_DESCRIPTION = (
    "Detailed description of the security vulnerability and its potential "
    "impact on the smart contract."
)

DEFAULT_IMPACT = (
    "This vulnerability could potentially lead to security issues if exploited. "
    "The specific impact depends on the vulnerability type and context within "
    "the smart contract implementation."
)

PLACEHOLDER_VULNERABLE_CODE = """\
// Example vulnerable code pattern
function vulnerableFunction() {
    // This is where the vulnerability occurs
    // Specific code would be extracted from analysis
}"""

PLACEHOLDER_FIX_CODE = """\
// Secure implementation
function secureFunction() {
    // Apply security best practices
    // Use recommended patterns and libraries
}"""

DEFAULT_REFERENCES = [
    "OpenZeppelin Security Guidelines",
    "Ethereum Smart Contract Security Best Practices",
    "ConsenSys Security Tools and Resources",
]


class ResultsRenderer:
    """Render a ResultsView as a markdown results page."""

    def __init__(self, template_dir: str | None = None):
        """Initialize renderer with Jinja2 templates.

        Args:
            template_dir: Path to template directory (defaults to ./templates/)
        """
        if template_dir is None:
            template_dir = str(Path(__file__).parent / "templates")
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        # Register render_finding as a Jinja2 global function
        self.env.globals["render_finding"] = self._render_finding

    def render(self, view: ResultsView, title: str = "Security Audit Results") -> str:
        """Render the view's visible findings and selection state.

        Args:
            view: Results view to render
            title: Page heading

        Returns:
            Markdown string
        """
        visible = list(view.visible)
        active = view.selection.active_filter

        context = {
            "title": title,
            "view": view,
            "visible": visible,
            "counts": view.counts,
            "levels": FILTER_LEVELS,
            "active": active,
            "all_level": SeverityFilter.ALL,
            "no_findings_heading": NO_FINDINGS_HEADING,
        }

        template = self.env.get_template("results.md.j2")
        rendered = template.render(**context)
        logger.debug(
            "results_rendered",
            visible=len(visible),
            expanded=len(view.selection.expanded_ids),
            active_filter=active.value,
        )
        return rendered

    def _render_finding(self, finding: Finding, expanded: bool) -> str:
        """Render one finding card, with its detail panel when expanded.

        Used by the results template for every visible finding.
        """
        template = self.env.get_template("finding.md.j2")

        context = {
            "finding": finding,
            "expanded": expanded,
            "vulnerable_code": PLACEHOLDER_VULNERABLE_CODE,
            "description": finding.description or DEFAULT_DESCRIPTION,
            "impact": DEFAULT_IMPACT,
            "remediation": remediation_text(finding),
            "fix_code": PLACEHOLDER_FIX_CODE,
            "references": DEFAULT_REFERENCES,
        }

        return template.render(**context)


def remediation_text(finding: Finding) -> str:
    """Remediation guidance for a finding, chosen from its title.

    Args:
        finding: Finding to describe

    Returns:
        Remediation recommendation text
    """
    title = finding.title.lower()
    if "reentran" in title:
        return (
            "Apply the checks-effects-interactions pattern and update state before "
            "external calls. Guard functions that transfer value with a reentrancy lock."
        )
    elif "access control" in title or "owner" in title or "permission" in title:
        return (
            "Restrict privileged functions with explicit role or ownership checks. "
            "Review every externally callable function for missing modifiers."
        )
    elif "overflow" in title or "underflow" in title:
        return (
            "Compile with a Solidity version that checks arithmetic by default, or use "
            "a checked math library. Validate bounds on user-supplied amounts."
        )
    else:
        return (
            "Follow secure coding practices and implement the recommended fixes to "
            "address this vulnerability. Review the code thoroughly and apply "
            "industry-standard security patterns."
        )
