"""Results page rendering with Jinja2 templates.

Provides:
- ResultsRenderer: Markdown results page from a ResultsView
- export_html: HTML export from markdown
"""

from .generator import NO_FINDINGS_HEADING, ResultsRenderer, remediation_text
from .export import export_html

__all__ = ["NO_FINDINGS_HEADING", "ResultsRenderer", "remediation_text", "export_html"]
