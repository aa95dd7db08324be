"""Extraction of severity-tagged findings from audit report text.

Narrative reports are segmented with one pattern per severity. Each pattern
starts at an occurrence of its keyword and stops right before the next
occurrence of any severity keyword (or the end of the text), so spans never
overlap. Every span becomes at most one Finding.

Structured reports (a JSON list of severity/title/description objects) skip
text mining entirely and are converted directly.

Provides:
- ReportExtractor: Memoizing extractor bound to a Config
- extract: Narrative text -> ordered findings (default extractor)
- extract_structured: Structured items -> ordered findings (default extractor)
- load_report: Dispatch a raw payload to the structured or narrative path
"""

import json
import re
from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import Any

import structlog

from auditlens.core.config import Config, load_config
from auditlens.core.output import Finding
from auditlens.core.severity import SEVERITY_ORDER, Severity

logger = structlog.get_logger()

_HEADING_RE = re.compile(r"^#+\s*")
_EMPHASIS_WRAPPER_RE = re.compile(r"^\*\*(.+?)\*\*(.*)$")
_STRAY_EMPHASIS_RE = re.compile(r"^\*\*|\*\*$")
_KEYWORD_CLOSER_RE = re.compile(r"^(\w+)\*\*")
_SECTION_SUFFIX = r"(?:\s+severity)?\s*[:\-]?\s*"


def _clean_title(line: str) -> str:
    """Strip heading markers and the leading **...** wrapper from a line."""
    title = _HEADING_RE.sub("", line.strip())
    match = _EMPHASIS_WRAPPER_RE.match(title)
    if match:
        title = match.group(1) + match.group(2)
    else:
        title = _STRAY_EMPHASIS_RE.sub("", title)
    return _HEADING_RE.sub("", title.strip()).strip()


def _is_section_marker(title: str, severity: Severity) -> bool:
    """True if a cleaned line is only the severity keyword, e.g. "## High:"."""
    pattern = re.escape(severity.value) + _SECTION_SUFFIX
    return re.fullmatch(pattern, title, re.IGNORECASE) is not None


def build_patterns(whole_word: bool = True) -> dict[Severity, re.Pattern]:
    """Compile one span pattern per severity.

    Args:
        whole_word: Require word boundaries around keywords. When False the
            keywords match anywhere, so "allow" starts a Low span.

    Returns:
        Mapping from severity to its compiled span pattern
    """
    boundary = r"\b" if whole_word else ""
    any_keyword = "|".join(s.value for s in SEVERITY_ORDER)
    stop = rf"(?={boundary}(?:{any_keyword}){boundary}|\Z)"
    return {
        severity: re.compile(
            rf"{boundary}{severity.value}{boundary}.*?{stop}",
            re.IGNORECASE | re.DOTALL,
        )
        for severity in SEVERITY_ORDER
    }


class ReportExtractor:
    """Turns audit report payloads into ordered, immutable findings.

    Extraction of narrative text is memoized per input text, so repeated
    renders of the same report do not re-scan it.

    Example:
        >>> extractor = ReportExtractor()
        >>> [f.id for f in extractor.extract("Critical\\nReentrancy bug")]
        ['critical-0']
    """

    def __init__(self, config: Config | None = None):
        """Initialize extractor.

        Args:
            config: Configuration (defaults to load_config())
        """
        self.config = config or load_config()
        self.patterns = build_patterns(self.config.whole_word)
        self._extract_cached = lru_cache(maxsize=self.config.cache_size)(self._extract)

    def extract(self, text: str | None) -> tuple[Finding, ...]:
        """Extract findings from narrative report text.

        Empty text, or text without any severity keyword, yields an empty
        tuple. Callers render that as "no vulnerabilities detected".

        Args:
            text: Full audit report narrative

        Returns:
            Findings grouped Critical, High, Medium, Low, each group in
            match order
        """
        return self._extract_cached(text or "")

    def cache_info(self):
        """Expose memoization statistics (hits, misses, currsize)."""
        return self._extract_cached.cache_info()

    def _extract(self, text: str) -> tuple[Finding, ...]:
        findings: list[Finding] = []
        for severity in SEVERITY_ORDER:
            for ordinal, match in enumerate(self.patterns[severity].finditer(text)):
                finding = self._parse_span(match.group(0), severity, ordinal)
                if finding is not None:
                    findings.append(finding)

        logger.debug("extraction_complete", chars=len(text), findings=len(findings))
        return tuple(findings)

    def _parse_span(self, span: str, severity: Severity, ordinal: int) -> Finding | None:
        lines = span.splitlines()
        content = [i for i, line in enumerate(lines) if line.strip()]
        if not content:
            return None

        # The span starts at the keyword, so markup opened before it is cut off
        # and only its closing "**" remains on the first line.
        lines[0] = _KEYWORD_CLOSER_RE.sub(r"\1", lines[0])

        title_index = content[0]
        title = _clean_title(lines[title_index])
        # A heading line gives way to the next line, but a lone keyword line
        # is still a finding of its own.
        if len(content) > 1 and _is_section_marker(title, severity):
            title_index = content[1]
            title = _clean_title(lines[title_index])

        description = "\n".join(lines[title_index + 1:]).strip()
        return self._make_finding(severity, ordinal, title, description)

    def _make_finding(
        self,
        severity: Severity,
        ordinal: int,
        title: str,
        description: str,
        item: Mapping[str, Any] | None = None,
    ) -> Finding:
        item = item or {}
        return Finding(
            id=f"{severity.slug}-{ordinal}",
            severity=severity,
            title=title,
            description=description,
            chain=str(item.get("chain") or self.config.chain),
            file=str(item.get("file") or self.config.file),
            line=str(item.get("line") or self.config.line),
        )

    def extract_structured(self, items: Iterable[Any]) -> tuple[Finding, ...]:
        """Convert already-structured findings.

        Each item is a mapping with "severity", "title" and optional
        "description", "chain", "file", "line". Items with an unknown
        severity or a blank title are skipped.

        Args:
            items: Structured finding mappings in report order

        Returns:
            Findings ordered like extract() output, ids numbered per severity
        """
        groups: dict[Severity, list[Finding]] = {s: [] for s in SEVERITY_ORDER}

        for index, item in enumerate(items):
            if not isinstance(item, Mapping):
                logger.warning("structured_item_skipped", index=index, reason="not_a_mapping")
                continue
            try:
                severity = Severity.parse(item.get("severity", ""))
            except ValueError:
                logger.warning(
                    "structured_item_skipped",
                    index=index,
                    reason="unknown_severity",
                    severity=item.get("severity"),
                )
                continue

            title = _clean_title(str(item.get("title") or ""))
            if not title:
                logger.warning("structured_item_skipped", index=index, reason="blank_title")
                continue

            description = str(item.get("description") or "").strip()
            group = groups[severity]
            group.append(self._make_finding(severity, len(group), title, description, item))

        findings = tuple(f for severity in SEVERITY_ORDER for f in groups[severity])
        logger.debug("structured_extraction_complete", findings=len(findings))
        return findings

    def load_report(self, payload: str | None) -> tuple[Finding, ...]:
        """Extract findings from a raw report payload of either format.

        A JSON list, or a JSON object with a "findings" list, goes through
        extract_structured(). Anything else is narrative text.
        """
        text = payload or ""
        stripped = text.lstrip()
        if stripped.startswith(("[", "{")):
            try:
                data = json.loads(stripped)
            except json.JSONDecodeError:
                data = None
            if isinstance(data, Mapping):
                data = data.get("findings")
            if isinstance(data, list):
                return self.extract_structured(data)
        return self.extract(text)


_default_extractor: ReportExtractor | None = None


def get_extractor() -> ReportExtractor:
    """Return the process-wide default extractor, creating it on first use."""
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = ReportExtractor()
    return _default_extractor


def extract(text: str | None) -> tuple[Finding, ...]:
    """Extract findings from narrative report text with the default extractor."""
    return get_extractor().extract(text)


def extract_structured(items: Iterable[Any]) -> tuple[Finding, ...]:
    """Convert structured findings with the default extractor."""
    return get_extractor().extract_structured(items)


def load_report(payload: str | None) -> tuple[Finding, ...]:
    """Extract findings from a payload of either format with the default extractor."""
    return get_extractor().load_report(payload)
