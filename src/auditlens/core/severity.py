"""Severity levels and view filters for audit findings.

Severity is a closed, ordered enumeration. The results view adds one
pseudo-level, ALL, used only for filtering. Both are modelled as enums so a
typo can never silently produce an empty filtered view.

Provides:
- Severity: Critical/High/Medium/Low in priority order
- SeverityFilter: ALL plus one filter per severity
- SEVERITY_ORDER: Severities in the order findings are grouped
- FILTER_LEVELS: Filter levels in the order filter chips are shown
"""

from enum import Enum


class Severity(str, Enum):
    """Severity of a single finding.

    Values carry the canonical casing used for display. Member order is
    the priority order findings are grouped in.
    """

    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, value: "str | Severity") -> "Severity":
        """Parse a severity name case-insensitively.

        Args:
            value: Severity member or name such as "critical" or "HIGH"

        Returns:
            Matching Severity member

        Raises:
            ValueError: If value does not name a severity

        Example:
            >>> Severity.parse("critical")
            <Severity.CRITICAL: 'Critical'>
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unknown severity: {value!r}")

    @property
    def slug(self) -> str:
        """Lowercase name used in finding ids and CSS classes."""
        return self.value.lower()


class SeverityFilter(str, Enum):
    """Filter applied to the results view."""

    ALL = "All"
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, value: "str | Severity | SeverityFilter") -> "SeverityFilter":
        """Parse a filter level case-insensitively.

        Accepts a SeverityFilter, a Severity, or a name.

        Raises:
            ValueError: If value does not name a filter level
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Severity):
            return cls(value.value)
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unknown severity filter: {value!r}")

    @property
    def severity(self) -> Severity | None:
        """Severity this filter selects, or None for ALL."""
        if self is SeverityFilter.ALL:
            return None
        return Severity(self.value)


SEVERITY_ORDER: tuple[Severity, ...] = tuple(Severity)
FILTER_LEVELS: tuple[SeverityFilter, ...] = tuple(SeverityFilter)
