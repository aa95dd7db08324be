"""auditlens - explorable findings from security audit reports."""

__version__ = "0.1.0"
