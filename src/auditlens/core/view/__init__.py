"""Results view state.

Provides:
- ViewSelection and the pure selection intents/queries
- ResultsView: Owner of one displayed report and its selection
"""

from .state import (
    ViewSelection,
    collapse_all,
    counts_by_level,
    expand_all,
    is_expanded,
    set_filter,
    toggle,
    visible,
)
from .results import ResultsView

__all__ = [
    "ViewSelection",
    "collapse_all",
    "counts_by_level",
    "expand_all",
    "is_expanded",
    "set_filter",
    "toggle",
    "visible",
    "ResultsView",
]
