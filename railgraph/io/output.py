"""Formatting of query results for display."""

from __future__ import annotations

from typing import Optional

NO_SUCH_ROUTE = "NO SUCH ROUTE"


def format_result(value: Optional[int]) -> str:
    """Render a distance or count, or the no-route sentinel."""
    if value is None:
        return NO_SUCH_ROUTE
    return str(value)


def format_line(index: int, value: Optional[int]) -> str:
    """Render one output line; ``index`` is 1-based."""
    return f"Output #{index}: {format_result(value)}"
