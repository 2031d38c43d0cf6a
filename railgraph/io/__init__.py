"""Input/output helpers for the rail graph.

Reading the raw edge-list text and formatting query results are kept
apart from the engine so it only ever sees parsed data.
"""

from .input_text import read_input_text
from .output import NO_SUCH_ROUTE, format_line, format_result

__all__ = ["read_input_text", "NO_SUCH_ROUTE", "format_result", "format_line"]
