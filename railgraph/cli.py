"""Command-line entry point.

Usage: ``railgraph <input-file>`` (or ``python -m railgraph <input-file>``).
Runs the fixed query battery against the edge list in the file and
prints one ``Output #n: <result>`` line per query.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from .config import ObservabilityConfig, get_config
from .domain.errors import RailGraphError
from .pipeline import solve_input_file

USAGE = "Need path of input file as only argument"

logger = logging.getLogger(__name__)


def configure_logging(config: ObservabilityConfig) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(level=config.level, format=config.format)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit status.

    A wrong argument count prints the usage line and still exits with 0.
    Invalid configuration, an unreadable file or a malformed edge list
    is fatal (status 1).
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = get_config()
    except ValidationError as e:
        print(f"Fatal: invalid configuration: {e}", file=sys.stderr)
        return 1
    configure_logging(config.observability)

    if len(args) != 1:
        print(USAGE)
        return 0

    try:
        lines = solve_input_file(args[0])
    except RailGraphError as e:
        logger.error("Aborting run", extra={"input_path": args[0]})
        print(f"Fatal: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
