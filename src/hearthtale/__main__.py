from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .app import run_session
from .config.loader import load_config
from .exceptions import ConfigError, NarrationSinkError

logger = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hearthtale",
        description="Hearthtale - run a story command stream from stdin",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=None, help="YAML engine configuration (defaults to the bundled one)")
    parser.add_argument("--log-file", default=None, help="Narration event log path (overrides the config)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    # A line that is not valid in the input encoding must not end the session
    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(errors="replace")

    try:
        return run_session(sys.stdin, config, log_file=args.log_file)
    except NarrationSinkError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
