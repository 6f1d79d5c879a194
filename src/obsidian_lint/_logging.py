"""Logging configuration for obsidian-lint.

Usage in other modules:
    import logging
    log = logging.getLogger(__name__)

    log.debug("Detailed info for debugging")
    log.warning("Unexpected but handled situation")

The log level can be configured via the OBSIDIAN_LINT_LOG_LEVEL environment variable:
    - DEBUG: Scan counts, index sizes, skipped frontmatter blocks
    - INFO: General operational messages
    - WARNING: Unexpected situations that were handled (default)
    - ERROR: Errors that aborted a run

Logs always go to stderr so they never mix with the report on stdout.
"""

import logging
import sys

from .config import get_log_level

PACKAGE_LOGGER = "obsidian_lint"


def configure_logging() -> None:
    """Configure logging for the obsidian_lint package.

    Call this once at application startup (cli.main does).
    Subsequent calls are no-ops.
    """
    root_logger = logging.getLogger(PACKAGE_LOGGER)

    if root_logger.handlers:
        return

    level = get_log_level()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt="[%(levelname)s] %(name)s: %(message)s"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # Prevent propagation to root logger (avoids duplicate messages)
    root_logger.propagate = False


def set_quiet_mode(quiet: bool) -> None:
    """Raise the package log threshold to ERROR (or restore the configured level)."""
    root_logger = logging.getLogger(PACKAGE_LOGGER)
    level = logging.ERROR if quiet else get_log_level()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)
