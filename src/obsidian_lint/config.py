"""Configuration management for obsidian-lint.

This module contains all configurable constants for the linter.
Magic values are documented here rather than scattered throughout the codebase.
"""

import logging
import os

# =============================================================================
# Vault layout
# =============================================================================

# Files with this suffix are notes: they are scanned for links and aliases.
# Every other file is only indexed by name (so embeds of images/PDFs resolve).
DOCUMENT_SUFFIX = ".md"

# Frontmatter must open on the very first line with this marker and close with
# the same marker on a line of its own.
FRONTMATTER_DELIMITER = "---"

# Frontmatter key holding alternate names for a note (string or list of strings)
ALIASES_KEY = "aliases"

# =============================================================================
# Output
# =============================================================================

FORMAT_TEXT = "text"
FORMAT_JSON = "json"
OUTPUT_FORMATS = (FORMAT_TEXT, FORMAT_JSON)
DEFAULT_FORMAT = FORMAT_TEXT

# Exit codes: broken links are a finding, not an execution error
EXIT_OK = 0
EXIT_BROKEN_LINKS = 1
EXIT_ERROR = 2

# =============================================================================
# Environment
# =============================================================================

ENV_VAULT = "OBSIDIAN_LINT_VAULT"
ENV_FORMAT = "OBSIDIAN_LINT_FORMAT"
ENV_LOG_LEVEL = "OBSIDIAN_LINT_LOG_LEVEL"
ENV_QUIET = "OBSIDIAN_LINT_QUIET"

DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> int:
    """Get the log level from OBSIDIAN_LINT_LOG_LEVEL.

    Unknown level names fall back to the default rather than failing.

    Returns:
        A logging level constant.
    """
    level_name = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        return getattr(logging, DEFAULT_LOG_LEVEL)
    return level
