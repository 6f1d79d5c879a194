"""Alias extraction from YAML frontmatter.

Aliases are alternate names a note can be linked by::

    ---
    aliases: [AI, Artificial Intelligence]
    ---

A single string is accepted as well as a list. Broken frontmatter is not a
link problem: any block that is unterminated, is not valid YAML, or holds an
unexpected shape yields no aliases instead of an error.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import frontmatter
import yaml
from frontmatter.default_handlers import YAMLHandler

from ..config import ALIASES_KEY, FRONTMATTER_DELIMITER

log = logging.getLogger(__name__)

# Delimiter alone on its line; python-frontmatter's default also accepts "----" etc.
FRONTMATTER_BOUNDARY = re.compile(rf"^{re.escape(FRONTMATTER_DELIMITER)}\r?$", re.MULTILINE)

_handler = YAMLHandler(fm_boundary=FRONTMATTER_BOUNDARY)


def extract_aliases(content: str) -> list[str]:
    """Extract declared aliases from a note's leading frontmatter block.

    The block is only recognized when the delimiter is the very first line
    of the note.

    Args:
        content: Full note text.

    Returns:
        Declared aliases in declaration order; empty when there are none or
        the block cannot be parsed.
    """
    if not FRONTMATTER_BOUNDARY.match(content):
        return []

    try:
        metadata, _ = frontmatter.parse(content, handler=_handler)
    except (yaml.YAMLError, ValueError) as e:
        # ValueError: a timestamp-shaped value that is not a real date
        log.debug("Ignoring unparseable frontmatter: %s", e)
        return []

    return _coerce_aliases(metadata.get(ALIASES_KEY))


def _coerce_aliases(value: Any) -> list[str]:
    """Normalize an ``aliases`` value to a list of strings.

    Non-string list items are dropped; any other shape means no aliases.
    """
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [item for item in value if isinstance(item, str)]
    if value is not None:
        log.debug("Ignoring %s of unexpected type %s", ALIASES_KEY, type(value).__name__)
    return []
