"""Wikilink and embed extraction.

A reference is ``[[...]]`` optionally preceded by ``!`` (an embed), written on a
single line::

    [[Note]]  [[Note#Heading]]  [[Note|shown text]]  ![[image.png]]

The text before the first ``|`` holds the target and optional heading; the
text after it is display text. The target is what precedes the first ``#``.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ..models import Reference
from ..scanner import read_note

log = logging.getLogger(__name__)

# Optional embed marker, then [[, one or more non-] characters, then ]]
LINK_PATTERN = re.compile(r"!?\[\[([^\]]+)\]\]")

EMBED_MARKER = "!"
ALIAS_SEPARATOR = "|"
HEADING_SEPARATOR = "#"


def extract_references(content: str) -> list[Reference]:
    """Extract all wikilinks and embeds from note text.

    Matching is line-oriented, so a reference never spans lines. Heading
    links into the current note (``[[#Heading]]``) are skipped. Blank targets
    without a heading (``[[ ]]``, ``[[|text]]``) are kept with an empty target
    so they are reported as broken.

    Args:
        content: Full note text, frontmatter included.

    Returns:
        References in document order (line, then column).
    """
    references: list[Reference] = []

    for line_number, line in enumerate(content.split("\n"), start=1):
        for match in LINK_PATTERN.finditer(line):
            reference = parse_reference(match.group(0), match.group(1), line_number)
            if reference is not None:
                references.append(reference)

    return references


def parse_reference(raw: str, inner: str, line: int) -> Reference | None:
    """Split the inner text of one ``[[...]]`` into its components.

    Args:
        raw: The full match, including brackets and any ``!``.
        inner: Text between ``[[`` and ``]]``.
        line: 1-based line number of the match.

    Returns:
        The parsed Reference, or None for a same-note heading link.
    """
    target_part, has_alias, alias = inner.partition(ALIAS_SEPARATOR)
    target, has_heading, heading = target_part.partition(HEADING_SEPARATOR)

    target = target.strip()
    if not target and has_heading:
        log.debug("Skipping same-note heading link on line %d: %s", line, raw)
        return None

    return Reference(
        raw=raw,
        target=target,
        heading=heading.strip() if has_heading else None,
        alias=alias if has_alias else None,
        is_embed=raw.startswith(EMBED_MARKER),
        line=line,
    )


def parse_file(path: Path) -> list[Reference]:
    """Read a note from disk and extract its references.

    Raises:
        DocumentReadError: If the note cannot be read or decoded.
    """
    return extract_references(read_note(path))
