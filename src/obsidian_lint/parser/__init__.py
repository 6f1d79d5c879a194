"""Wikilink and frontmatter alias extraction."""

from .aliases import extract_aliases
from .links import LINK_PATTERN, extract_references, parse_file, parse_reference

__all__ = [
    "LINK_PATTERN",
    "extract_aliases",
    "extract_references",
    "parse_file",
    "parse_reference",
]
