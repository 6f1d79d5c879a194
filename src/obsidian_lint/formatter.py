"""Report rendering for validation results."""

from __future__ import annotations

import json
import os
from collections.abc import Callable

from .config import FORMAT_JSON, FORMAT_TEXT, OUTPUT_FORMATS
from .errors import UnsupportedFormatError
from .models import ValidationResult

NO_BROKEN_LINKS = "No broken links found.\n"


def display_path(path: str) -> str:
    """Make a note path printable.

    File names that are not valid UTF-8 arrive surrogate-escaped; their raw
    bytes are shown as ``\\xNN`` escapes instead.
    """
    return os.fsencode(path).decode("utf-8", errors="backslashreplace")


def format_text(result: ValidationResult) -> str:
    """Render a human-readable report, notes sorted by path.

    Example:
        Broken links found in vault:

        /vault/a.md:
          Line 3: [[Missing]]

    """
    if result.is_clean:
        return NO_BROKEN_LINKS

    lines = ["Broken links found in vault:", ""]
    for path in sorted(result.broken_links):
        lines.append(f"{display_path(path)}:")
        for broken in result.broken_links[path]:
            lines.append(f"  Line {broken.line}: {broken.link}")
        lines.append("")

    return "\n".join(lines) + "\n"


def format_json(result: ValidationResult) -> str:
    """Render the note -> [{link, line}] mapping as indented JSON.

    A clean vault renders as an empty object.
    """
    payload = {display_path(path): links for path, links in result.to_dict().items()}
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


FORMATTERS: dict[str, Callable[[ValidationResult], str]] = {
    FORMAT_TEXT: format_text,
    FORMAT_JSON: format_json,
}


def get_formatter(name: str) -> Callable[[ValidationResult], str]:
    """Look up the renderer for an output format name.

    Raises:
        UnsupportedFormatError: If the format is not one of OUTPUT_FORMATS.
    """
    try:
        return FORMATTERS[name]
    except KeyError:
        raise UnsupportedFormatError(name, OUTPUT_FORMATS) from None
