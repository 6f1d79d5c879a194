"""Name and alias index used to resolve link targets.

Every file in the vault is indexed by its base name, not only notes, so
embeds of images and PDFs resolve. Aliases declared in note frontmatter are
indexed separately. Both use ``normalize_target``, so lookups ignore case and
whether ``.md`` was written.

On a collision the entry seen last wins, silently: two files with the same
normalized base name in different folders, or two notes declaring the same
alias. Files are indexed before aliases and live in their own mapping, so an
alias never shadows the location of a file with the same name.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from ..config import DOCUMENT_SUFFIX
from ..errors import IndexBuildError, LintError
from ..parser import extract_aliases as default_extract_aliases
from ..scanner import read_note, walk_files

log = logging.getLogger(__name__)


def normalize_target(target: str) -> str:
    """Normalize a link target or file name for lookup.

    Lowercases, then strips any trailing ``.md``. Lowercasing first makes
    ``Note.MD`` and ``note.md`` equivalent, and stripping repeatedly keeps the
    function idempotent.

    Examples:
        >>> normalize_target("My Note.md")
        'my note'
        >>> normalize_target("Diagram.PNG")
        'diagram.png'
    """
    normalized = target.lower()
    while normalized.endswith(DOCUMENT_SUFFIX):
        normalized = normalized[: -len(DOCUMENT_SUFFIX)]
    return normalized


class VaultIndex:
    """Read-only lookup of normalized file names and aliases.

    Build one with ``build_vault_index``; instances expose no mutation.
    """

    __slots__ = ("_files", "_aliases")

    def __init__(
        self,
        files: Mapping[str, Path] | None = None,
        aliases: Mapping[str, Path] | None = None,
    ) -> None:
        self._files = MappingProxyType(dict(files or {}))
        self._aliases = MappingProxyType(dict(aliases or {}))

    @property
    def files(self) -> Mapping[str, Path]:
        """Normalized base name -> absolute path."""
        return self._files

    @property
    def aliases(self) -> Mapping[str, Path]:
        """Normalized alias -> absolute path of the declaring note."""
        return self._aliases

    def resolve(self, target: str) -> bool:
        """Return True if the target names any indexed file or alias."""
        normalized = normalize_target(target)
        return normalized in self._files or normalized in self._aliases

    def locate(self, target: str) -> Path | None:
        """Return the path a target resolves to, files taking precedence."""
        normalized = normalize_target(target)
        if normalized in self._files:
            return self._files[normalized]
        return self._aliases.get(normalized)

    def __repr__(self) -> str:
        return f"VaultIndex(files={len(self._files)}, aliases={len(self._aliases)})"


def build_vault_index(
    vault_root: Path | str,
    documents: Iterable[Path],
    *,
    extract_aliases: Callable[[str], list[str]] = default_extract_aliases,
) -> VaultIndex:
    """Build the index for one validation run.

    Args:
        vault_root: Root directory of the vault; every file below it is indexed.
        documents: Notes whose frontmatter aliases should be indexed.
        extract_aliases: Alias extractor applied to each note's text.

    Returns:
        A fully populated VaultIndex.

    Raises:
        IndexBuildError: If the vault cannot be walked or a note cannot be read.
    """
    files: dict[str, Path] = {}
    aliases: dict[str, Path] = {}

    try:
        for path in walk_files(vault_root):
            key = normalize_target(path.name)
            if key in files:
                log.debug("%s shadows %s (same normalized name %r)", path, files[key], key)
            files[key] = path

        for document in documents:
            document = Path(document)
            for alias in extract_aliases(read_note(document)):
                key = normalize_target(alias)
                if not key.strip():
                    continue
                aliases[key] = document
    except LintError as e:
        raise IndexBuildError(f"Failed to build vault index: {e.message}", e.details) from e
    except OSError as e:
        raise IndexBuildError(f"Failed to build vault index: {e}") from e

    log.debug("Indexed %d file names and %d aliases", len(files), len(aliases))
    return VaultIndex(files=files, aliases=aliases)
