"""Vault validation pipeline.

Scan the vault for notes, build the name/alias index over the whole tree,
then extract each note's references and collect the ones that do not
resolve. Each stage is a collaborator passed to ``Validator`` so it can be
replaced with a test double; the defaults touch the real filesystem.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import partial
from pathlib import Path
from typing import Protocol

from . import parser as default_parser
from .errors import DocumentReadError, LintError, ScanError
from .indexer import VaultIndex, build_vault_index
from .models import BrokenLink, Reference, ValidationResult
from .resolver import resolve as default_resolve
from .scanner import scan as default_scan

log = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Collaborators
# ─────────────────────────────────────────────────────────────────────────────


class NoteScanner(Protocol):
    def __call__(self, vault_root: Path) -> Sequence[Path]: ...


class NoteParser(Protocol):
    def parse_file(self, path: Path) -> list[Reference]: ...

    def extract_aliases(self, content: str) -> list[str]: ...


class IndexBuilder(Protocol):
    def __call__(self, vault_root: Path, documents: Sequence[Path]) -> VaultIndex: ...


class LinkResolver(Protocol):
    def __call__(self, reference: Reference, index: VaultIndex) -> bool: ...


# ─────────────────────────────────────────────────────────────────────────────
# Validator
# ─────────────────────────────────────────────────────────────────────────────


class Validator:
    """Finds broken wikilinks and embeds in a vault.

    Args:
        scanner: Lists the notes to check.
        parser: Extracts references from a note file (and aliases from text).
        index_builder: Builds the VaultIndex. Defaults to
            ``build_vault_index`` using ``parser.extract_aliases``.
        resolver: Decides whether one reference resolves.
    """

    def __init__(
        self,
        scanner: NoteScanner | None = None,
        parser: NoteParser | None = None,
        index_builder: IndexBuilder | None = None,
        resolver: LinkResolver | None = None,
    ) -> None:
        self.scanner = scanner or default_scan
        self.parser = parser or default_parser
        self.index_builder = index_builder or partial(
            build_vault_index, extract_aliases=self.parser.extract_aliases
        )
        self.resolver = resolver or default_resolve

    def validate(self, vault_root: Path | str) -> ValidationResult:
        """Check every note in the vault for unresolved references.

        Args:
            vault_root: Root directory of the vault.

        Returns:
            Broken links grouped by note path, notes in scan order and links
            in line order. Notes with no broken links are omitted.

        Raises:
            ScanError: If the notes cannot be enumerated.
            IndexBuildError: If the index cannot be built.
            DocumentReadError: If a note cannot be read.
        """
        root = Path(vault_root)

        try:
            documents = list(self.scanner(root))
        except LintError:
            raise
        except OSError as e:
            raise ScanError(root, f"Failed to scan vault: {e}") from e

        index = self.index_builder(root, documents)
        log.debug("Validating %d notes against %r", len(documents), index)

        broken_links: dict[str, list[BrokenLink]] = {}

        for document in documents:
            try:
                references = self.parser.parse_file(document)
            except LintError:
                raise
            except OSError as e:
                raise DocumentReadError(document, f"Failed to parse note: {e}") from e

            broken = [
                BrokenLink(link=reference.raw, line=reference.line)
                for reference in references
                if not self.resolver(reference, index)
            ]
            if broken:
                broken_links[str(document)] = broken

        result = ValidationResult(broken_links=broken_links)
        log.debug(
            "Found %d broken links in %d notes", result.broken_count, len(result.broken_links)
        )
        return result


def validate(vault_root: Path | str) -> ValidationResult:
    """Validate a vault with the default filesystem-backed pipeline."""
    return Validator().validate(vault_root)
