"""Vault filesystem access: enumerating notes and files, reading notes.

Walks are depth-first with directory entries visited in sorted order, so
repeated scans of an unchanged vault produce identical sequences. Any
directory that cannot be listed aborts the walk with a ScanError; a vault is
never reported on from a partial listing.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .config import DOCUMENT_SUFFIX
from .errors import DocumentReadError, ScanError, VaultNotFoundError

log = logging.getLogger(__name__)


def _vault_root(vault_root: Path | str) -> Path:
    root = Path(vault_root).expanduser()
    if not root.exists():
        raise VaultNotFoundError(root, "Vault directory does not exist")
    if not root.is_dir():
        raise VaultNotFoundError(root, "Vault path is not a directory")
    return root.resolve()


def _raise_walk_error(error: OSError) -> None:
    raise ScanError(error.filename or "<unknown>", f"Cannot list directory: {error.strerror or error}") from error


def walk_files(vault_root: Path | str) -> Iterator[Path]:
    """Yield every non-directory entry under the vault, of any type.

    Args:
        vault_root: Root directory of the vault.

    Yields:
        Absolute file paths in deterministic order.

    Raises:
        VaultNotFoundError: If the root is missing or not a directory.
        ScanError: If a directory cannot be listed during the walk.
    """
    root = _vault_root(vault_root)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        # Sorting in place also fixes the order os.walk descends in
        dirnames.sort()
        for filename in sorted(filenames):
            yield Path(dirpath) / filename


def scan(vault_root: Path | str) -> list[Path]:
    """List every note (``.md`` file) under the vault, recursively.

    Args:
        vault_root: Root directory of the vault.

    Returns:
        Absolute note paths in deterministic order.

    Raises:
        VaultNotFoundError: If the root is missing or not a directory.
        ScanError: If a directory cannot be listed during the walk.
    """
    notes = [path for path in walk_files(vault_root) if path.suffix == DOCUMENT_SUFFIX]
    log.debug("Found %d notes under %s", len(notes), vault_root)
    return notes


def read_note(path: Path | str) -> str:
    """Read a note as UTF-8 text.

    Raises:
        DocumentReadError: If the file cannot be read or is not valid UTF-8.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(path, f"Failed to read note: {e}") from e
