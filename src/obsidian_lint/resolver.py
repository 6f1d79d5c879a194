"""Link resolution policy.

A reference is broken when its target names no file and no alias in the
vault. Headings and display text are never consulted: ``[[Note#Missing]]``
is fine as long as ``Note`` exists. A blank target (``[[ ]]``) never resolves.
"""

from __future__ import annotations

from .indexer import VaultIndex
from .models import Reference


def resolve(reference: Reference, index: VaultIndex) -> bool:
    """Return True if the reference's target exists in the vault."""
    if not reference.target:
        return False
    return index.resolve(reference.target)
