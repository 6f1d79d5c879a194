"""Pydantic models for vault link validation."""

from pydantic import BaseModel, ConfigDict, Field


class Reference(BaseModel):
    """One [[wikilink]] or ![[embed]] occurrence in a note.

    Only ``target`` takes part in resolution; ``heading`` and ``alias`` are
    kept for reporting.
    """

    model_config = ConfigDict(frozen=True)

    raw: str  # Exactly as written, e.g. "![[Note#Heading|shown]]"
    target: str  # "Note" (before any # or |, trimmed); empty only for [[ ]] and [[|x]]
    heading: str | None = None  # "Heading" (never validated)
    alias: str | None = None  # "shown" (display text only)
    is_embed: bool = False  # True for "![[...]]"
    line: int = Field(ge=1)  # 1-based line number in the source note


class BrokenLink(BaseModel):
    """A reference whose target matches no file or alias in the vault."""

    model_config = ConfigDict(frozen=True)

    link: str  # Raw reference text
    line: int


class ValidationResult(BaseModel):
    """Broken links grouped by source note.

    Keys are note paths in scan order; each list is in line order. A note
    without broken links has no key, so an empty mapping means a clean vault.
    """

    broken_links: dict[str, list[BrokenLink]] = Field(default_factory=dict)

    @property
    def is_clean(self) -> bool:
        return not self.broken_links

    @property
    def broken_count(self) -> int:
        return sum(len(links) for links in self.broken_links.values())

    def to_dict(self) -> dict[str, list[dict]]:
        """Plain file -> [{link, line}] mapping for serialization."""
        return {
            path: [link.model_dump() for link in links]
            for path, links in self.broken_links.items()
        }
