"""obsidian-lint: find broken wikilinks in an Obsidian vault."""

__version__ = "0.1.0"
