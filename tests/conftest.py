"""Shared test fixtures for obsidian-lint test suite.

Design:
- vault: empty vault directory under tmp_path
- create_note: helper writing a note (optionally with frontmatter aliases)
- runner: CliRunner for the click entry point
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


def create_note(
    vault: Path,
    rel_path: str,
    body: str = "",
    aliases: list[str] | str | None = None,
) -> Path:
    """Write a note into the vault, creating parent folders.

    Args:
        vault: Vault root.
        rel_path: Path relative to the vault (include the .md suffix).
        body: Note text after any frontmatter.
        aliases: Written as a YAML flow list (or plain string) when given.
    """
    path = vault / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)

    if aliases is None:
        content = body
    elif isinstance(aliases, str):
        content = f"---\naliases: {aliases}\n---\n{body}"
    else:
        content = f"---\naliases: [{', '.join(aliases)}]\n---\n{body}"

    path.write_text(content, encoding="utf-8")
    return path


def create_file(vault: Path, rel_path: str, data: bytes = b"\x89PNG\r\n") -> Path:
    """Write a non-note asset (image, PDF, ...) into the vault."""
    path = vault / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


# ─────────────────────────────────────────────────────────────────────────────
# Core Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """Create an empty vault directory."""
    root = tmp_path / "vault"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def runner() -> CliRunner:
    """CLI runner with isolated environment."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment from leaking into CLI defaults."""
    for name in (
        "OBSIDIAN_LINT_VAULT",
        "OBSIDIAN_LINT_FORMAT",
        "OBSIDIAN_LINT_LOG_LEVEL",
        "OBSIDIAN_LINT_QUIET",
    ):
        monkeypatch.delenv(name, raising=False)
