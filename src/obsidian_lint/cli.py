#!/usr/bin/env python3
"""
obsidian-lint: find broken wikilinks in an Obsidian vault

Usage:
    obsidian-lint --vault ~/notes                 # Text report
    obsidian-lint --vault ~/notes --format json   # JSON report
    OBSIDIAN_LINT_VAULT=~/notes obsidian-lint     # Vault from environment

Exit status: 0 clean vault, 1 broken links found, 2 error.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from . import __version__ as OBSIDIAN_LINT_VERSION
from .config import (
    DEFAULT_FORMAT,
    ENV_FORMAT,
    ENV_QUIET,
    ENV_VAULT,
    EXIT_BROKEN_LINKS,
    EXIT_ERROR,
    EXIT_OK,
    OUTPUT_FORMATS,
)
from .errors import ErrorCode, LintError, format_error_json

log = logging.getLogger(__name__)


def _handle_error(error: Exception, json_errors: bool, exit_code: int = EXIT_ERROR) -> NoReturn:
    """Report an error that aborted the run, then exit.

    LintErrors carry their own code; anything else is an internal error.
    """
    from .formatter import display_path

    if isinstance(error, LintError):
        if json_errors:
            click.echo(error.to_json(), err=True)
        else:
            click.echo(f"Error: {display_path(error.message)}", err=True)
    else:
        if json_errors:
            click.echo(format_error_json(ErrorCode.INTERNAL_ERROR, str(error)), err=True)
        else:
            click.echo(f"Error: {display_path(str(error))}", err=True)

    sys.exit(exit_code)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=OBSIDIAN_LINT_VERSION, prog_name="obsidian-lint")
@click.option(
    "--vault",
    "vault",
    required=True,
    envvar=ENV_VAULT,
    show_envvar=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Vault directory to check",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=DEFAULT_FORMAT,
    show_default=True,
    envvar=ENV_FORMAT,
    show_envvar=True,
    help="Report format",
)
@click.option(
    "--json-errors",
    "json_errors",
    is_flag=True,
    help="Output errors as JSON (for programmatic use)",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    envvar=ENV_QUIET,
    help="Suppress warnings, show only errors and the report",
)
def cli(vault: Path, output_format: str, json_errors: bool, quiet: bool):
    """Check an Obsidian vault for broken [[wikilinks]] and ![[embeds]].

    A link resolves when its target matches, ignoring case and a trailing
    .md, the name of any file in the vault or an alias declared in a note's
    frontmatter. Headings (#...) and display text (|...) are not checked.

    \b
    Examples:
      obsidian-lint --vault ~/notes
      obsidian-lint --vault ~/notes --format json
    """
    from ._logging import set_quiet_mode
    from .core import validate
    from .formatter import get_formatter

    if quiet:
        set_quiet_mode(True)

    # click.Choice has already rejected unknown formats
    render = get_formatter(output_format)

    try:
        result = validate(vault)
        report = render(result)
    except Exception as e:
        log.debug("Validation aborted", exc_info=True)
        _handle_error(e, json_errors)

    click.echo(report, nl=False)

    sys.exit(EXIT_OK if result.is_clean else EXIT_BROKEN_LINKS)


# ─────────────────────────────────────────────────────────────────────────────
# Entry Point
# ─────────────────────────────────────────────────────────────────────────────


def main():
    """Entry point for obsidian-lint CLI."""
    from ._logging import configure_logging

    configure_logging()
    cli()


if __name__ == "__main__":
    main()
