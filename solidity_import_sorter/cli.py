#!/usr/bin/env python3
"""Command-line interface for solidity-import-sorter using Click."""

from importlib import metadata
import logging
from pathlib import Path
import sys
from typing import Iterable
from typing import Optional

import click
from solidity_import_sorter import config
from solidity_import_sorter import core


try:
    VERSION = f"solidity-import-sorter {metadata.version('solidity_import_sorter')}"
except metadata.PackageNotFoundError:
    VERSION = "solidity-import-sorter"


def _resolve_scope(path: Path, first_party_scope: Optional[str]) -> str:
    if first_party_scope:
        return first_party_scope
    root = path if path.is_dir() else path.parent
    return config.read_first_party_scope(str(root))


def _handle_files(path: Path, first_party_scope: Optional[str], ignore: Iterable[str], apply_changes: bool) -> int:
    """Process Solidity files and report or fix import order.

    Args:
        path: File or directory to process.
        first_party_scope: Scope given on the command line, or None to read it from pyproject.toml.
        ignore: Paths relative to a directory argument that are skipped.
        apply_changes: If True, apply fixes in place.
    Returns:
        0 if no changes, 1 if changes required, 2 if error occurred.
    """
    scope = _resolve_scope(path, first_party_scope)
    logging.debug("First-party scope: %s", scope)

    exit_code = 0

    # Handle single file or directory
    if path.is_file():
        file_paths = [path]
    else:
        file_paths = list(core.iter_solidity_files(str(path), ignore))

    for file_path in file_paths:
        try:
            modified, warnings = core.process_file(str(file_path), scope, apply=apply_changes)
        except Exception as exc:
            logging.error("[%s] ERROR: %s", file_path, exc)
            exit_code = max(exit_code, 2)
            continue

        if warnings and not modified:
            for _, msg in warnings:
                logging.error("[%s] ERROR: %s", file_path, msg)
            exit_code = max(exit_code, 2)
            continue

        for lineno, msg in warnings:
            logging.warning("[%s] line %s: %s", file_path, lineno, msg)

        if modified:
            msg = "file updated." if apply_changes else "imports would be modified."
            logging.info("[%s] %s", file_path, msg)
            exit_code = max(exit_code, 1)

    logging.debug("Processed %d file(s)", len(file_paths))
    return exit_code


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Increase verbosity.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output.")
@click.version_option(version=VERSION, prog_name="solidity-import-sorter CLI")
def cli(verbose: bool, quiet: bool) -> None:
    """Sort Solidity imports into third-party, first-party and relative groups."""
    # Configure logging only once
    if not logging.getLogger().handlers:
        if quiet:
            logging.basicConfig(level=logging.ERROR, format="%(message)s")
        else:
            logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")


_path_argument = click.argument("path", type=click.Path(exists=True, file_okay=True, dir_okay=True))
_scope_option = click.option(
    "--first-party-scope",
    default=None,
    help="Package prefix of first-party imports, e.g. '@my-org'. "
    "Defaults to [tool.solidity-import-sorter] in pyproject.toml, then '%s'." % config.DEFAULT_FIRST_PARTY_SCOPE,
)
_ignore_option = click.option("--ignore", multiple=True, help="Path under PATH to skip. May be repeated.")


@cli.command(help="Report files whose imports are out of order without modifying them.")
@_path_argument
@_scope_option
@_ignore_option
def check(path: str, first_party_scope: Optional[str], ignore: tuple) -> None:
    exit_code = _handle_files(Path(path), first_party_scope, ignore, apply_changes=False)
    sys.exit(exit_code)


@cli.command(help="Sort imports in place.")
@_path_argument
@_scope_option
@_ignore_option
def fix(path: str, first_party_scope: Optional[str], ignore: tuple) -> None:
    exit_code = _handle_files(Path(path), first_party_scope, ignore, apply_changes=True)
    sys.exit(exit_code)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
