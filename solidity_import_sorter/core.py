#!/usr/bin/env python3
"""Core utilities for solidity-import-sorter. This module
rebuilds the import block of a Solidity file in group order, and provides
the helpers used to check and fix files on disk.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable
from typing import Iterator
from typing import List
from typing import Optional
from typing import Tuple

from solidity_import_sorter.parser import ImportChunk
from solidity_import_sorter.parser import parse_regions
from solidity_import_sorter.rules import DEFAULT_FIRST_PARTY_SCOPE
from solidity_import_sorter.rules import deduplicate
from solidity_import_sorter.rules import split_imports

LOG = logging.getLogger(__name__)


def build_imports_block(chunks: List[ImportChunk], first_party_scope: str) -> str:
    """Build the sorted imports block, one blank line between groups.

    Empty groups are left out. The block has no leading or trailing newline.
    """
    grouped = split_imports(chunks, first_party_scope)
    return "\n\n".join(
        "\n".join(chunk.raw for chunk in members)
        for members in grouped.values()
        if members
    )


def sort_imports(source: str, first_party_scope: str = DEFAULT_FIRST_PARTY_SCOPE) -> str:
    """Return source with its import statements grouped, sorted and deduplicated.

    Everything outside the import block is kept as is. A source without
    imports is returned unchanged, and the trailing newline of the source
    is preserved either way.
    """
    header, chunks, footer = parse_regions(source)
    if not chunks:
        LOG.debug("No import statements found.")
        return source

    unique = deduplicate(chunks)
    LOG.debug(f"Found {len(chunks)} imports, {len(chunks) - len(unique)} duplicates dropped")

    result = header.rstrip() + "\n\n" + build_imports_block(unique, first_party_scope)
    footer = footer.lstrip()
    if footer:
        result += "\n\n" + footer

    if source.endswith("\n") and not result.endswith("\n"):
        result += "\n"
    return result


transform = sort_imports


def find_first_import_line(source: str) -> Optional[int]:
    """Return the 1-based line number of the first import statement."""
    for lineno, line in enumerate(source.split("\n"), 1):
        if line.strip().startswith("import"):
            return lineno
    return None


def process_file(file_path: str, first_party_scope: str = DEFAULT_FIRST_PARTY_SCOPE, apply: bool = False) -> Tuple[bool, List[Tuple[int, str]]]:
    """Process a single Solidity file, check and fix import ordering.
    Returns (modified, warnings).
    """
    path_obj = Path(file_path)

    try:
        with open(path_obj, encoding="utf-8", newline="") as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        return False, [(0, f"Could not read file: {e}")]

    new_source = sort_imports(source, first_party_scope)
    if new_source == source:
        return False, []

    if not apply:
        return True, [(find_first_import_line(source) or 0, "Import order/style is incorrect.")]

    try:
        with open(path_obj, "w", encoding="utf-8", newline="") as f:
            f.write(new_source)
    except OSError as e:
        return False, [(0, f"Could not write file: {e}")]
    return True, []


def iter_solidity_files(root: str, ignore: Optional[Iterable[str]] = None) -> Iterator[Path]:
    """Yield Solidity files under the given root directory, excluding specified patterns."""
    ignore_set = set(ignore or [])
    root_path = Path(root)
    for path in sorted(root_path.rglob('*.sol')):
        if any(path.is_relative_to(root_path / pattern) for pattern in ignore_set):
            continue
        yield path
