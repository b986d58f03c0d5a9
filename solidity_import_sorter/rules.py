"""Rules module for solidity-import-sorter.

This module defines how import paths are grouped and ordered:

1. external dependencies (anything that is not first-party or relative)
2. first-party interfaces (under the first-party scope, with a path
   segment containing "interfaces")
3. first-party packages (under the first-party scope, everything else)
4. local dependencies (paths starting with ./ or ../)
"""

import enum
from typing import Dict
from typing import Iterable
from typing import List
from typing import Set
from typing import Tuple

from solidity_import_sorter.parser import ImportChunk


DEFAULT_FIRST_PARTY_SCOPE = "@balancer-labs"


class ImportGroup(enum.IntEnum):
    EXTERNAL_DEPENDENCIES = 1
    FIRST_PARTY_INTERFACES = 2
    FIRST_PARTY_PACKAGES = 3
    LOCAL_DEPENDENCIES = 4


def normalize_scope(first_party_scope: str) -> str:
    """Return the scope with exactly one trailing slash."""
    return first_party_scope if first_party_scope.endswith("/") else first_party_scope + "/"


def classify_import(path: str, first_party_scope: str = DEFAULT_FIRST_PARTY_SCOPE) -> ImportGroup:
    """Classify an import path into one of the four import groups.

    Relative paths always land in LOCAL_DEPENDENCIES, even when they point
    at an interfaces directory.

    Args:
        path: Module path taken from the import statement.
        first_party_scope: Package prefix of the first-party packages, e.g. "@my-org".

    Returns:
        The ImportGroup of the path.
    """
    if path.startswith(("./", "../")):
        return ImportGroup.LOCAL_DEPENDENCIES

    if path.startswith(normalize_scope(first_party_scope)):
        # matches both "v3-interfaces" package names and "/interfaces/" directories
        if any("interfaces" in segment for segment in path.split("/")):
            return ImportGroup.FIRST_PARTY_INTERFACES
        return ImportGroup.FIRST_PARTY_PACKAGES

    return ImportGroup.EXTERNAL_DEPENDENCIES


def sort_key(chunk: ImportChunk) -> Tuple[bool, int, str]:
    """Specific imports first, then longest path first, then alphabetical."""
    return (not chunk.specific, -len(chunk.path), chunk.path)


def deduplicate(chunks: Iterable[ImportChunk]) -> List[ImportChunk]:
    """Keep only the first chunk for each import path."""
    seen: Set[str] = set()
    unique: List[ImportChunk] = []
    for chunk in chunks:
        if chunk.path in seen:
            continue
        seen.add(chunk.path)
        unique.append(chunk)
    return unique


def split_imports(chunks: Iterable[ImportChunk], first_party_scope: str) -> Dict[ImportGroup, List[ImportChunk]]:
    """Split chunks into their import groups, each group sorted.

    Returns:
        A dictionary mapping every ImportGroup, in group order, to its sorted chunks.
    """
    grouped: Dict[ImportGroup, List[ImportChunk]] = {group: [] for group in ImportGroup}
    for chunk in chunks:
        grouped[classify_import(chunk.path, first_party_scope)].append(chunk)
    for members in grouped.values():
        members.sort(key=sort_key)
    return grouped
