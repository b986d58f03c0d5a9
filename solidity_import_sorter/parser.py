"""Parser module for solidity-import-sorter.

This module splits Solidity source text into the lines before the import
block, the import statements themselves and the lines after it.
"""

import re
from typing import List
from typing import NamedTuple
from typing import Optional


COMMENT_PREFIXES = ("//", "/*", "*")

_QUOTED_RE = re.compile(r"[\"']([^\"']+)[\"']")
_IMPORT_KEYWORD_RE = re.compile(r"^\s*import\s*")


class ImportChunk(NamedTuple):
    """One import statement plus the comment lines written directly above it."""

    raw: str
    path: str
    specific: bool


class Regions(NamedTuple):
    header: str
    chunks: List[ImportChunk]
    footer: str


def extract_path(import_text: str) -> Optional[str]:
    """Return the module path of an import statement.

    The last quoted string is always the path, even when the statement
    spans several lines with symbol names on the earlier ones.

    Args:
        import_text: Text of a single or multi-line import statement.

    Returns:
        The quoted path, or None when the statement has no quoted string.
    """
    matches = _QUOTED_RE.findall(import_text)
    return matches[-1] if matches else None


def is_specific_import(import_text: str) -> bool:
    """Return True if the import binds names, False for a bare import."""
    body = _IMPORT_KEYWORD_RE.sub("", import_text, count=1)
    return not body.lstrip().startswith(("'", '"'))


def _is_comment(stripped: str) -> bool:
    return stripped.startswith(COMMENT_PREFIXES)


def _find_block_bounds(lines: List[str]) -> Optional[tuple]:
    """Find the first import line and the terminator line of the last import."""
    first_import: Optional[int] = None
    last_import = -1
    i = 0
    while i < len(lines):
        if lines[i].strip().startswith("import"):
            if first_import is None:
                first_import = i
            closing = i
            while closing < len(lines) and ";" not in lines[closing]:
                closing += 1
            last_import = max(last_import, closing)
            i = closing
        i += 1
    if first_import is None:
        return None
    return first_import, last_import


def _make_chunk(comments: List[str], import_lines: List[str]) -> Optional[ImportChunk]:
    import_text = "\n".join(import_lines)
    path = extract_path(import_text)
    if path is None:
        return None
    raw = "\n".join(comments + import_lines)
    return ImportChunk(raw, path, is_specific_import(import_text))


def _parse_chunks(region_lines: List[str]) -> List[ImportChunk]:
    chunks: List[ImportChunk] = []
    pending_comments: List[str] = []
    import_lines: List[str] = []
    collecting = False

    for line in region_lines:
        stripped = line.strip()
        if collecting:
            import_lines.append(line)
        elif stripped == "":
            pending_comments = []
            continue
        elif _is_comment(stripped):
            pending_comments.append(line)
            continue
        elif stripped.startswith("import"):
            import_lines = [line]
            collecting = True
        else:
            # stray statement inside the block
            continue

        if ";" not in line:
            continue
        chunk = _make_chunk(pending_comments, import_lines)
        if chunk is not None:
            chunks.append(chunk)
        pending_comments = []
        import_lines = []
        collecting = False

    # unterminated statement running to the end of the file
    if collecting:
        while import_lines and import_lines[-1].strip() == "":
            import_lines.pop()
        chunk = _make_chunk(pending_comments, import_lines)
        if chunk is not None:
            chunks.append(chunk)

    return chunks


def parse_regions(source: str) -> Regions:
    """Split source into header, import chunks and footer.

    Comment lines directly above the first import (no blank line in
    between) belong to the import block. Comments above later imports are
    attached to their chunk while parsing. Blank lines inside the block
    are dropped.

    Args:
        source: Full text of a Solidity file.

    Returns:
        A Regions tuple. When the source has no import statement the whole
        text is returned as header with no chunks and an empty footer.
    """
    lines = source.split("\n")
    bounds = _find_block_bounds(lines)
    if bounds is None:
        return Regions(source, [], "")
    first_import, last_import = bounds

    region_start = first_import
    for i in range(first_import - 1, -1, -1):
        stripped = lines[i].strip()
        if stripped == "" or not _is_comment(stripped):
            break
        region_start = i

    header = "\n".join(lines[:region_start])
    footer = "\n".join(lines[last_import + 1:])
    chunks = _parse_chunks(lines[region_start:last_import + 1])
    return Regions(header, chunks, footer)
