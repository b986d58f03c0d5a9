"""Top-level package for solidity-import-sorter.

This package exposes the core API for grouping and sorting Solidity import statements.
"""

from solidity_import_sorter.config import read_first_party_scope
from solidity_import_sorter.core import build_imports_block
from solidity_import_sorter.core import iter_solidity_files
from solidity_import_sorter.core import process_file
from solidity_import_sorter.core import sort_imports
from solidity_import_sorter.core import transform
from solidity_import_sorter.parser import extract_path
from solidity_import_sorter.parser import ImportChunk
from solidity_import_sorter.parser import is_specific_import
from solidity_import_sorter.parser import parse_regions
from solidity_import_sorter.rules import classify_import
from solidity_import_sorter.rules import deduplicate
from solidity_import_sorter.rules import DEFAULT_FIRST_PARTY_SCOPE
from solidity_import_sorter.rules import ImportGroup


__all__ = [
    "DEFAULT_FIRST_PARTY_SCOPE",
    "ImportChunk",
    "ImportGroup",
    "extract_path",
    "is_specific_import",
    "parse_regions",
    "classify_import",
    "deduplicate",
    "build_imports_block",
    "sort_imports",
    "transform",
    "process_file",
    "iter_solidity_files",
    "read_first_party_scope",
]
