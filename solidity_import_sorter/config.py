import logging
import tomllib
from pathlib import Path

from solidity_import_sorter.rules import DEFAULT_FIRST_PARTY_SCOPE

LOG = logging.getLogger(__name__)

TOOL_SECTION = "solidity-import-sorter"


def read_first_party_scope(root: str) -> str:
    """Detect the first-party scope from pyproject.toml or use the default."""
    toml_path = Path(root) / "pyproject.toml"
    if not toml_path.exists():
        return DEFAULT_FIRST_PARTY_SCOPE

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        LOG.debug("Ignoring %s: %s", toml_path, exc)
        return DEFAULT_FIRST_PARTY_SCOPE

    section = data.get("tool", {})
    if isinstance(section, dict):
        section = section.get(TOOL_SECTION, {})
    if not isinstance(section, dict):
        LOG.debug("Ignoring %s: [tool.%s] is not a table", toml_path, TOOL_SECTION)
        return DEFAULT_FIRST_PARTY_SCOPE

    scope = section.get("first-party-scope")
    if isinstance(scope, str) and scope:
        return scope
    return DEFAULT_FIRST_PARTY_SCOPE
