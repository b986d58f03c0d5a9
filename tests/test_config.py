from solidity_import_sorter.config import read_first_party_scope
from solidity_import_sorter.rules import DEFAULT_FIRST_PARTY_SCOPE


def test_read_first_party_scope_from_toml(tmp_path):
    toml = tmp_path / "pyproject.toml"
    toml.write_text('[tool.solidity-import-sorter]\nfirst-party-scope = "@my-org"\n')
    assert read_first_party_scope(str(tmp_path)) == "@my-org"


def test_read_first_party_scope_defaults(tmp_path):
    assert read_first_party_scope(str(tmp_path)) == DEFAULT_FIRST_PARTY_SCOPE

    toml = tmp_path / "pyproject.toml"
    toml.write_text("[tool.black]\nline-length = 88\n")
    assert read_first_party_scope(str(tmp_path)) == DEFAULT_FIRST_PARTY_SCOPE


def test_read_first_party_scope_ignores_invalid_toml(tmp_path):
    toml = tmp_path / "pyproject.toml"
    toml.write_text("[tool.solidity-import-sorter\nfirst-party-scope = ")
    assert read_first_party_scope(str(tmp_path)) == DEFAULT_FIRST_PARTY_SCOPE


def test_read_first_party_scope_ignores_non_string(tmp_path):
    toml = tmp_path / "pyproject.toml"
    toml.write_text("[tool.solidity-import-sorter]\nfirst-party-scope = 3\n")
    assert read_first_party_scope(str(tmp_path)) == DEFAULT_FIRST_PARTY_SCOPE


def test_read_first_party_scope_ignores_non_table_section(tmp_path):
    toml = tmp_path / "pyproject.toml"
    toml.write_text('[tool]\nsolidity-import-sorter = "@my-org"\n')
    assert read_first_party_scope(str(tmp_path)) == DEFAULT_FIRST_PARTY_SCOPE

    toml.write_text('tool = "@my-org"\n')
    assert read_first_party_scope(str(tmp_path)) == DEFAULT_FIRST_PARTY_SCOPE
