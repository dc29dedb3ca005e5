# topmark:header:start
#
#   project      : ColorFormat
#   file         : test_version_cmd.py
#   file_relpath : tests/cli/test_version_cmd.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `version` command output."""

from __future__ import annotations

import json

from colorformat.constants import COLORFORMAT_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_version() -> None:
    """It should output the installed version string exactly."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == COLORFORMAT_VERSION


@mark_cli
def test_version_verbose() -> None:
    result = run_cli(["-v", "version"])

    assert_SUCCESS(result)
    assert result.output.splitlines() == ["ColorFormat version:", f"    {COLORFORMAT_VERSION}"]


@mark_cli
def test_version_json_format() -> None:
    """`version --format json` returns parseable JSON with the version value."""
    result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": COLORFORMAT_VERSION}


@mark_cli
def test_version_rejects_unknown_format() -> None:
    result = run_cli(["version", "--format", "yaml"])

    assert result.exit_code == 2
    assert "Must be one of: text, json" in result.output
