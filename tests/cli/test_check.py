# topmark:header:start
#
#   project      : ColorFormat
#   file         : test_check.py
#   file_relpath : tests/cli/test_check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `check` command (validation without rendering)."""

from __future__ import annotations

import json
from typing import Any

from tests.cli.conftest import assert_FORMAT_ERROR, assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_check_ok() -> None:
    result = run_cli(["check", "%0Hi %1World", "red", "blue"])

    assert_SUCCESS(result)
    assert result.output == "ok\n"


@mark_cli
def test_check_verbose_reports_counters() -> None:
    result = run_cli(["-v", "check", "%0Hi %1World", "red", "blue"])

    assert_SUCCESS(result)
    assert "characters: 8" in result.output
    assert "directives: 2" in result.output


@mark_cli
def test_check_quiet_prints_nothing() -> None:
    result = run_cli(["-q", "check", "plain"])

    assert_SUCCESS(result)
    assert result.output == ""


@mark_cli
def test_check_does_not_render_text() -> None:
    result = run_cli(["check", "secret text"])

    assert_SUCCESS(result)
    assert "secret" not in result.output


@mark_cli
def test_check_failure() -> None:
    result = run_cli(["check", "%{12}", "red"])

    assert_FORMAT_ERROR(result)
    assert "color argument #12" in result.output


@mark_cli
def test_check_very_long_index_is_a_format_error() -> None:
    result = run_cli(["check", "%{" + "7" * 5000 + "}", "red"])

    assert_FORMAT_ERROR(result)
    assert "(5000 chars)" in result.output


@mark_cli
def test_check_json_ok() -> None:
    result = run_cli(["check", "--format", "json", "a%0b", "red"])

    assert_SUCCESS(result)
    payload: dict[str, Any] = json.loads(result.output)
    assert payload == {"ok": True, "written": 2, "directives": 1}


@mark_cli
def test_check_json_error() -> None:
    """JSON output carries the error details and the exit code still signals failure."""
    result = run_cli(["check", "--format=json", "ab&{x}"])

    assert_FORMAT_ERROR(result)
    payload: dict[str, Any] = json.loads(result.output)
    assert payload["ok"] is False
    assert payload["written"] == 2
    assert payload["error"]["kind"] == "invalid-argument-format"
    assert payload["error"]["position"] == 2
    assert payload["error"]["index"] is None


@mark_cli
def test_check_from_stdin() -> None:
    result = run_cli(["check", "-", "red"], input_text="%1\n")

    assert_FORMAT_ERROR(result)
    assert "#1" in result.output
