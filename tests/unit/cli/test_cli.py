"""Tests for ninlink CLI commands: describe, evaluate."""

import json
from pathlib import Path

import pytest

from ninlink.cli.commands.describe import describe_command
from ninlink.cli.commands.evaluate import evaluate_command
from ninlink.cli.console import Console
from ninlink.domain.shared.error import ValidationError

LINKABLE = """\
session:
  id: s1
  client_notes: {BROKER_SESSION_ID: b1}
  user_session_notes: {nin: "12345678901"}
accounts:
  - username: "12345678901"
"""


def write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "scenario.yaml"
    path.write_text(content)
    return path


class TestDescribe:
    def test_outputs_factory_metadata_json(self) -> None:
        data = json.loads(describe_command())
        assert data["id"] == "nin-auto-link"
        assert data["reference_category"] == "broker"
        assert data["is_configurable"] is False
        assert data["config_properties"] == []


class TestEvaluate:
    def test_linkable_scenario(self, tmp_path: Path) -> None:
        result = evaluate_command(write(tmp_path, LINKABLE))

        assert result.session_id == "s1"
        assert result.state == "linked"
        assert result.signals == ["bind_user_and_succeed"]
        assert result.linked_account_id is not None
        assert result.identity_number == "123456***01"

    def test_protected_account_defers(self, tmp_path: Path) -> None:
        content = LINKABLE + "    credentials: [password]\n"

        result = evaluate_command(write(tmp_path, content))

        assert result.state == "account_has_credentials"
        assert result.signals == ["defer_to_normal_flow"]
        assert result.linked_account_id is None

    def test_scenario_realm_overrides_settings(self, tmp_path: Path) -> None:
        result = evaluate_command(write(tmp_path, "realm: tenant-a\n" + LINKABLE))
        assert result.state == "linked"

    def test_output_never_contains_full_identity_number(self, tmp_path: Path) -> None:
        result = evaluate_command(write(tmp_path, LINKABLE))
        assert "12345678901" not in result.model_dump_json()

    def test_bad_scenario_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValidationError):
            evaluate_command(tmp_path / "missing.yaml")


class TestConsole:
    def test_success_and_info_go_to_stdout(self, capsys) -> None:
        console = Console(force_terminal=False)

        console.success("linked")
        console.info("details")

        out = capsys.readouterr().out
        assert "✓ linked" in out
        assert "details" in out

    def test_quiet_suppresses_info(self, capsys) -> None:
        Console(force_terminal=False, quiet=True).info("details")
        assert capsys.readouterr().out == ""

    def test_error_goes_to_stderr_with_hint(self, capsys) -> None:
        Console(force_terminal=False).error("bad scenario", hint="quote the NiN")

        captured = capsys.readouterr()
        assert "✗ bad scenario" in captured.err
        assert "quote the NiN" in captured.err
        assert captured.out == ""

    def test_levels_match_cli_usage(self) -> None:
        levels = {"success", "error", "info", "print", "fields"}
        public = {name for name in vars(Console) if not name.startswith("_")}
        assert public == levels
