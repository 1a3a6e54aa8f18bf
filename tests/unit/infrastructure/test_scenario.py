"""Unit tests for the YAML scenario loader."""

from pathlib import Path

import pytest

from ninlink.domain.linking.model.value import CredentialKind
from ninlink.domain.shared.error import ValidationError
from ninlink.infrastructure.scenario import load_scenario

SCENARIO = """\
realm: tenant-a
session:
  id: session-42
  client_notes:
    BROKER_SESSION_ID: broker-1
  user_session_notes:
    nin: "12345678901"
  current_user:
    username: idp-user
    attributes:
      nin: ["12345678901"]
accounts:
  - username: "12345678901"
  - username: "10987654321"
    credentials: [password]
"""


def write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "scenario.yaml"
    path.write_text(content)
    return path


class TestLoadScenario:
    def test_builds_session_and_collaborators(self, tmp_path: Path) -> None:
        scenario = load_scenario(write(tmp_path, SCENARIO))

        assert scenario.realm == "tenant-a"
        assert scenario.session.session_id == "session-42"
        assert scenario.session.client_notes == {"BROKER_SESSION_ID": "broker-1"}
        assert scenario.session.current_user is not None
        assert scenario.session.current_user.first_attribute("nin") == "12345678901"

        linked = scenario.directory.lookup_by_username("tenant-a", "12345678901")
        protected = scenario.directory.lookup_by_username("tenant-a", "10987654321")
        assert linked is not None and protected is not None
        assert not scenario.credential_store.is_configured_for(linked, CredentialKind.PASSWORD)
        assert scenario.credential_store.is_configured_for(protected, CredentialKind.PASSWORD)

    def test_empty_file_is_an_empty_scenario(self, tmp_path: Path) -> None:
        scenario = load_scenario(write(tmp_path, ""))
        assert scenario.realm == "master"
        assert scenario.session.client_notes == {}
        assert scenario.session.current_user is None

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ValidationError, match="not found"):
            load_scenario(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ValidationError, match="Invalid YAML"):
            load_scenario(write(tmp_path, "session: [unclosed"))

    def test_invalid_yaml_does_not_echo_the_line(self, tmp_path: Path) -> None:
        content = "session:\n  user_session_notes:\n    nin: \"12345678901\n"

        with pytest.raises(ValidationError, match="Invalid YAML") as exc_info:
            load_scenario(write(tmp_path, content))

        assert "line" in exc_info.value.message
        assert "12345678901" not in exc_info.value.message
        assert exc_info.value.__cause__ is None

    def test_accounts_have_no_status_flag(self, tmp_path: Path) -> None:
        content = "accounts:\n  - username: \"12345678901\"\n    enabled: false\n"

        scenario = load_scenario(write(tmp_path, content))

        account = scenario.directory.lookup_by_username("master", "12345678901")
        assert account is not None
        assert set(account.model_dump()) == {"id", "username", "attributes"}

    def test_unquoted_number_rejected_without_echoing_it(self, tmp_path: Path) -> None:
        content = "session:\n  user_session_notes:\n    nin: 12345678901\n"

        with pytest.raises(ValidationError) as exc_info:
            load_scenario(write(tmp_path, content))

        assert "session.user_session_notes.nin" in exc_info.value.message
        assert "12345678901" not in exc_info.value.message

    def test_unknown_credential_kind_rejected(self, tmp_path: Path) -> None:
        content = "accounts:\n  - username: u\n    credentials: [smartcard]\n"
        with pytest.raises(ValidationError, match="Invalid scenario"):
            load_scenario(write(tmp_path, content))
