"""Load login scenarios from YAML for offline evaluation.

A scenario describes one session snapshot and the accounts the directory
knows about:

    realm: master
    session:
      id: session-1
      client_notes: {BROKER_SESSION_ID: "broker-1"}
      user_session_notes: {nin: "12345678901"}
    accounts:
      - username: "12345678901"
        credentials: []

Identity numbers must be quoted so YAML keeps them as strings.
"""

from dataclasses import dataclass
from pathlib import Path

import pydantic
import yaml
from pydantic import BaseModel, Field

from ninlink.domain.linking.model.account import LocalAccount
from ninlink.domain.linking.model.session import LoginSession
from ninlink.domain.linking.model.value import CredentialKind
from ninlink.domain.shared.error import ValidationError
from ninlink.infrastructure.memory.credential_store import InMemoryCredentialStore
from ninlink.infrastructure.memory.directory import InMemoryAccountDirectory


class AccountSpec(BaseModel):
    username: str
    attributes: dict[str, list[str]] = Field(default_factory=dict)
    credentials: list[CredentialKind] = Field(default_factory=list)

    def to_account(self) -> LocalAccount:
        return LocalAccount(
            username=self.username,
            attributes=self.attributes,
        )


class SessionSpec(BaseModel):
    id: str = "scenario-session"
    client_notes: dict[str, str] | None = None
    user_session_notes: dict[str, str] | None = None
    current_user: AccountSpec | None = None


class ScenarioSpec(BaseModel):
    realm: str = "master"
    session: SessionSpec = SessionSpec()
    accounts: list[AccountSpec] = Field(default_factory=list)


@dataclass
class Scenario:
    """A session snapshot wired to in-memory host collaborators."""

    realm: str
    session: LoginSession
    directory: InMemoryAccountDirectory
    credential_store: InMemoryCredentialStore


def build_scenario(spec: ScenarioSpec) -> Scenario:
    directory = InMemoryAccountDirectory(realm=spec.realm)
    credential_store = InMemoryCredentialStore()
    for account_spec in spec.accounts:
        account = account_spec.to_account()
        directory.add(account)
        credential_store.configure(account, account_spec.credentials)

    current_user = spec.session.current_user
    session = LoginSession(
        session_id=spec.session.id,
        client_notes=spec.session.client_notes or {},
        user_session_notes=spec.session.user_session_notes or {},
        current_user=current_user.to_account() if current_user else None,
    )
    return Scenario(
        realm=spec.realm,
        session=session,
        directory=directory,
        credential_store=credential_store,
    )


def load_scenario(path: Path) -> Scenario:
    """Read and validate a scenario file.

    Raises:
        ValidationError: If the file is missing, is not YAML, or does not
            match the scenario layout
    """
    if not path.is_file():
        raise ValidationError(f"Scenario file not found: {path}", field="path")

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        # PyYAML messages quote the offending line, which may hold a NiN
        mark = getattr(e, "problem_mark", None)
        where = f" at line {mark.line + 1}, column {mark.column + 1}" if mark else ""
        raise ValidationError(f"Invalid YAML in {path}{where}", field="path") from None

    try:
        spec = ScenarioSpec.model_validate(data)
    except pydantic.ValidationError as e:
        # Locations and messages only; inputs may hold identity numbers
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ValidationError(f"Invalid scenario in {path}: {problems}") from e

    return build_scenario(spec)
