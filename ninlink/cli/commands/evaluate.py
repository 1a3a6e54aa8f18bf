"""Evaluate command: run the auto-link decision against a YAML scenario."""

import json
import sys
from pathlib import Path
from typing import Annotated

import cyclopts
from pydantic import BaseModel

from ninlink.application.authenticator import NinAutoLinkAuthenticator
from ninlink.application.di import create_container
from ninlink.cli.console import get_console
from ninlink.config import Config
from ninlink.domain.shared.error import ValidationError
from ninlink.infrastructure.memory.sink import RecordingOutcomeSink
from ninlink.infrastructure.scenario import load_scenario
from ninlink.util.di.scope import Scope

app = cyclopts.App(name="evaluate", help="Run the auto-link decision for a scenario file")


class EvaluationResult(BaseModel):
    """What the host would have seen for the scenario."""

    session_id: str
    state: str
    signals: list[str]
    linked_account_id: str | None = None
    identity_number: str | None = None  # Masked


def evaluate_command(path: Path, config: Config | None = None) -> EvaluationResult:
    """Load a scenario and run the authenticator through the DI container.

    The scenario's realm overrides the configured one.

    Raises:
        ValidationError: If the scenario cannot be loaded
    """
    scenario = load_scenario(path)

    if config is None:
        config = Config()  # type: ignore[call-arg]
    autolink = config.autolink.model_copy(update={"realm": scenario.realm})
    config = config.model_copy(update={"autolink": autolink})

    container = create_container(scenario.directory, scenario.credential_store, config)
    try:
        with container(scope=Scope.UOW) as uow:
            authenticator = uow.get(NinAutoLinkAuthenticator)
            sink = RecordingOutcomeSink()
            decision = authenticator.authenticate(scenario.session, sink)
    finally:
        container.close()

    return EvaluationResult(
        session_id=scenario.session.session_id,
        state=decision.state.value,
        signals=sink.signals,
        linked_account_id=str(sink.user.id) if sink.user else None,
        identity_number=decision.masked_identity_number,
    )


@app.default
def evaluate(
    scenario: Path,
    /,
    *,
    as_json: Annotated[bool, cyclopts.Parameter(name="--json")] = False,
) -> None:
    """Run the decision engine against a session snapshot and in-memory accounts.

    Args:
        scenario: Path to a scenario YAML file.
        as_json: Print raw JSON instead of a table.
    """
    console = get_console()
    try:
        result = evaluate_command(scenario)
    except ValidationError as e:
        console.error(e.message, hint="See ninlink/infrastructure/scenario.py for the layout")
        sys.exit(1)

    if as_json:
        console.print(json.dumps(result.model_dump(), indent=2), markup=False, highlight=False)
        return

    console.fields(
        [
            ("Session", result.session_id),
            ("State", result.state),
            ("Signal", ", ".join(result.signals)),
            ("Linked account", result.linked_account_id),
            ("Identity number", result.identity_number),
        ],
        title="Auto-link decision",
    )
    if result.linked_account_id:
        console.success(f"Linked to account {result.linked_account_id}")
