"""Main CLI application using Cyclopts.

Offline tooling for the auto-link authenticator: inspect its registration
metadata and replay login scenarios against in-memory accounts.
"""

from typing import Annotated

import cyclopts
import logfire

from ninlink.cli.commands import describe, evaluate
from ninlink.config import Config, configure_logging

app = cyclopts.App(
    name="ninlink",
    help="NiN auto-link authenticator - CLI",
)

app.command(describe.app, name="describe")
app.command(evaluate.app, name="evaluate")


@app.meta.default
def main(
    *tokens: Annotated[str, cyclopts.Parameter(show=False, allow_leading_hyphen=True)],
) -> None:
    """Configure logging, then run the requested command."""
    configure_logging(Config().logging)  # type: ignore[call-arg]
    logfire.configure(send_to_logfire="if-token-present", console=False)
    app(tokens)


def run() -> None:
    app.meta()
