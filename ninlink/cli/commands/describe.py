"""Describe command: print the authenticator's registration metadata."""

import json
from typing import Annotated

import cyclopts

from ninlink.application.factory import NinAutoLinkAuthenticatorFactory
from ninlink.cli.console import get_console

app = cyclopts.App(name="describe", help="Show the metadata registered with the host")


def describe_command() -> str:
    """Return the factory metadata as JSON."""
    descriptor = NinAutoLinkAuthenticatorFactory().describe()
    return descriptor.model_dump_json(indent=2)


@app.default
def describe(*, as_json: Annotated[bool, cyclopts.Parameter(name="--json")] = False) -> None:
    """Show provider id, display type, category and requirement choices.

    Args:
        as_json: Print raw JSON instead of a table.
    """
    console = get_console()
    output = describe_command()
    if as_json:
        console.print(output, markup=False, highlight=False)
        return

    data = json.loads(output)
    console.fields(
        [
            ("Provider ID", data["id"]),
            ("Display type", data["display_type"]),
            ("Category", data["reference_category"]),
            ("Configurable", data["is_configurable"]),
            ("User setup allowed", data["is_user_setup_allowed"]),
            ("Requirements", ", ".join(data["requirement_choices"])),
            ("Config properties", len(data["config_properties"])),
        ],
        title="Authenticator",
    )
    console.info(data["help_text"])
