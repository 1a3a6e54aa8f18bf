"""Outcome sink port: how the engine signals its result to the host flow."""

from abc import abstractmethod
from typing import Protocol

from ninlink.domain.linking.model.account import LocalAccount
from ninlink.domain.shared.port import Port


class OutcomeSink(Port, Protocol):
    """Signals exposed by the host flow engine.

    Exactly one of these is invoked per engine run.
    """

    @abstractmethod
    def bind_user_and_succeed(self, account: LocalAccount) -> None:
        """Set the account as the authenticated user and mark the step successful."""
        ...

    @abstractmethod
    def defer_to_normal_flow(self) -> None:
        """Mark the step as attempted so the flow continues with its next step."""
        ...

    @abstractmethod
    def abstain_with_error(self) -> None:
        """Mark the step as attempted after an internal error."""
        ...
