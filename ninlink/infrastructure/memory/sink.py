"""Outcome sink that records the signal it received."""

from ninlink.domain.linking.model.account import LocalAccount
from ninlink.domain.linking.port.outcome_sink import OutcomeSink


class RecordingOutcomeSink(OutcomeSink):
    """Stands in for a host flow context; keeps every signal in order.

    Used by the CLI and in tests. A well-behaved engine run leaves exactly
    one entry in `signals`.
    """

    BIND = "bind_user_and_succeed"
    DEFER = "defer_to_normal_flow"
    ABSTAIN = "abstain_with_error"

    def __init__(self) -> None:
        self.signals: list[str] = []
        self.user: LocalAccount | None = None

    def bind_user_and_succeed(self, account: LocalAccount) -> None:
        self.user = account
        self.signals.append(self.BIND)

    def defer_to_normal_flow(self) -> None:
        self.signals.append(self.DEFER)

    def abstain_with_error(self) -> None:
        self.signals.append(self.ABSTAIN)

    @property
    def last_signal(self) -> str | None:
        return self.signals[-1] if self.signals else None
