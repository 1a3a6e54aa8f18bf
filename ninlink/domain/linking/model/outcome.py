"""Outcome variants and the decision record produced by the linking engine."""

from dataclasses import dataclass
from enum import StrEnum

from ninlink.domain.linking.model.account import LocalAccount


@dataclass(frozen=True)
class Outcome:
    """Base for the terminal outcomes of one engine run."""

    pass


@dataclass(frozen=True)
class LinkAndSucceed(Outcome):
    """Bind the account to the session as the authenticated user."""

    account: LocalAccount


@dataclass(frozen=True)
class DeferToNormalFlow(Outcome):
    """This step did nothing; the flow continues with its next step."""

    pass


@dataclass(frozen=True)
class Abstain(Outcome):
    """An internal fault occurred; behaves like a defer but is reported as an error."""

    pass


class DecisionState(StrEnum):
    """Terminal states of the decision state machine."""

    NOT_BROKER = "not_broker"
    NO_IDENTITY_NUMBER = "no_identity_number"
    NO_MATCHING_ACCOUNT = "no_matching_account"
    ACCOUNT_HAS_CREDENTIALS = "account_has_credentials"
    LINKED = "linked"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class Decision:
    """The state the engine stopped in and the outcome that state maps to.

    `masked_identity_number` is only ever the masked form.
    """

    state: DecisionState
    outcome: Outcome
    masked_identity_number: str | None = None

    @classmethod
    def defer(cls, state: DecisionState, masked_identity_number: str | None = None) -> "Decision":
        return cls(
            state=state,
            outcome=DeferToNormalFlow(),
            masked_identity_number=masked_identity_number,
        )

    @classmethod
    def link(cls, account: LocalAccount, masked_identity_number: str | None = None) -> "Decision":
        return cls(
            state=DecisionState.LINKED,
            outcome=LinkAndSucceed(account=account),
            masked_identity_number=masked_identity_number,
        )

    @classmethod
    def abstain(cls) -> "Decision":
        return cls(state=DecisionState.INTERNAL_ERROR, outcome=Abstain())

    @property
    def is_linked(self) -> bool:
        return isinstance(self.outcome, LinkAndSucceed)
