"""Linking domain models."""

from .account import LocalAccount
from .outcome import (
    Abstain,
    Decision,
    DecisionState,
    DeferToNormalFlow,
    LinkAndSucceed,
    Outcome,
)
from .session import LoginSession
from .value import (
    AccountId,
    CredentialKind,
    IdentityNumber,
    IdentityNumberSource,
    mask_identity_number,
    redact_identity_number,
)

__all__ = [
    "Abstain",
    "AccountId",
    "CredentialKind",
    "Decision",
    "DecisionState",
    "DeferToNormalFlow",
    "IdentityNumber",
    "IdentityNumberSource",
    "LinkAndSucceed",
    "LocalAccount",
    "LoginSession",
    "Outcome",
    "mask_identity_number",
    "redact_identity_number",
]
