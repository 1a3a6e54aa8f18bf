"""Linking domain ports."""

from .credential_store import CredentialStore
from .directory import AccountDirectory
from .outcome_sink import OutcomeSink
from .session import SessionAccessor

__all__ = [
    "AccountDirectory",
    "CredentialStore",
    "OutcomeSink",
    "SessionAccessor",
]
