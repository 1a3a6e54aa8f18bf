"""Credential store port for the linking domain."""

from abc import abstractmethod
from typing import Protocol

from ninlink.domain.linking.model.account import LocalAccount
from ninlink.domain.linking.model.value import CredentialKind
from ninlink.domain.shared.port import Port


class CredentialStore(Port, Protocol):
    """Port for querying which credentials an account has configured."""

    @abstractmethod
    def is_configured_for(self, account: LocalAccount, kind: CredentialKind) -> bool:
        """Check whether the account has a credential of the given kind.

        Raises:
            LookupFailedError: If the credential store cannot be queried
        """
        ...
