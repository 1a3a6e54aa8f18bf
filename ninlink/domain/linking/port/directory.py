"""Account directory port for the linking domain."""

from abc import abstractmethod
from typing import Protocol

from ninlink.domain.linking.model.account import LocalAccount
from ninlink.domain.shared.port import Port


class AccountDirectory(Port, Protocol):
    """Port for looking up local accounts in the host's user store."""

    @abstractmethod
    def lookup_by_username(self, realm: str, username: str) -> LocalAccount | None:
        """Get an account by exact username.

        Args:
            realm: The realm (tenant) to search in
            username: The username to match

        Returns:
            The account if one exists, None otherwise

        Raises:
            LookupFailedError: If the user store cannot be queried
        """
        ...
