"""Session accessor port for the linking domain."""

from abc import abstractmethod
from collections.abc import Mapping
from typing import Protocol

from ninlink.domain.linking.model.account import LocalAccount
from ninlink.domain.shared.port import Port


class SessionAccessor(Port, Protocol):
    """Read access to the in-flight authentication session.

    Notes maps may be None when the host has not created them yet; callers
    treat that as empty.
    """

    @abstractmethod
    def get_session_id(self) -> str:
        """Unique session identifier, used for diagnostics only."""
        ...

    @abstractmethod
    def get_client_notes(self) -> Mapping[str, str] | None:
        """Notes scoped to the current authentication attempt."""
        ...

    @abstractmethod
    def get_user_session_notes(self) -> Mapping[str, str] | None:
        """Notes scoped to the broader user session."""
        ...

    @abstractmethod
    def get_current_user(self) -> LocalAccount | None:
        """The user already resolved by earlier flow steps, if any."""
        ...
