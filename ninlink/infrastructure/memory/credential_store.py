"""In-memory credential store."""

from collections.abc import Iterable

from ninlink.domain.linking.model.account import LocalAccount
from ninlink.domain.linking.model.value import AccountId, CredentialKind
from ninlink.domain.linking.port.credential_store import CredentialStore


class InMemoryCredentialStore(CredentialStore):
    """Tracks configured credential kinds per account id."""

    def __init__(self) -> None:
        self._credentials: dict[AccountId, set[CredentialKind]] = {}

    def is_configured_for(self, account: LocalAccount, kind: CredentialKind) -> bool:
        return kind in self._credentials.get(account.id, set())

    def configure(self, account: LocalAccount, kinds: Iterable[CredentialKind]) -> None:
        """Mark credential kinds as configured for an account."""
        self._credentials.setdefault(account.id, set()).update(kinds)
