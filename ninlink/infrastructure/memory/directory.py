"""In-memory account directory."""

from collections.abc import Iterable

from ninlink.domain.linking.model.account import LocalAccount
from ninlink.domain.linking.port.directory import AccountDirectory


class InMemoryAccountDirectory(AccountDirectory):
    """Account directory backed by a dict, scoped to a single realm.

    Lookups are exact and case-sensitive.
    """

    def __init__(self, accounts: Iterable[LocalAccount] = (), realm: str = "master") -> None:
        self._realm = realm
        self._accounts: dict[str, LocalAccount] = {a.username: a for a in accounts}

    def lookup_by_username(self, realm: str, username: str) -> LocalAccount | None:
        if realm != self._realm:
            return None
        return self._accounts.get(username)

    def add(self, account: LocalAccount) -> None:
        self._accounts[account.username] = account
