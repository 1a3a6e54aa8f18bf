"""Local-account resolution by identity number."""

import logging

from ninlink.domain.linking.model.account import LocalAccount
from ninlink.domain.linking.model.value import IdentityNumber
from ninlink.domain.linking.port.directory import AccountDirectory
from ninlink.domain.linking.service.diagnostics import describe_fault
from ninlink.domain.shared.service import Service

logger = logging.getLogger(__name__)


class AccountResolver(Service):
    """Finds the local account whose username is exactly the identity number.

    Only username matching is supported; accounts are expected to have been
    provisioned with the NiN as username. Attribute-based search is not
    implemented.
    """

    _directory: AccountDirectory
    _realm: str

    def resolve(self, identity_number: IdentityNumber) -> LocalAccount | None:
        """Look up the account, answering None when the directory fails."""
        try:
            account = self._directory.lookup_by_username(self._realm, identity_number.root)
        except Exception as e:
            logger.error(
                "Error finding user by identity number %s: %s",
                identity_number,
                describe_fault(e, identity_number.root),
            )
            return None

        if account is None:
            logger.debug("User not found by username, attribute search not implemented")
            return None

        if account.username != identity_number.root:
            # Directories may normalise usernames; only an exact match counts
            logger.debug(
                "Directory returned user id=%s for %s, not an exact username match",
                account.id,
                identity_number,
            )
            return None

        logger.debug("Found user by username matching identity number: id=%s", account.id)
        return account
