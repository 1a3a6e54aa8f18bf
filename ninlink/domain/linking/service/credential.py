"""Credential gate: keeps auto-link away from accounts that can re-authenticate."""

import logging

from ninlink.domain.linking.model.account import LocalAccount
from ninlink.domain.linking.model.value import CredentialKind
from ninlink.domain.linking.port.credential_store import CredentialStore
from ninlink.domain.linking.service.diagnostics import describe_fault
from ninlink.domain.shared.service import Service

logger = logging.getLogger(__name__)


class CredentialGate(Service):
    """Checks whether an account already has a credential of `_kind` configured.

    Answers True when the store cannot be queried, so a lookup fault never
    opens the way to an auto-link.
    """

    _credential_store: CredentialStore
    _kind: CredentialKind

    def has_stored_credential(self, account: LocalAccount) -> bool:
        try:
            return self._credential_store.is_configured_for(account, self._kind)
        except Exception as e:
            logger.warning(
                "Error checking stored credentials for user id=%s: %s",
                account.id,
                describe_fault(e, account.username),
            )
            return True
