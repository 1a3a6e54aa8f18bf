"""Host-facing authenticator for the first broker login flow."""

from ninlink.domain.linking.model.account import LocalAccount
from ninlink.domain.linking.model.outcome import Decision
from ninlink.domain.linking.port.outcome_sink import OutcomeSink
from ninlink.domain.linking.port.session import SessionAccessor
from ninlink.domain.linking.service.auto_link import AutoLinkService


class NinAutoLinkAuthenticator:
    """Links a brokered identity to the local account with the same NiN.

    Replaces the "verify existing account by re-authentication" step of a
    first broker login when the matching account has no stored credentials.
    """

    def __init__(self, service: AutoLinkService) -> None:
        self._service = service

    def authenticate(self, session: SessionAccessor, sink: OutcomeSink) -> Decision:
        return self._service.authenticate(session, sink)

    def action(self, session: SessionAccessor, sink: OutcomeSink) -> None:
        self._service.action(session, sink)

    def requires_user(self) -> bool:
        """False: this step is what finds the user."""
        return False

    def configured_for(self, realm: str, account: LocalAccount) -> bool:
        return True

    def set_required_actions(self, realm: str, account: LocalAccount) -> None:
        pass

    def close(self) -> None:
        pass
