"""Broker-login context classification."""

from ninlink.domain.linking.port.session import SessionAccessor
from ninlink.domain.shared.service import Service


class BrokerContextClassifier(Service):
    """Tells brokered (first broker login) attempts apart from direct local logins.

    A brokered attempt carries the marker note in the client notes or in the
    user-session notes, depending on where the broker stored it.
    """

    _marker_key: str

    def is_broker_login(self, session: SessionAccessor) -> bool:
        client_notes = session.get_client_notes() or {}
        if self._marker_key in client_notes:
            return True
        user_session_notes = session.get_user_session_notes() or {}
        return self._marker_key in user_session_notes
