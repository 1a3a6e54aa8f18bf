"""Unit tests for BrokerContextClassifier."""

from unittest.mock import MagicMock

from ninlink.domain.linking.model.session import LoginSession
from ninlink.domain.linking.service.context import BrokerContextClassifier

MARKER = "BROKER_SESSION_ID"


def make_classifier() -> BrokerContextClassifier:
    return BrokerContextClassifier(_marker_key=MARKER)


class TestBrokerContextClassifier:
    def test_marker_in_client_notes(self) -> None:
        session = LoginSession(session_id="s1", client_notes={MARKER: "b1"})
        assert make_classifier().is_broker_login(session) is True

    def test_marker_in_user_session_notes(self) -> None:
        session = LoginSession(session_id="s1", user_session_notes={MARKER: "b1"})
        assert make_classifier().is_broker_login(session) is True

    def test_marker_absent_from_both(self) -> None:
        session = LoginSession(
            session_id="s1",
            client_notes={"other": "x"},
            user_session_notes={"nin": "12345678901"},
        )
        assert make_classifier().is_broker_login(session) is False

    def test_marker_with_empty_value_still_counts(self) -> None:
        """Presence of the key is what matters, not its value."""
        session = LoginSession(session_id="s1", client_notes={MARKER: ""})
        assert make_classifier().is_broker_login(session) is True

    def test_missing_maps_are_empty(self) -> None:
        session = MagicMock()
        session.get_client_notes.return_value = None
        session.get_user_session_notes.return_value = None
        assert make_classifier().is_broker_login(session) is False

    def test_client_notes_hit_skips_user_session_notes(self) -> None:
        session = MagicMock()
        session.get_client_notes.return_value = {MARKER: "b1"}
        assert make_classifier().is_broker_login(session) is True
        session.get_user_session_notes.assert_not_called()

    def test_custom_marker_key(self) -> None:
        classifier = BrokerContextClassifier(_marker_key="IDP_BROKERED")
        session = LoginSession(session_id="s1", client_notes={MARKER: "b1"})
        assert classifier.is_broker_login(session) is False
