"""LoginSession snapshot for the linking domain."""

from collections.abc import Mapping

from pydantic import Field

from ninlink.domain.linking.model.account import LocalAccount
from ninlink.domain.shared.model.value import ValueObject


class LoginSession(ValueObject):
    """Read-only snapshot of an in-flight authentication attempt.

    Satisfies the SessionAccessor port. Hosts that expose their own session
    object can implement the port directly instead.
    """

    session_id: str
    client_notes: dict[str, str] = Field(default_factory=dict)  # Current attempt only
    user_session_notes: dict[str, str] = Field(default_factory=dict)  # Survives redirects
    current_user: LocalAccount | None = None

    def get_session_id(self) -> str:
        return self.session_id

    def get_client_notes(self) -> Mapping[str, str]:
        return self.client_notes

    def get_user_session_notes(self) -> Mapping[str, str]:
        return self.user_session_notes

    def get_current_user(self) -> LocalAccount | None:
        return self.current_user
