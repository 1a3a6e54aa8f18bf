"""Identity-number extraction from a brokered login session."""

import logging
from collections.abc import Callable, Iterator

from ninlink.domain.linking.model.value import IdentityNumber, IdentityNumberSource
from ninlink.domain.linking.port.session import SessionAccessor
from ninlink.domain.linking.service.diagnostics import describe_fault
from ninlink.domain.shared.service import Service

logger = logging.getLogger(__name__)


class IdentityNumberExtractor(Service):
    """Finds the NiN of the brokered identity.

    Sources in precedence order:
    1. `_attribute_name` attribute on the session's current user
    2. `_claim_key` in the user-session notes
    3. `_claim_key` in the client notes

    The first non-blank value wins and later sources are not read. Reading is
    best effort: a failing source ends the search with no result.
    """

    _claim_key: str
    _attribute_name: str

    def extract(self, session: SessionAccessor) -> IdentityNumber | None:
        try:
            for source, read in self._sources(session):
                value = read()
                if value is not None and value.strip():
                    logger.debug("Identity number found in %s", source)
                    return IdentityNumber(value)
        except Exception as e:
            logger.warning(
                "Error extracting identity number from brokered identity: %s", describe_fault(e)
            )
        return None

    def _sources(
        self, session: SessionAccessor
    ) -> Iterator[tuple[IdentityNumberSource, Callable[[], str | None]]]:
        yield IdentityNumberSource.CURRENT_USER_ATTRIBUTE, lambda: self._from_current_user(session)
        yield IdentityNumberSource.USER_SESSION_NOTE, lambda: (
            (session.get_user_session_notes() or {}).get(self._claim_key)
        )
        yield IdentityNumberSource.CLIENT_NOTE, lambda: (
            (session.get_client_notes() or {}).get(self._claim_key)
        )

    def _from_current_user(self, session: SessionAccessor) -> str | None:
        user = session.get_current_user()
        if user is None:
            return None
        return user.first_attribute(self._attribute_name)
