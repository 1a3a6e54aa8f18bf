"""Auto-link service: the decision state machine for NiN-based account linking."""

import logging

import logfire

from ninlink.config import AutoLinkConfig
from ninlink.domain.linking.model.account import LocalAccount
from ninlink.domain.linking.model.outcome import (
    Abstain,
    Decision,
    DecisionState,
    DeferToNormalFlow,
    LinkAndSucceed,
)
from ninlink.domain.linking.port.credential_store import CredentialStore
from ninlink.domain.linking.port.directory import AccountDirectory
from ninlink.domain.linking.port.outcome_sink import OutcomeSink
from ninlink.domain.linking.port.session import SessionAccessor
from ninlink.domain.linking.service.context import BrokerContextClassifier
from ninlink.domain.linking.service.credential import CredentialGate
from ninlink.domain.linking.service.diagnostics import describe_fault
from ninlink.domain.linking.service.extractor import IdentityNumberExtractor
from ninlink.domain.linking.service.resolver import AccountResolver
from ninlink.domain.shared.service import Service

logger = logging.getLogger(__name__)


class AutoLinkService(Service):
    """Decides whether a brokered login is bound to an existing local account.

    - decide: Run the checks in order and return the terminal Decision
    - authenticate: decide, then send exactly one signal to the outcome sink
    - action: Resumption after a UI step; always defers

    Checks, each either advancing or stopping with a defer:
    broker context -> identity number -> matching account -> no credential.
    Anything unexpected stops with an abstain.
    """

    _classifier: BrokerContextClassifier
    _extractor: IdentityNumberExtractor
    _resolver: AccountResolver
    _credential_gate: CredentialGate

    @classmethod
    def from_config(
        cls,
        config: AutoLinkConfig,
        directory: AccountDirectory,
        credential_store: CredentialStore,
    ) -> "AutoLinkService":
        """Assemble the service and its checks from settings and host collaborators."""
        return cls(
            _classifier=BrokerContextClassifier(_marker_key=config.broker_marker_key),
            _extractor=IdentityNumberExtractor(
                _claim_key=config.identity_claim_key,
                _attribute_name=config.identity_attribute_name,
            ),
            _resolver=AccountResolver(_directory=directory, _realm=config.realm),
            _credential_gate=CredentialGate(
                _credential_store=credential_store,
                _kind=config.credential_kind,
            ),
        )

    def decide(self, session: SessionAccessor) -> Decision:
        """Evaluate the session without signalling the host.

        Never raises; internal faults map to DecisionState.INTERNAL_ERROR.
        """
        try:
            return self._decide(session)
        except Exception as e:
            logger.error("Error during NiN auto-link authentication: %s", describe_fault(e))
            return Decision.abstain()

    def authenticate(self, session: SessionAccessor, sink: OutcomeSink) -> Decision:
        """Decide and signal the outcome to the host flow."""
        with logfire.span("NinAutoLink", session_id=self._session_id(session)) as span:
            decision = self.decide(session)
            decision = self._dispatch(decision, sink)
            span.set_attribute("decision_state", decision.state.value)
            return decision

    def action(self, session: SessionAccessor, sink: OutcomeSink) -> None:
        """Nothing to process on resumption; hand control back to the flow."""
        sink.defer_to_normal_flow()

    @staticmethod
    def _session_id(session: SessionAccessor) -> str:
        try:
            return str(session.get_session_id())
        except Exception as e:
            logger.debug("Could not read session id for tracing: %s", describe_fault(e))
            return "unknown"

    def _decide(self, session: SessionAccessor) -> Decision:
        logger.debug("Starting NiN auto-link authentication for session: %s", session.get_session_id())

        if not self._classifier.is_broker_login(session):
            logger.debug("Not in broker login context, attempting normal flow")
            return Decision.defer(DecisionState.NOT_BROKER)

        identity_number = self._extractor.extract(session)
        if identity_number is None:
            logger.debug("No identity number found in brokered identity claims")
            return Decision.defer(DecisionState.NO_IDENTITY_NUMBER)

        masked = identity_number.masked
        logger.debug("Found identity number in brokered identity: %s", masked)

        account = self._resolver.resolve(identity_number)
        if account is None:
            logger.debug("No local user found with identity number: %s", masked)
            return Decision.defer(DecisionState.NO_MATCHING_ACCOUNT, masked)

        logger.debug("Found local user: id=%s", account.id)

        if self._credential_gate.has_stored_credential(account):
            logger.debug("User id=%s has stored credentials, cannot auto-link", account.id)
            return Decision.defer(DecisionState.ACCOUNT_HAS_CREDENTIALS, masked)

        logger.info("Auto-linking user id=%s with identity number: %s", account.id, masked)
        return Decision.link(account, masked)

    def _dispatch(self, decision: Decision, sink: OutcomeSink) -> Decision:
        match decision.outcome:
            case LinkAndSucceed(account=account):
                return self._bind(decision, account, sink)
            case DeferToNormalFlow():
                sink.defer_to_normal_flow()
            case Abstain():
                sink.abstain_with_error()
        return decision

    def _bind(self, decision: Decision, account: LocalAccount, sink: OutcomeSink) -> Decision:
        try:
            sink.bind_user_and_succeed(account)
        except Exception as e:
            logger.error(
                "Error binding user id=%s to the session: %s",
                account.id,
                describe_fault(e, account.username),
            )
            sink.abstain_with_error()
            return Decision.abstain()
        return decision
