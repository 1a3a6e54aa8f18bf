"""DI provider for the linking domain."""

from dishka import from_context, provide

from ninlink.application.authenticator import NinAutoLinkAuthenticator
from ninlink.config import Config
from ninlink.domain.linking.port.credential_store import CredentialStore
from ninlink.domain.linking.port.directory import AccountDirectory
from ninlink.domain.linking.service.auto_link import AutoLinkService
from ninlink.util.di.base import Provider
from ninlink.util.di.scope import Scope


class LinkingProvider(Provider):
    """DI provider for the auto-link service and the host-facing authenticator.

    The account directory and credential store belong to the host and are
    passed in as container context.
    """

    config = from_context(provides=Config, scope=Scope.APP)
    directory = from_context(provides=AccountDirectory, scope=Scope.APP)
    credential_store = from_context(provides=CredentialStore, scope=Scope.APP)

    authenticator = provide(NinAutoLinkAuthenticator, scope=Scope.UOW)

    @provide(scope=Scope.UOW)
    def get_auto_link_service(
        self,
        config: Config,
        directory: AccountDirectory,
        credential_store: CredentialStore,
    ) -> AutoLinkService:
        """Provide AutoLinkService."""
        return AutoLinkService.from_config(config.autolink, directory, credential_store)
