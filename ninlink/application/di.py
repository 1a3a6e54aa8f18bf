from dishka import Container, make_container

from ninlink.config import Config
from ninlink.domain.linking.port.credential_store import CredentialStore
from ninlink.domain.linking.port.directory import AccountDirectory
from ninlink.domain.linking.util.di import LinkingProvider
from ninlink.util.di.scope import Scope


def create_container(
    directory: AccountDirectory,
    credential_store: CredentialStore,
    config: Config | None = None,
) -> Container:
    # Pydantic Settings populates from env vars at runtime
    if config is None:
        config = Config()  # type: ignore[call-arg]

    return make_container(
        LinkingProvider(),
        context={
            Config: config,
            AccountDirectory: directory,
            CredentialStore: credential_store,
        },
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
