"""Factory and registration metadata for the NiN auto-link authenticator."""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, ClassVar

from pydantic import BaseModel

from ninlink.application.authenticator import NinAutoLinkAuthenticator
from ninlink.config import AutoLinkConfig
from ninlink.domain.linking.port.credential_store import CredentialStore
from ninlink.domain.linking.port.directory import AccountDirectory
from ninlink.domain.linking.service.auto_link import AutoLinkService
from ninlink.domain.shared.model.value import ValueObject


class Requirement(StrEnum):
    """How a step participates in a host authentication flow."""

    REQUIRED = "REQUIRED"
    ALTERNATIVE = "ALTERNATIVE"
    DISABLED = "DISABLED"
    CONDITIONAL = "CONDITIONAL"


class ConfigProperty(BaseModel):
    """A per-execution setting an admin could edit in the host console."""

    name: str
    label: str
    help_text: str = ""
    type: str = "String"
    default_value: Any = None


class AuthenticatorDescriptor(ValueObject):
    """Registration metadata the host shows for an authenticator."""

    id: str
    display_type: str
    reference_category: str
    is_configurable: bool
    is_user_setup_allowed: bool
    requirement_choices: tuple[Requirement, ...]
    help_text: str
    config_properties: tuple[ConfigProperty, ...] = ()


class NinAutoLinkAuthenticatorFactory:
    """Registers the NiN auto-link authenticator with the host flow engine.

    Metadata is pass-through; no per-execution configuration is offered.
    Deployment settings (marker key, claim key, realm...) come from
    AutoLinkConfig instead.
    """

    PROVIDER_ID: ClassVar[str] = "nin-auto-link"
    DISPLAY_TYPE: ClassVar[str] = "NiN Auto-Link"
    REFERENCE_CATEGORY: ClassVar[str] = "broker"
    REQUIREMENT_CHOICES: ClassVar[tuple[Requirement, ...]] = (
        Requirement.REQUIRED,
        Requirement.DISABLED,
    )
    HELP_TEXT: ClassVar[str] = (
        "Automatically links federated IdP accounts to local users based on NiN "
        "(Norwegian Identity Number) matching. This authenticator should be used in "
        "the First Broker Login flow to replace the password verification step when "
        "a local user with matching NiN has no stored credentials."
    )

    def __init__(self, config: AutoLinkConfig | None = None) -> None:
        self._config = config or AutoLinkConfig()

    @property
    def id(self) -> str:
        return self.PROVIDER_ID

    @property
    def display_type(self) -> str:
        return self.DISPLAY_TYPE

    @property
    def reference_category(self) -> str:
        return self.REFERENCE_CATEGORY

    @property
    def is_configurable(self) -> bool:
        return False

    @property
    def is_user_setup_allowed(self) -> bool:
        return False

    @property
    def requirement_choices(self) -> tuple[Requirement, ...]:
        return self.REQUIREMENT_CHOICES

    @property
    def help_text(self) -> str:
        return self.HELP_TEXT

    @property
    def config_properties(self) -> list[ConfigProperty]:
        return []

    def create(
        self,
        directory: AccountDirectory,
        credential_store: CredentialStore,
    ) -> NinAutoLinkAuthenticator:
        """Create an authenticator bound to the host's directory and credential store."""
        service = AutoLinkService.from_config(self._config, directory, credential_store)
        return NinAutoLinkAuthenticator(service)

    def describe(self) -> AuthenticatorDescriptor:
        return AuthenticatorDescriptor(
            id=self.id,
            display_type=self.display_type,
            reference_category=self.reference_category,
            is_configurable=self.is_configurable,
            is_user_setup_allowed=self.is_user_setup_allowed,
            requirement_choices=self.requirement_choices,
            help_text=self.help_text,
            config_properties=tuple(self.config_properties),
        )

    # Host lifecycle hooks; nothing to set up or release.

    def init(self, config_scope: Mapping[str, str] | None = None) -> None:
        pass

    def post_init(self) -> None:
        pass

    def close(self) -> None:
        pass
