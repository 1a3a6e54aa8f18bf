"""Value objects for the linking domain."""

from enum import StrEnum
from uuid import UUID, uuid4

from pydantic import RootModel, field_validator

from ninlink.domain.shared.model.value import RootValueObject

MASK_PLACEHOLDER = "***"
MASK_PREFIX_LENGTH = 6
MASK_SUFFIX_LENGTH = 2


def mask_identity_number(value: str | None) -> str:
    """Mask an identity number for diagnostics.

    Keeps the first 6 and last 2 characters. Values shorter than 8 characters
    (and None) collapse to the placeholder so nothing of them leaks.
    """
    if value is None or len(value) < MASK_PREFIX_LENGTH + MASK_SUFFIX_LENGTH:
        return MASK_PLACEHOLDER
    return value[:MASK_PREFIX_LENGTH] + MASK_PLACEHOLDER + value[-MASK_SUFFIX_LENGTH:]


def redact_identity_number(text: str, value: str) -> str:
    """Replace every occurrence of an identity number in text with its masked form."""
    if not value:
        return text
    return text.replace(value, mask_identity_number(value))


class IdentityNumber(RootValueObject[str]):
    """A national identity number (NiN) taken from a brokered identity.

    The value is trimmed on construction and must not be blank. Both str()
    and repr() return the masked form; read `.root` when the raw value is
    genuinely needed (e.g. for the directory lookup).
    """

    @field_validator("root")
    @classmethod
    def strip_and_require_value(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Identity number must not be blank")
        return v

    @property
    def masked(self) -> str:
        return mask_identity_number(self.root)

    def redact(self, text: str) -> str:
        return redact_identity_number(text, self.root)

    def __str__(self) -> str:
        return self.masked

    def __repr__(self) -> str:
        return f"IdentityNumber({self.masked!r})"

    def __hash__(self) -> int:
        return hash(self.root)


class AccountId(RootModel[UUID]):
    """Unique identifier for a LocalAccount."""

    @classmethod
    def generate(cls) -> "AccountId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


class CredentialKind(StrEnum):
    """Credential types a local account may have configured."""

    PASSWORD = "password"
    OTP = "otp"
    WEBAUTHN = "webauthn"


class IdentityNumberSource(StrEnum):
    """Where an identity number was found, in precedence order."""

    CURRENT_USER_ATTRIBUTE = "current_user_attribute"
    USER_SESSION_NOTE = "user_session_note"
    CLIENT_NOTE = "client_note"
