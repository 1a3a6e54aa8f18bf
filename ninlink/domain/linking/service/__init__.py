"""Linking domain services."""

from .auto_link import AutoLinkService
from .context import BrokerContextClassifier
from .credential import CredentialGate
from .extractor import IdentityNumberExtractor
from .resolver import AccountResolver

__all__ = [
    "AccountResolver",
    "AutoLinkService",
    "BrokerContextClassifier",
    "CredentialGate",
    "IdentityNumberExtractor",
]
