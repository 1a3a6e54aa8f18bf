"""Error hierarchy for ninlink.

Error layers:
- NinLinkError: Base class for all ninlink errors
- DomainError: Business rule violations, malformed input
- InfrastructureError: Failures of host-provided lookups

The linking engine never lets these escape to the host flow; they are mapped
to a terminal outcome in ninlink.domain.linking.service.auto_link.
"""


class NinLinkError(Exception):
    """Base class for all ninlink errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(NinLinkError):
    """Base class for domain/business errors."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(NinLinkError):
    """Base class for infrastructure/system errors."""


class LookupFailedError(InfrastructureError):
    """A host lookup (account directory, credential store) failed."""
