"""Base type for domain ports."""

from typing import Protocol


class Port(Protocol):
    """Marker base for interfaces the domain consumes from its host.

    Implementations are adapters in infrastructure/ or are supplied by the
    hosting authentication flow.
    """
