from .provider import LinkingProvider

__all__ = ["LinkingProvider"]
