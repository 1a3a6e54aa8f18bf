"""Custom Dishka scopes for ninlink."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """ninlink dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Host lifetime (settings, host-provided collaborators)
    - UOW: Unit of Work (one login attempt)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
