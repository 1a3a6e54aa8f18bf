"""Base class for domain services."""

from dataclasses import dataclass
from typing import dataclass_transform


@dataclass_transform()
class _ServiceMeta(type):
    """Metaclass that applies @dataclass to subclasses.

    Collaborators are declared as underscore-prefixed fields and passed by
    keyword, e.g. `CredentialGate(_credential_store=store, _kind=kind)`.
    """

    def __new__(mcs, name: str, bases: tuple, namespace: dict):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            return dataclass(cls)
        return cls


class Service(metaclass=_ServiceMeta):
    """Stateless-per-call domain logic. Subclasses are automatically dataclasses."""
