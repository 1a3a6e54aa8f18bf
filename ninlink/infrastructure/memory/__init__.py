"""In-memory adapters for the linking ports."""

from .credential_store import InMemoryCredentialStore
from .directory import InMemoryAccountDirectory
from .sink import RecordingOutcomeSink

__all__ = [
    "InMemoryAccountDirectory",
    "InMemoryCredentialStore",
    "RecordingOutcomeSink",
]
