"""LocalAccount entity for the linking domain."""

from pydantic import BaseModel, ConfigDict, Field

from ninlink.domain.linking.model.value import AccountId


class LocalAccount(BaseModel):
    """A local account known to the host's account directory.

    The linking engine only reads accounts; it never creates or mutates them.
    Attributes are multi-valued, as identity servers store them.

    Invariants:
    - `username` is the exact key the directory was queried with
    """

    model_config = ConfigDict(frozen=True)

    id: AccountId = Field(default_factory=AccountId.generate)
    username: str
    attributes: dict[str, list[str]] = Field(default_factory=dict)

    def first_attribute(self, name: str) -> str | None:
        """Get the first value of an attribute, or None if unset."""
        values = self.attributes.get(name)
        if not values:
            return None
        return values[0]
