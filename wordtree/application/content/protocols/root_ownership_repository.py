"""Protocol for the user-to-root ownership mapping."""

from typing import Protocol

from wordtree.domain.common.value_objects import GroupId, UserId


class RootOwnershipRepositoryProtocol(Protocol):
    """Ownership lives in its own mapping, never on group rows."""

    def find_root_for_user(self, user_id: UserId) -> GroupId | None:
        """Return the user's root group id, None if not provisioned."""
        ...

    def is_owner(self, user_id: UserId, root_id: GroupId) -> bool:
        """Check whether the mapping contains (user_id, root_id)."""
        ...

    def add(self, user_id: UserId, root_id: GroupId) -> None:
        """Record that user_id owns root_id."""
        ...
