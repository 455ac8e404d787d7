"""Protocol for Group repository in content context."""

from typing import Protocol

from wordtree.domain.common.value_objects import GroupId, InviteCode
from wordtree.domain.content.entities.group import Group


class GroupRepositoryProtocol(Protocol):
    """
    Protocol for Group persistence.

    Lookups report a missing row as ``None``. Any persistence failure is
    raised as ``StorageError``.
    """

    def find_by_id(self, group_id: GroupId) -> Group | None:
        """
        Find a group by ID.

        Args:
            group_id: The group ID

        Returns:
            Group entity if found, None otherwise
        """
        ...

    def find_by_invite_code(self, invite_code: InviteCode) -> Group | None:
        """
        Find the group currently carrying an invite code.

        Args:
            invite_code: The invite code

        Returns:
            Group entity if found, None otherwise
        """
        ...

    def find_children(self, parent_id: GroupId) -> list[Group]:
        """
        Get the direct child groups of a group.

        Args:
            parent_id: The parent group ID

        Returns:
            List of group entities ordered by id
        """
        ...

    def save(self, group: Group) -> Group:
        """
        Save a group entity (create or update).

        Args:
            group: The group entity to save

        Returns:
            Saved group entity with database-generated values
        """
        ...

    def delete_many(self, group_ids: list[GroupId]) -> int:
        """
        Delete groups by ID.

        Args:
            group_ids: IDs to delete, children listed before their parents

        Returns:
            Number of deleted rows
        """
        ...
