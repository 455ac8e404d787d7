"""Use case for authorized reads of the content tree."""

from wordtree.application.content.protocols import (
    GroupRepositoryProtocol,
    RootOwnershipRepositoryProtocol,
)
from wordtree.application.content.services import OwnershipResolver, TreeReader
from wordtree.domain.common.value_objects import GroupId, UserId
from wordtree.domain.content.entities import Group, GroupItem, TreeNode
from wordtree.domain.content.exceptions import (
    GroupNotFoundError,
    NotGroupOwnerError,
    RootGroupNotFoundError,
)


class TreeQueryUseCase:
    """Read operations over a user's content tree."""

    def __init__(
        self,
        group_repository: GroupRepositoryProtocol,
        ownership_repository: RootOwnershipRepositoryProtocol,
        ownership_resolver: OwnershipResolver,
        tree_reader: TreeReader,
    ) -> None:
        self.group_repository = group_repository
        self.ownership_repository = ownership_repository
        self.ownership_resolver = ownership_resolver
        self.tree_reader = tree_reader

    def get_root(self, user_id: int) -> Group:
        """
        Get the user's root group.

        Raises:
            RootGroupNotFoundError: If the user has no root provisioned
        """
        root_id = self.ownership_repository.find_root_for_user(UserId(user_id))
        if root_id is None:
            raise RootGroupNotFoundError(user_id)
        root = self.group_repository.find_by_id(root_id)
        if root is None:
            raise RootGroupNotFoundError(user_id)
        return root

    def get_group(self, group_id: int, user_id: int) -> Group:
        """
        Get a single group.

        Raises:
            GroupNotFoundError: If the group does not exist
            NotGroupOwnerError: If the user does not own the group's tree
        """
        group_id_vo = GroupId(group_id)
        group = self.group_repository.find_by_id(group_id_vo)
        if group is None:
            raise GroupNotFoundError(group_id)
        self.ownership_resolver.ensure_owner(UserId(user_id), group_id_vo)
        return group

    def list_items(self, group_id: int, user_id: int) -> list[GroupItem]:
        """
        List the cards and groups directly inside a group.

        Raises:
            NotGroupOwnerError: If the user does not own the group (or it is missing)
        """
        group_id_vo = GroupId(group_id)
        self.ownership_resolver.ensure_owner(UserId(user_id), group_id_vo)
        return self.tree_reader.list_children(group_id_vo)

    def path_to_group(self, group_id: int, user_id: int) -> list[Group]:
        """
        Get the ancestor path of a group, nearest first, ending at the root.

        Raises:
            GroupNotFoundError: If the group does not exist
            NotGroupOwnerError: If the user does not own the root of the path
        """
        path = self.tree_reader.path_to_root(GroupId(group_id))
        if not self.ownership_repository.is_owner(UserId(user_id), path[-1].id):
            raise NotGroupOwnerError(group_id)
        return path

    def full_tree(self, user_id: int) -> TreeNode:
        """Materialize the user's whole tree of groups starting at their root."""
        root = self.get_root(user_id)
        return self.tree_reader.full_tree(root.id)
