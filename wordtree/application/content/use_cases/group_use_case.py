"""Use case for mutating groups in the content tree."""

import structlog

from wordtree.application.common.unit_of_work import UnitOfWork
from wordtree.application.content.protocols import (
    CardRepositoryProtocol,
    GroupRepositoryProtocol,
)
from wordtree.application.content.services import (
    OwnershipResolver,
    TreeCopier,
    TreeLimits,
    TreeReader,
)
from wordtree.domain.common.exceptions import InvalidOperationError
from wordtree.domain.common.value_objects import GroupId, InviteCode, UserId
from wordtree.domain.content.entities import Group
from wordtree.domain.content.exceptions import (
    GroupCycleError,
    GroupNotFoundError,
    InviteCodeNotFoundError,
    MissingParentError,
    RootGroupDeletionError,
)

logger = structlog.get_logger(__name__)


class GroupUseCase:
    """Creates, moves, renames, deletes and copies groups under ownership rules."""

    def __init__(
        self,
        group_repository: GroupRepositoryProtocol,
        card_repository: CardRepositoryProtocol,
        ownership_resolver: OwnershipResolver,
        tree_reader: TreeReader,
        tree_copier: TreeCopier,
        unit_of_work: UnitOfWork,
        limits: TreeLimits,
    ) -> None:
        """Initialize use case with repository protocols and services."""
        self.group_repository = group_repository
        self.card_repository = card_repository
        self.ownership_resolver = ownership_resolver
        self.tree_reader = tree_reader
        self.tree_copier = tree_copier
        self.unit_of_work = unit_of_work
        self.limits = limits

    def _get_group(self, group_id: GroupId) -> Group:
        group = self.group_repository.find_by_id(group_id)
        if group is None:
            raise GroupNotFoundError(group_id.value)
        return group

    def _ensure_not_inside(self, operation: str, subtree_root: GroupId, target: GroupId) -> None:
        """Reject ``target`` if it is ``subtree_root`` or one of its descendants."""
        ancestors = self.tree_reader.path_to_root(target)
        if any(group.id == subtree_root for group in ancestors):
            raise GroupCycleError(operation, subtree_root.value, target.value)

    def _ensure_within_limits(
        self, operation: str, parent_id: GroupId, height: int, added_groups: int
    ) -> None:
        """
        Reject a write that would push the parent's tree past ``TreeLimits``.

        Args:
            operation: Name reported in the error
            parent_id: Group that receives the new or moved groups
            height: Levels the incoming subtree adds below ``parent_id``
            added_groups: Groups the write adds to the tree (0 for a move
                within the same tree)

        Raises:
            TreeLimitExceededError: If the result would be deeper or larger than allowed
        """
        path = self.tree_reader.path_to_root(parent_id)
        self.limits.check_depth(operation, len(path) + height)
        if added_groups:
            tree_size = self.tree_reader.full_tree(path[-1].id).size()
            self.limits.check_nodes(operation, tree_size + added_groups)

    def create_group(self, parent_id: int | None, title: str, user_id: int) -> Group:
        """
        Create a group under an existing parent.

        Root groups cannot be created here; they are provisioned once per user.

        Args:
            parent_id: ID of the parent group
            title: Title of the new group
            user_id: ID of the acting user

        Returns:
            Created group entity

        Raises:
            MissingParentError: If parent_id is not provided
            NotGroupOwnerError: If the user does not own the parent's tree
            TreeLimitExceededError: If the tree is already as deep or as large as allowed
        """
        if parent_id is None:
            raise MissingParentError
        parent_id_vo = GroupId(parent_id)
        user_id_vo = UserId(user_id)

        self.ownership_resolver.ensure_owner(user_id_vo, parent_id_vo)
        self._ensure_within_limits("create_group", parent_id_vo, height=1, added_groups=1)

        with self.unit_of_work:
            group = self.group_repository.save(Group.create(title=title, parent_id=parent_id_vo))
            self.unit_of_work.commit()

        logger.info("created_group", group_id=group.id.value, parent_id=parent_id)
        return group

    def update_group(
        self,
        group_id: int,
        user_id: int,
        title: str | None = None,
        parent_id: int | None = None,
    ) -> Group:
        """
        Rename and/or move a group.

        Args:
            group_id: ID of the group to update
            user_id: ID of the acting user
            title: New title, or None to keep it
            parent_id: New parent ID, or None to keep the current parent

        Returns:
            Updated group entity

        Raises:
            InvalidOperationError: If the group would become its own parent or a root is moved
            GroupCycleError: If the new parent lies inside the group's subtree
            GroupNotFoundError: If the group does not exist
            NotGroupOwnerError: If the user owns neither the group nor the new parent
            TreeLimitExceededError: If the moved subtree would end up too deep
        """
        if parent_id is not None and parent_id == group_id:
            raise InvalidOperationError("move_group", "A group cannot be moved into itself")

        group_id_vo = GroupId(group_id)
        user_id_vo = UserId(user_id)

        group = self._get_group(group_id_vo)
        self.ownership_resolver.ensure_owner(user_id_vo, group.parent_id or group.id)

        if title is not None:
            group.rename(title)

        new_parent_id = GroupId(parent_id) if parent_id is not None else None
        if new_parent_id is not None and new_parent_id != group.parent_id:
            if group.is_root():
                raise InvalidOperationError("move_group", "A root group cannot be moved")
            self.ownership_resolver.ensure_owner(user_id_vo, new_parent_id)
            self._ensure_not_inside("move_group", group.id, new_parent_id)
            # Both ends are owned by the same user, so the move stays inside one tree
            height = self.tree_reader.full_tree(group.id).height()
            self._ensure_within_limits("move_group", new_parent_id, height, added_groups=0)
            group.move_to(new_parent_id)

        with self.unit_of_work:
            group = self.group_repository.save(group)
            self.unit_of_work.commit()

        logger.info(
            "updated_group",
            group_id=group_id,
            parent_id=group.parent_id.value if group.parent_id else None,
        )
        return group

    def delete_group(self, group_id: int, user_id: int) -> int:
        """
        Delete a group together with every nested group and card.

        Args:
            group_id: ID of the group to delete
            user_id: ID of the acting user

        Returns:
            Number of groups deleted (the group plus its descendants)

        Raises:
            GroupNotFoundError: If the group does not exist
            RootGroupDeletionError: If the group is a root, regardless of ownership
            NotGroupOwnerError: If the user does not own the group's tree
        """
        group_id_vo = GroupId(group_id)
        user_id_vo = UserId(user_id)

        group = self._get_group(group_id_vo)
        if group.is_root():
            raise RootGroupDeletionError(group_id)
        self.ownership_resolver.ensure_owner(user_id_vo, group.id)

        subtree = self.tree_reader.collect_subtree(group.id)
        # Children before parents so foreign keys never dangle mid-transaction
        group_ids = [g.id for g in reversed(subtree)]

        with self.unit_of_work:
            cards_deleted = self.card_repository.delete_by_groups(group_ids)
            groups_deleted = self.group_repository.delete_many(group_ids)
            self.unit_of_work.commit()

        logger.info(
            "deleted_group",
            group_id=group_id,
            groups_deleted=groups_deleted,
            cards_deleted=cards_deleted,
        )
        return groups_deleted

    def copy_by_invite_code(self, invite_code: str, parent_id: int, user_id: int) -> Group:
        """
        Copy the group behind an invite code, with all its content, under ``parent_id``.

        The copy is a new group with the source's title and a fresh invite
        code. It runs in one transaction: on failure nothing is left behind
        and the error propagates.

        Args:
            invite_code: Invite code of the source group
            parent_id: ID of the destination group
            user_id: ID of the acting user

        Returns:
            The newly created top-level copy

        Raises:
            NotGroupOwnerError: If the user does not own the destination
            InviteCodeNotFoundError: If no group carries the invite code
            GroupCycleError: If the destination lies inside the source subtree
            TreeLimitExceededError: If the copy would make the destination tree
                deeper or larger than allowed
            StorageError: If the store fails mid-copy
        """
        parent_id_vo = GroupId(parent_id)
        user_id_vo = UserId(user_id)

        self.ownership_resolver.ensure_owner(user_id_vo, parent_id_vo)

        source = self.group_repository.find_by_invite_code(InviteCode(invite_code))
        if source is None:
            raise InviteCodeNotFoundError(invite_code)
        self._ensure_not_inside("copy_group", source.id, parent_id_vo)
        source_tree = self.tree_reader.full_tree(source.id)
        self._ensure_within_limits(
            "copy_group", parent_id_vo, source_tree.height(), added_groups=source_tree.size()
        )

        with self.unit_of_work:
            copy_root = self.group_repository.save(
                Group.create(title=source.title, parent_id=parent_id_vo)
            )
            stats = self.tree_copier.copy_subtree(source.id, copy_root.id)
            self.unit_of_work.commit()

        logger.info(
            "copied_group",
            source_id=source.id.value,
            copy_id=copy_root.id.value,
            parent_id=parent_id,
            groups_created=stats.groups_created + 1,
            cards_created=stats.cards_created,
        )
        return copy_root

    def regenerate_invite_code(self, group_id: int, user_id: int) -> Group:
        """
        Replace a group's invite code so the previous one stops resolving.

        Raises:
            GroupNotFoundError: If the group does not exist
            NotGroupOwnerError: If the user does not own the group's tree
        """
        group_id_vo = GroupId(group_id)
        group = self._get_group(group_id_vo)
        self.ownership_resolver.ensure_owner(UserId(user_id), group.id)

        group.regenerate_invite_code()
        with self.unit_of_work:
            group = self.group_repository.save(group)
            self.unit_of_work.commit()

        logger.info("regenerated_invite_code", group_id=group_id)
        return group
