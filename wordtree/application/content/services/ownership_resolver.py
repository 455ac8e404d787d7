"""Resolves which user owns a group by walking up to its root."""

import structlog

from wordtree.application.content.protocols import (
    GroupRepositoryProtocol,
    RootOwnershipRepositoryProtocol,
)
from wordtree.application.content.services.tree_limits import TreeLimits, collect_ancestors
from wordtree.domain.common.exceptions import DomainError
from wordtree.domain.common.value_objects import GroupId, UserId
from wordtree.domain.content.exceptions import NotGroupOwnerError
from wordtree.exceptions import StorageError

logger = structlog.get_logger(__name__)


class OwnershipResolver:
    """
    Ascends a group's parent chain and checks the root ownership mapping.

    ``is_owner`` is fail-closed: a missing group, a broken chain or a
    storage failure all answer ``False``. The underlying error is logged
    rather than raised, so callers cannot tell "does not exist" from
    "belongs to someone else" through this check alone.
    """

    def __init__(
        self,
        group_repository: GroupRepositoryProtocol,
        ownership_repository: RootOwnershipRepositoryProtocol,
        limits: TreeLimits,
    ) -> None:
        self.group_repository = group_repository
        self.ownership_repository = ownership_repository
        self.limits = limits

    def find_root(self, group_id: GroupId) -> GroupId:
        """
        Return the id of the root above ``group_id`` (itself if it is a root).

        Raises:
            GroupNotFoundError: If any hop references a missing group
            TreeCycleError: If the parent chain loops
            TreeLimitExceededError: If the chain exceeds the depth ceiling
        """
        return collect_ancestors(self.group_repository, group_id, self.limits)[-1].id

    def is_owner(self, user_id: UserId, group_id: GroupId) -> bool:
        try:
            root_id = self.find_root(group_id)
            return self.ownership_repository.is_owner(user_id, root_id)
        except (DomainError, StorageError) as e:
            logger.warning(
                "ownership_check_failed",
                user_id=user_id.value,
                group_id=group_id.value,
                error_type=type(e).__name__,
                error=str(e),
            )
            return False

    def ensure_owner(self, user_id: UserId, group_id: GroupId) -> None:
        """
        Raise unless ``user_id`` owns the root above ``group_id``.

        Raises:
            NotGroupOwnerError: If the ownership check fails for any reason
        """
        if not self.is_owner(user_id, group_id):
            logger.info("ownership_denied", user_id=user_id.value, group_id=group_id.value)
            raise NotGroupOwnerError(group_id.value)
