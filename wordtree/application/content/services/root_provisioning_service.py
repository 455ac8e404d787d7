"""Creates the single root group every user owns."""

import structlog

from wordtree.application.content.protocols import (
    GroupRepositoryProtocol,
    RootOwnershipRepositoryProtocol,
)
from wordtree.domain.common.value_objects import UserId
from wordtree.domain.content.entities import Group
from wordtree.domain.content.exceptions import GroupNotFoundError

logger = structlog.get_logger(__name__)

DEFAULT_ROOT_TITLE = "root"


class RootProvisioningService:
    """
    Provisions a user's root group and its ownership record.

    Does not commit; registration wraps it in the same transaction that
    creates the user.
    """

    def __init__(
        self,
        group_repository: GroupRepositoryProtocol,
        ownership_repository: RootOwnershipRepositoryProtocol,
    ) -> None:
        self.group_repository = group_repository
        self.ownership_repository = ownership_repository

    def provision_root(self, user_id: UserId) -> Group:
        """Return the user's root, creating it on first call."""
        existing_id = self.ownership_repository.find_root_for_user(user_id)
        if existing_id is not None:
            existing = self.group_repository.find_by_id(existing_id)
            if existing is None:
                raise GroupNotFoundError(existing_id.value)
            return existing

        root = self.group_repository.save(Group.create_root(DEFAULT_ROOT_TITLE))
        self.ownership_repository.add(user_id, root.id)

        logger.info("provisioned_root_group", user_id=user_id.value, root_id=root.id.value)
        return root
