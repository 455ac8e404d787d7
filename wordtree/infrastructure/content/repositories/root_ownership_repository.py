"""Repository for the user-to-root ownership mapping."""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wordtree.domain.common.value_objects import GroupId, UserId
from wordtree.exceptions import StorageError
from wordtree.models import GroupOwner as GroupOwnerORM


class RootOwnershipRepository:
    """Reads and writes ``group_owners`` rows. Each user owns exactly one root."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_root_for_user(self, user_id: UserId) -> GroupId | None:
        stmt = select(GroupOwnerORM.group_id).where(GroupOwnerORM.user_id == user_id.value)
        try:
            group_id = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError("find_root_for_user") from e
        return GroupId(group_id) if group_id is not None else None

    def is_owner(self, user_id: UserId, root_id: GroupId) -> bool:
        stmt = select(GroupOwnerORM.id).where(
            GroupOwnerORM.user_id == user_id.value,
            GroupOwnerORM.group_id == root_id.value,
        )
        try:
            return self.db.execute(stmt).scalar_one_or_none() is not None
        except SQLAlchemyError as e:
            raise StorageError("check_ownership") from e

    def add(self, user_id: UserId, root_id: GroupId) -> None:
        try:
            self.db.add(GroupOwnerORM(user_id=user_id.value, group_id=root_id.value))
            self.db.flush()
        except SQLAlchemyError as e:
            raise StorageError("add_ownership") from e
