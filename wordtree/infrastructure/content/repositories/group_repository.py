"""Repository for Group domain entities."""

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wordtree.domain.common.value_objects import GroupId, InviteCode
from wordtree.domain.content.entities import Group
from wordtree.domain.content.exceptions import GroupNotFoundError
from wordtree.exceptions import StorageError
from wordtree.infrastructure.content.mappers import GroupMapper
from wordtree.models import Group as GroupORM


class GroupRepository:
    """
    Repository for Group domain entities.

    Writes are flushed, never committed: the calling use case owns the
    transaction through its unit of work.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = GroupMapper()

    def find_by_id(self, group_id: GroupId) -> Group | None:
        """
        Find a group by ID.

        Args:
            group_id: The group ID

        Returns:
            Group entity if found, None otherwise
        """
        try:
            orm_model = self.db.get(GroupORM, group_id.value)
        except SQLAlchemyError as e:
            raise StorageError("find_group") from e
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_invite_code(self, invite_code: InviteCode) -> Group | None:
        stmt = select(GroupORM).where(GroupORM.invite_code == invite_code.value)
        try:
            orm_model = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError("find_group_by_invite_code") from e
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_children(self, parent_id: GroupId) -> list[Group]:
        """
        Get the direct child groups of a group.

        Returns:
            List of group entities ordered by id
        """
        stmt = select(GroupORM).where(GroupORM.parent_id == parent_id.value).order_by(GroupORM.id)
        try:
            orm_models = self.db.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            raise StorageError("list_child_groups") from e
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, group: Group) -> Group:
        """
        Save a group entity (create or update).

        Returns:
            Saved group entity with database-generated values

        Raises:
            GroupNotFoundError: If an update targets a missing row
            StorageError: If the write fails
        """
        try:
            if group.id.is_persisted():
                orm_model = self.db.get(GroupORM, group.id.value)
                if not orm_model:
                    raise GroupNotFoundError(group.id.value)
                self.mapper.to_orm(group, orm_model)
            else:
                orm_model = self.mapper.to_orm(group)
                self.db.add(orm_model)
            self.db.flush()
            self.db.refresh(orm_model)
        except SQLAlchemyError as e:
            raise StorageError("save_group") from e
        return self.mapper.to_domain(orm_model)

    def delete_many(self, group_ids: list[GroupId]) -> int:
        """
        Delete groups by ID, in the order given.

        Callers pass children before parents so no row is ever left with a
        dangling parent reference inside the transaction.

        Returns:
            Number of deleted rows
        """
        deleted = 0
        try:
            for group_id in group_ids:
                result = self.db.execute(delete(GroupORM).where(GroupORM.id == group_id.value))
                deleted += result.rowcount or 0
            self.db.flush()
        except SQLAlchemyError as e:
            raise StorageError("delete_groups") from e
        return deleted
