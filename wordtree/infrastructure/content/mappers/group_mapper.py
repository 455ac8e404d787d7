"""Mapper for Group ORM ↔ Domain conversion."""

from wordtree.domain.common.value_objects import GroupId, InviteCode
from wordtree.domain.content.entities import Group
from wordtree.models import Group as GroupORM


class GroupMapper:
    """Mapper for Group ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: GroupORM) -> Group:
        """Convert ORM model to domain entity."""
        return Group.create_with_id(
            id=GroupId(orm_model.id),
            title=orm_model.title,
            invite_code=InviteCode(orm_model.invite_code),
            parent_id=GroupId(orm_model.parent_id) if orm_model.parent_id is not None else None,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Group, orm_model: GroupORM | None = None) -> GroupORM:
        """Convert domain entity to ORM model."""
        parent_id = domain_entity.parent_id.value if domain_entity.parent_id else None
        if orm_model:
            orm_model.title = domain_entity.title
            orm_model.invite_code = domain_entity.invite_code.value
            orm_model.parent_id = parent_id
            return orm_model

        return GroupORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted() else None,
            title=domain_entity.title,
            invite_code=domain_entity.invite_code.value,
            parent_id=parent_id,
        )
