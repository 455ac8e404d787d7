"""Mapper for Card ORM ↔ Domain conversion."""

from wordtree.domain.common.value_objects import CardId, GroupId
from wordtree.domain.content.entities import Card
from wordtree.models import Card as CardORM


class CardMapper:
    def to_domain(self, orm_model: CardORM) -> Card:
        return Card.create_with_id(
            id=CardId(orm_model.id),
            word=orm_model.word,
            translation=orm_model.translation,
            group_id=GroupId(orm_model.group_id),
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Card, orm_model: CardORM | None = None) -> CardORM:
        if orm_model:
            orm_model.word = domain_entity.word
            orm_model.translation = domain_entity.translation
            orm_model.group_id = domain_entity.group_id.value
            return orm_model

        return CardORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted() else None,
            word=domain_entity.word,
            translation=domain_entity.translation,
            group_id=domain_entity.group_id.value,
        )
