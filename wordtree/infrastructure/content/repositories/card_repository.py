"""Repository for Card domain entities."""

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wordtree.domain.common.value_objects import CardId, GroupId
from wordtree.domain.content.entities import Card
from wordtree.domain.content.exceptions import CardNotFoundError
from wordtree.exceptions import StorageError
from wordtree.infrastructure.content.mappers import CardMapper
from wordtree.models import Card as CardORM


class CardRepository:
    """Repository for Card domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CardMapper()

    def find_by_id(self, card_id: CardId) -> Card | None:
        try:
            orm_model = self.db.get(CardORM, card_id.value)
        except SQLAlchemyError as e:
            raise StorageError("find_card") from e
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_group(self, group_id: GroupId) -> list[Card]:
        """
        Get all cards in a group.

        Returns:
            List of card entities ordered by id
        """
        stmt = select(CardORM).where(CardORM.group_id == group_id.value).order_by(CardORM.id)
        try:
            orm_models = self.db.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            raise StorageError("list_cards") from e
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, card: Card) -> Card:
        """
        Save a card entity (create or update).

        Returns:
            Saved card entity with database-generated values
        """
        try:
            if card.id.is_persisted():
                orm_model = self.db.get(CardORM, card.id.value)
                if not orm_model:
                    raise CardNotFoundError(card.id.value)
                self.mapper.to_orm(card, orm_model)
            else:
                orm_model = self.mapper.to_orm(card)
                self.db.add(orm_model)
            self.db.flush()
            self.db.refresh(orm_model)
        except SQLAlchemyError as e:
            raise StorageError("save_card") from e
        return self.mapper.to_domain(orm_model)

    def delete(self, card_id: CardId) -> bool:
        """
        Delete a card.

        Returns:
            True if deleted, False if not found
        """
        try:
            result = self.db.execute(delete(CardORM).where(CardORM.id == card_id.value))
            self.db.flush()
        except SQLAlchemyError as e:
            raise StorageError("delete_card") from e
        return bool(result.rowcount)

    def delete_by_groups(self, group_ids: list[GroupId]) -> int:
        """Delete every card inside the given groups. Returns the count."""
        if not group_ids:
            return 0
        stmt = delete(CardORM).where(CardORM.group_id.in_([g.value for g in group_ids]))
        try:
            result = self.db.execute(stmt)
            self.db.flush()
        except SQLAlchemyError as e:
            raise StorageError("delete_cards") from e
        return result.rowcount or 0
