"""Use case for card operations."""

import structlog

from wordtree.application.common.unit_of_work import UnitOfWork
from wordtree.application.content.protocols import CardRepositoryProtocol
from wordtree.application.content.services import OwnershipResolver, TreeReader
from wordtree.domain.common.value_objects import CardId, GroupId, UserId
from wordtree.domain.content.entities import Card
from wordtree.domain.content.exceptions import CardNotFoundError

logger = structlog.get_logger(__name__)


class CardUseCase:
    """Use case for card CRUD operations. Ownership is checked on the card's group."""

    def __init__(
        self,
        card_repository: CardRepositoryProtocol,
        ownership_resolver: OwnershipResolver,
        tree_reader: TreeReader,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with repository protocols and services."""
        self.card_repository = card_repository
        self.ownership_resolver = ownership_resolver
        self.tree_reader = tree_reader
        self.unit_of_work = unit_of_work

    def _get_card(self, card_id: int) -> Card:
        card = self.card_repository.find_by_id(CardId(card_id))
        if card is None:
            raise CardNotFoundError(card_id)
        return card

    def create_card(self, group_id: int, word: str, translation: str, user_id: int) -> Card:
        """
        Create a new card inside a group.

        Args:
            group_id: ID of the group that will hold the card
            word: Word text
            translation: Translation text
            user_id: ID of the acting user

        Returns:
            Created card domain entity

        Raises:
            NotGroupOwnerError: If the user does not own the group's tree
        """
        group_id_vo = GroupId(group_id)
        self.ownership_resolver.ensure_owner(UserId(user_id), group_id_vo)

        with self.unit_of_work:
            card = self.card_repository.save(
                Card.create(word=word, translation=translation, group_id=group_id_vo)
            )
            self.unit_of_work.commit()

        logger.info("created_card", card_id=card.id.value, group_id=group_id)
        return card

    def list_cards(self, group_id: int, user_id: int) -> list[Card]:
        """List only the cards of a group."""
        group_id_vo = GroupId(group_id)
        self.ownership_resolver.ensure_owner(UserId(user_id), group_id_vo)
        return self.tree_reader.list_cards(group_id_vo)

    def update_card(
        self,
        card_id: int,
        user_id: int,
        word: str | None = None,
        translation: str | None = None,
        group_id: int | None = None,
    ) -> Card:
        """
        Update a card's content and optionally move it to another group.

        Moving requires ownership of both the current and the target group.

        Raises:
            CardNotFoundError: If the card does not exist
            NotGroupOwnerError: If the user does not own the current or target group
        """
        user_id_vo = UserId(user_id)
        card = self._get_card(card_id)
        self.ownership_resolver.ensure_owner(user_id_vo, card.group_id)

        card.update_content(word=word, translation=translation)
        if group_id is not None and GroupId(group_id) != card.group_id:
            target = GroupId(group_id)
            self.ownership_resolver.ensure_owner(user_id_vo, target)
            card.move_to(target)

        with self.unit_of_work:
            card = self.card_repository.save(card)
            self.unit_of_work.commit()

        logger.info("updated_card", card_id=card_id, group_id=card.group_id.value)
        return card

    def delete_card(self, card_id: int, user_id: int) -> None:
        """
        Delete a card.

        Raises:
            CardNotFoundError: If the card does not exist
            NotGroupOwnerError: If the user does not own the card's group
        """
        card = self._get_card(card_id)
        self.ownership_resolver.ensure_owner(UserId(user_id), card.group_id)

        with self.unit_of_work:
            deleted = self.card_repository.delete(card.id)
            self.unit_of_work.commit()
        if not deleted:
            raise CardNotFoundError(card_id)

        logger.info("deleted_card", card_id=card_id)
