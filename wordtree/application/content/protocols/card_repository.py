"""Protocol for Card repository in content context."""

from typing import Protocol

from wordtree.domain.common.value_objects import CardId, GroupId
from wordtree.domain.content.entities.card import Card


class CardRepositoryProtocol(Protocol):
    """Protocol for Card persistence."""

    def find_by_id(self, card_id: CardId) -> Card | None:
        """Find a card by ID, None if missing."""
        ...

    def find_by_group(self, group_id: GroupId) -> list[Card]:
        """Get all cards in a group ordered by id."""
        ...

    def save(self, card: Card) -> Card:
        """Save a card entity (create or update)."""
        ...

    def delete(self, card_id: CardId) -> bool:
        """Delete a card. Returns False if it did not exist."""
        ...

    def delete_by_groups(self, group_ids: list[GroupId]) -> int:
        """Delete every card inside the given groups. Returns the count."""
        ...
