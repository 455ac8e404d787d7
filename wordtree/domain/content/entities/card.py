from dataclasses import dataclass
from datetime import datetime

from wordtree.domain.common.entity import Entity
from wordtree.domain.common.exceptions import ValidationError
from wordtree.domain.common.value_objects import CardId, GroupId


def _require_text(value: str, field: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field.capitalize()} cannot be empty", field=field)
    return value.strip()


@dataclass
class Card(Entity[CardId]):
    """Word/translation pair. Always a leaf, always inside exactly one group."""

    id: CardId
    word: str
    translation: str
    group_id: GroupId
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        _require_text(self.word, "word")
        _require_text(self.translation, "translation")

    def update_content(self, word: str | None = None, translation: str | None = None) -> None:
        """Update word and/or translation. ``None`` keeps the current value."""
        if word is not None:
            self.word = _require_text(word, "word")
        if translation is not None:
            self.translation = _require_text(translation, "translation")

    def move_to(self, group_id: GroupId) -> None:
        self.group_id = group_id

    def duplicate_into(self, group_id: GroupId) -> "Card":
        """Create an unsaved copy of this card inside another group."""
        return Card.create(word=self.word, translation=self.translation, group_id=group_id)

    @classmethod
    def create(cls, word: str, translation: str, group_id: GroupId) -> "Card":
        """Create a new card (ID will be 0 until persisted)."""
        return cls(
            id=CardId.generate(),
            word=_require_text(word, "word"),
            translation=_require_text(translation, "translation"),
            group_id=group_id,
        )

    @classmethod
    def create_with_id(
        cls,
        id: CardId,
        word: str,
        translation: str,
        group_id: GroupId,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "Card":
        """Reconstitute a card from persistence."""
        return cls(
            id=id,
            word=word,
            translation=translation,
            group_id=group_id,
            created_at=created_at,
            updated_at=updated_at,
        )
