"""Pydantic schemas for cards."""

from pydantic import BaseModel, Field

from wordtree.domain.content.entities import Card


class CardResponse(BaseModel):
    """A word/translation card."""

    id: int = Field(..., description="Card ID")
    word: str = Field(..., description="Word text")
    translation: str = Field(..., description="Translation text")
    group_id: int = Field(..., description="ID of the group holding the card")

    @classmethod
    def from_entity(cls, card: Card) -> "CardResponse":
        return cls(
            id=card.id.value,
            word=card.word,
            translation=card.translation,
            group_id=card.group_id.value,
        )


class CardCreateRequest(BaseModel):
    """Request body for creating a card."""

    group_id: int = Field(..., description="ID of the group that will hold the card")
    word: str = Field(..., min_length=1, description="Word text")
    translation: str = Field(..., min_length=1, description="Translation text")


class CardUpdateRequest(BaseModel):
    """Request body for updating a card. Omitted fields are left unchanged."""

    word: str | None = Field(None, min_length=1, description="New word text")
    translation: str | None = Field(None, min_length=1, description="New translation text")
    group_id: int | None = Field(None, description="Move the card to this group")


class CardMutationResponse(BaseModel):
    """Response after creating or updating a card."""

    success: bool
    message: str
    card: CardResponse


class CardListResponse(BaseModel):
    """Cards of a single group."""

    cards: list[CardResponse]
