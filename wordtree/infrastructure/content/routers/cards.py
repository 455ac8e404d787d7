"""API routes for card management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from wordtree.application.content.use_cases.card_use_case import CardUseCase
from wordtree.core import container
from wordtree.domain.common.exceptions import DomainError
from wordtree.exceptions import WordtreeError
from wordtree.infrastructure.common.di import inject_use_case
from wordtree.infrastructure.common.schemas import SuccessResponse
from wordtree.infrastructure.content.schemas import (
    CardCreateRequest,
    CardListResponse,
    CardMutationResponse,
    CardResponse,
    CardUpdateRequest,
)
from wordtree.infrastructure.identity.dependencies import CurrentUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cards", tags=["cards"])


@router.get("/group/{group_id}", response_model=CardListResponse)
def list_group_cards(
    group_id: int,
    current_user: CurrentUser,
    use_case: CardUseCase = Depends(inject_use_case(container.card_use_case)),
) -> CardListResponse:
    """List only the cards of a group."""
    try:
        cards = use_case.list_cards(group_id, current_user.user_id)
        return CardListResponse(cards=[CardResponse.from_entity(card) for card in cards])
    except (WordtreeError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list cards of group {group_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=CardMutationResponse, status_code=status.HTTP_201_CREATED)
def create_card(
    request: CardCreateRequest,
    current_user: CurrentUser,
    use_case: CardUseCase = Depends(inject_use_case(container.card_use_case)),
) -> CardMutationResponse:
    """
    Create a card inside a group.

    Args:
        request: Target group, word and translation

    Returns:
        Created card

    Raises:
        HTTPException: 403 if the group is not in the user's tree
    """
    try:
        card = use_case.create_card(
            group_id=request.group_id,
            word=request.word,
            translation=request.translation,
            user_id=current_user.user_id,
        )
        return CardMutationResponse(
            success=True,
            message="Card created successfully",
            card=CardResponse.from_entity(card),
        )
    except (WordtreeError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create card: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/{card_id}", response_model=CardMutationResponse)
def update_card(
    card_id: int,
    request: CardUpdateRequest,
    current_user: CurrentUser,
    use_case: CardUseCase = Depends(inject_use_case(container.card_use_case)),
) -> CardMutationResponse:
    """Update a card's word and/or translation, optionally moving it to another group."""
    try:
        card = use_case.update_card(
            card_id=card_id,
            user_id=current_user.user_id,
            word=request.word,
            translation=request.translation,
            group_id=request.group_id,
        )
        return CardMutationResponse(
            success=True,
            message="Card updated successfully",
            card=CardResponse.from_entity(card),
        )
    except (WordtreeError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update card {card_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{card_id}", response_model=SuccessResponse)
def delete_card(
    card_id: int,
    current_user: CurrentUser,
    use_case: CardUseCase = Depends(inject_use_case(container.card_use_case)),
) -> SuccessResponse:
    try:
        use_case.delete_card(card_id, current_user.user_id)
        return SuccessResponse(success=True, message="Card deleted successfully")
    except (WordtreeError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete card {card_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
