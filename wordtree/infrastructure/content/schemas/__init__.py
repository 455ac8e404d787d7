"""Content context schemas."""

from wordtree.infrastructure.content.schemas.card_schemas import (
    CardCreateRequest,
    CardListResponse,
    CardMutationResponse,
    CardResponse,
    CardUpdateRequest,
)
from wordtree.infrastructure.content.schemas.group_schemas import (
    CardItemResponse,
    GroupCopyRequest,
    GroupCreateRequest,
    GroupDeleteResponse,
    GroupItemResponse,
    GroupItemsResponse,
    GroupMutationResponse,
    GroupPathResponse,
    GroupResponse,
    GroupUpdateRequest,
    SubgroupItemResponse,
    TreeNodeResponse,
)

__all__ = [
    "CardCreateRequest",
    "CardItemResponse",
    "CardListResponse",
    "CardMutationResponse",
    "CardResponse",
    "CardUpdateRequest",
    "GroupCopyRequest",
    "GroupCreateRequest",
    "GroupDeleteResponse",
    "GroupItemResponse",
    "GroupItemsResponse",
    "GroupMutationResponse",
    "GroupPathResponse",
    "GroupResponse",
    "GroupUpdateRequest",
    "SubgroupItemResponse",
    "TreeNodeResponse",
]
