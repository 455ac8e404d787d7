from .card_repository import CardRepository
from .group_repository import GroupRepository
from .root_ownership_repository import RootOwnershipRepository

__all__ = [
    "CardRepository",
    "GroupRepository",
    "RootOwnershipRepository",
]
