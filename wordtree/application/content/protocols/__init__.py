from .card_repository import CardRepositoryProtocol
from .group_repository import GroupRepositoryProtocol
from .root_ownership_repository import RootOwnershipRepositoryProtocol

__all__ = [
    "CardRepositoryProtocol",
    "GroupRepositoryProtocol",
    "RootOwnershipRepositoryProtocol",
]
