from .card_mapper import CardMapper
from .group_mapper import GroupMapper

__all__ = [
    "CardMapper",
    "GroupMapper",
]
