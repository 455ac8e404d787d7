"""Common value objects shared across all domain modules."""

from .ids import CardId, GroupId, UserId
from .invite_code import InviteCode

__all__ = [
    "CardId",
    "GroupId",
    "InviteCode",
    "UserId",
]
