from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""

    value: int


@dataclass(frozen=True)
class GroupId(EntityId):
    """Strongly-typed group identifier."""

    value: int


@dataclass(frozen=True)
class CardId(EntityId):
    """Strongly-typed card identifier."""

    value: int
