"""In-memory repositories for driving the content services without a database."""

from dataclasses import replace

import pytest

from wordtree.application.common.unit_of_work import UnitOfWork
from wordtree.application.content.services import (
    OwnershipResolver,
    TreeCopier,
    TreeLimits,
    TreeReader,
)
from wordtree.domain.common.value_objects import CardId, GroupId, InviteCode, UserId
from wordtree.domain.content.entities import Card, Group
from wordtree.exceptions import StorageError


class InMemoryGroupRepository:
    def __init__(self) -> None:
        self.groups: dict[int, Group] = {}
        self._next_id = 1
        self.fail_find = False

    def find_by_id(self, group_id: GroupId) -> Group | None:
        if self.fail_find:
            raise StorageError("find_group")
        group = self.groups.get(group_id.value)
        return replace(group) if group else None

    def find_by_invite_code(self, invite_code: InviteCode) -> Group | None:
        for group in self.groups.values():
            if group.invite_code == invite_code:
                return replace(group)
        return None

    def find_children(self, parent_id: GroupId) -> list[Group]:
        return [
            replace(group)
            for _, group in sorted(self.groups.items())
            if group.parent_id == parent_id
        ]

    def save(self, group: Group) -> Group:
        if not group.id.is_persisted():
            group = replace(group, id=GroupId(self._next_id))
            self._next_id += 1
        self.groups[group.id.value] = group
        return replace(group)

    def delete_many(self, group_ids: list[GroupId]) -> int:
        deleted = 0
        for group_id in group_ids:
            if self.groups.pop(group_id.value, None) is not None:
                deleted += 1
        return deleted

    def insert_raw(self, group: Group) -> Group:
        """Store a group as-is, bypassing id assignment (for corrupted chains)."""
        self.groups[group.id.value] = group
        self._next_id = max(self._next_id, group.id.value + 1)
        return group


class InMemoryCardRepository:
    def __init__(self) -> None:
        self.cards: dict[int, Card] = {}
        self._next_id = 1
        self.fail_after_saves: int | None = None
        self.saves = 0

    def find_by_id(self, card_id: CardId) -> Card | None:
        card = self.cards.get(card_id.value)
        return replace(card) if card else None

    def find_by_group(self, group_id: GroupId) -> list[Card]:
        return [
            replace(card) for _, card in sorted(self.cards.items()) if card.group_id == group_id
        ]

    def save(self, card: Card) -> Card:
        if self.fail_after_saves is not None and self.saves >= self.fail_after_saves:
            raise StorageError("save_card")
        self.saves += 1
        if not card.id.is_persisted():
            card = replace(card, id=CardId(self._next_id))
            self._next_id += 1
        self.cards[card.id.value] = card
        return replace(card)

    def delete(self, card_id: CardId) -> bool:
        return self.cards.pop(card_id.value, None) is not None

    def delete_by_groups(self, group_ids: list[GroupId]) -> int:
        doomed = [cid for cid, card in self.cards.items() if card.group_id in group_ids]
        for cid in doomed:
            del self.cards[cid]
        return len(doomed)


class InMemoryOwnershipRepository:
    def __init__(self) -> None:
        self.roots: dict[int, int] = {}

    def find_root_for_user(self, user_id: UserId) -> GroupId | None:
        root_id = self.roots.get(user_id.value)
        return GroupId(root_id) if root_id is not None else None

    def is_owner(self, user_id: UserId, root_id: GroupId) -> bool:
        return self.roots.get(user_id.value) == root_id.value

    def add(self, user_id: UserId, root_id: GroupId) -> None:
        self.roots[user_id.value] = root_id.value


class RecordingUnitOfWork(UnitOfWork):
    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1


@pytest.fixture
def group_repository() -> InMemoryGroupRepository:
    return InMemoryGroupRepository()


@pytest.fixture
def card_repository() -> InMemoryCardRepository:
    return InMemoryCardRepository()


@pytest.fixture
def ownership_repository() -> InMemoryOwnershipRepository:
    return InMemoryOwnershipRepository()


@pytest.fixture
def unit_of_work() -> RecordingUnitOfWork:
    return RecordingUnitOfWork()


@pytest.fixture
def limits() -> TreeLimits:
    return TreeLimits()


@pytest.fixture
def ownership_resolver(
    group_repository: InMemoryGroupRepository,
    ownership_repository: InMemoryOwnershipRepository,
    limits: TreeLimits,
) -> OwnershipResolver:
    return OwnershipResolver(group_repository, ownership_repository, limits)


@pytest.fixture
def tree_reader(
    group_repository: InMemoryGroupRepository,
    card_repository: InMemoryCardRepository,
    limits: TreeLimits,
) -> TreeReader:
    return TreeReader(group_repository, card_repository, limits)


@pytest.fixture
def tree_copier(
    tree_reader: TreeReader,
    group_repository: InMemoryGroupRepository,
    card_repository: InMemoryCardRepository,
    limits: TreeLimits,
) -> TreeCopier:
    return TreeCopier(tree_reader, group_repository, card_repository, limits)


@pytest.fixture
def user_tree(
    group_repository: InMemoryGroupRepository,
    card_repository: InMemoryCardRepository,
    ownership_repository: InMemoryOwnershipRepository,
) -> dict[str, Group | Card]:
    """
    User 1 owns R1 > G1 > C1; user 2 owns an empty R2.

    Returned by name so tests read like the scenarios they check.
    """
    r1 = group_repository.save(Group.create_root())
    g1 = group_repository.save(Group.create("Animals", parent_id=r1.id))
    c1 = card_repository.save(Card.create("cat", "kot", group_id=g1.id))
    r2 = group_repository.save(Group.create_root())
    ownership_repository.add(UserId(1), r1.id)
    ownership_repository.add(UserId(2), r2.id)
    return {"R1": r1, "G1": g1, "C1": c1, "R2": r2}
