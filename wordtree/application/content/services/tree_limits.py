from dataclasses import dataclass

from wordtree.application.content.protocols import GroupRepositoryProtocol
from wordtree.domain.common.value_objects import GroupId
from wordtree.domain.content.entities.group import Group
from wordtree.domain.content.exceptions import (
    GroupNotFoundError,
    TreeCycleError,
    TreeLimitExceededError,
)


@dataclass(frozen=True)
class TreeLimits:
    """Ceilings applied to every traversal of the content tree."""

    max_depth: int = 64
    max_nodes: int = 10_000

    def check_depth(self, operation: str, depth: int) -> None:
        if depth > self.max_depth:
            raise TreeLimitExceededError(operation, "maximum depth", self.max_depth)

    def check_nodes(self, operation: str, count: int) -> None:
        if count > self.max_nodes:
            raise TreeLimitExceededError(operation, "maximum node count", self.max_nodes)


def collect_ancestors(
    group_repository: GroupRepositoryProtocol, group_id: GroupId, limits: TreeLimits
) -> list[Group]:
    """
    Walk parent pointers from a group up to its root.

    Returns:
        ``[group, parent, ..., root]``, nearest first

    Raises:
        GroupNotFoundError: If the group or any hop of its chain is missing
        TreeCycleError: If the chain revisits a group
        TreeLimitExceededError: If the chain is longer than ``limits.max_depth``
    """
    group = group_repository.find_by_id(group_id)
    if group is None:
        raise GroupNotFoundError(group_id.value)

    chain = [group]
    seen = {group.id}
    while group.parent_id is not None:
        limits.check_depth("walk_tree", len(chain) + 1)
        parent = group_repository.find_by_id(group.parent_id)
        if parent is None:
            raise GroupNotFoundError(group.parent_id.value)
        if parent.id in seen:
            raise TreeCycleError(parent.id.value)
        seen.add(parent.id)
        chain.append(parent)
        group = parent
    return chain
