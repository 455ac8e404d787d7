"""Read-side traversals of the content tree."""

from collections import deque

from wordtree.application.content.protocols import (
    CardRepositoryProtocol,
    GroupRepositoryProtocol,
)
from wordtree.application.content.services.tree_limits import TreeLimits, collect_ancestors
from wordtree.domain.common.value_objects import GroupId
from wordtree.domain.content.entities import Card, Group, GroupItem, TreeNode
from wordtree.domain.content.exceptions import GroupNotFoundError, TreeCycleError


class TreeReader:
    """
    Lists, walks and materializes groups.

    Every traversal is iterative and bounded by ``TreeLimits``; each visited
    group costs one store round-trip and siblings are visited sequentially
    in store order.
    """

    def __init__(
        self,
        group_repository: GroupRepositoryProtocol,
        card_repository: CardRepositoryProtocol,
        limits: TreeLimits,
    ) -> None:
        self.group_repository = group_repository
        self.card_repository = card_repository
        self.limits = limits

    def list_children(self, group_id: GroupId) -> list[GroupItem]:
        """Return the cards and then the groups directly inside ``group_id``."""
        cards: list[GroupItem] = list(self.card_repository.find_by_group(group_id))
        groups: list[GroupItem] = list(self.group_repository.find_children(group_id))
        return cards + groups

    def list_cards(self, group_id: GroupId) -> list[Card]:
        return self.card_repository.find_by_group(group_id)

    def path_to_root(self, group_id: GroupId) -> list[Group]:
        """
        Reconstruct the ancestor path of a group.

        Returns:
            ``[group, parent, ..., root]``; the last element has no parent

        Raises:
            GroupNotFoundError: If ``group_id`` or an ancestor does not exist
        """
        return collect_ancestors(self.group_repository, group_id, self.limits)

    def full_tree(self, root_id: GroupId) -> TreeNode:
        """
        Materialize every nested group below ``root_id``.

        Expansion is breadth-first with an explicit queue. Children keep
        the order the store returns them in.

        Raises:
            GroupNotFoundError: If ``root_id`` does not exist
            TreeLimitExceededError: If the tree is deeper or larger than allowed
            TreeCycleError: If a group is reached twice
        """
        root = self.group_repository.find_by_id(root_id)
        if root is None:
            raise GroupNotFoundError(root_id.value)

        tree = TreeNode(root=root)
        seen = {root.id}
        queue: deque[tuple[TreeNode, int]] = deque([(tree, 1)])
        while queue:
            node, depth = queue.popleft()
            for child in self.group_repository.find_children(node.root.id):
                if child.id in seen:
                    raise TreeCycleError(child.id.value)
                seen.add(child.id)
                self.limits.check_nodes("full_tree", len(seen))
                self.limits.check_depth("full_tree", depth + 1)

                child_node = TreeNode(root=child)
                node.children.append(child_node)
                queue.append((child_node, depth + 1))
        return tree

    def collect_subtree(self, group_id: GroupId) -> list[Group]:
        """
        Return ``group_id`` and all of its descendant groups, parents first.

        Raises:
            GroupNotFoundError: If ``group_id`` does not exist
        """
        return list(self.full_tree(group_id).walk())
