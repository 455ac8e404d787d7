"""Read models for listing and materializing the content tree."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from .card import Card
from .group import Group

# Flat listing element: a direct child of a group is either a card or a group.
GroupItem = Card | Group


@dataclass
class TreeNode:
    """
    Fully expanded view of a group and its nested groups.

    Cards are not part of the tree; they are fetched per group through
    the item listing.
    """

    root: Group
    children: list["TreeNode"] = field(default_factory=list)

    def walk(self) -> Iterator[Group]:
        """Yield every group in the tree, parents before children."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node.root
            stack.extend(reversed(node.children))

    def size(self) -> int:
        """Number of groups in the tree, including the root."""
        return sum(1 for _ in self.walk())

    def height(self) -> int:
        """Number of groups on the longest downward path, counting the root as 1."""
        tallest = 0
        stack = [(self, 1)]
        while stack:
            node, level = stack.pop()
            tallest = max(tallest, level)
            stack.extend((child, level + 1) for child in node.children)
        return tallest
