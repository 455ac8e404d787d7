from .card import Card
from .group import Group
from .tree_node import GroupItem, TreeNode

__all__ = [
    "Card",
    "Group",
    "GroupItem",
    "TreeNode",
]
