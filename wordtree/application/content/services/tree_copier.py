"""Deep duplication of a subtree."""

from dataclasses import dataclass

import structlog

from wordtree.application.content.protocols import (
    CardRepositoryProtocol,
    GroupRepositoryProtocol,
)
from wordtree.application.content.services.tree_limits import TreeLimits
from wordtree.application.content.services.tree_reader import TreeReader
from wordtree.domain.common.value_objects import GroupId
from wordtree.domain.content.entities import Card, Group

logger = structlog.get_logger(__name__)


@dataclass
class CopyStats:
    """How many rows a copy created."""

    groups_created: int = 0
    cards_created: int = 0


class TreeCopier:
    """
    Copies every card and nested group of a source group under a destination.

    Copies are isomorphic to the source: each card is re-created with the
    same word and translation, each group with the same title, a new id and
    a freshly minted invite code. The copier does not commit; the caller
    owns the transaction, so a failure part way through can be rolled back
    as a whole. It also does not check whether the destination lies inside
    the source, which is the caller's job.
    """

    def __init__(
        self,
        tree_reader: TreeReader,
        group_repository: GroupRepositoryProtocol,
        card_repository: CardRepositoryProtocol,
        limits: TreeLimits,
    ) -> None:
        self.tree_reader = tree_reader
        self.group_repository = group_repository
        self.card_repository = card_repository
        self.limits = limits

    def copy_subtree(self, source_id: GroupId, dest_id: GroupId) -> CopyStats:
        """
        Duplicate the contents of ``source_id`` into ``dest_id``.

        Traversal is depth-first with an explicit stack; siblings are
        processed in listing order.

        Raises:
            StorageError: If an insert fails; remaining work is abandoned
            TreeLimitExceededError: If the source is deeper or larger than allowed
        """
        stats = CopyStats()
        stack: list[tuple[GroupId, GroupId, int]] = [(source_id, dest_id, 1)]

        while stack:
            source_group_id, target_group_id, depth = stack.pop()
            pending: list[tuple[GroupId, GroupId, int]] = []

            for item in self.tree_reader.list_children(source_group_id):
                self.limits.check_nodes(
                    "copy_subtree", stats.groups_created + stats.cards_created + 1
                )
                if isinstance(item, Card):
                    self.card_repository.save(item.duplicate_into(target_group_id))
                    stats.cards_created += 1
                    continue

                self.limits.check_depth("copy_subtree", depth + 1)
                new_group = self.group_repository.save(
                    Group.create(title=item.title, parent_id=target_group_id)
                )
                stats.groups_created += 1
                pending.append((item.id, new_group.id, depth + 1))

            stack.extend(reversed(pending))

        logger.debug(
            "copied_subtree",
            source_id=source_id.value,
            dest_id=dest_id.value,
            groups_created=stats.groups_created,
            cards_created=stats.cards_created,
        )
        return stats
