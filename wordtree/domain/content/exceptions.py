"""Content tree domain exceptions."""

from wordtree.domain.common.exceptions import (
    AuthorizationError,
    EntityNotFoundError,
    InvalidOperationError,
)


class GroupNotFoundError(EntityNotFoundError):
    """Raised when a group cannot be found."""

    def __init__(self, group_id: int) -> None:
        super().__init__("Group", group_id)


class CardNotFoundError(EntityNotFoundError):
    """Raised when a card cannot be found."""

    def __init__(self, card_id: int) -> None:
        super().__init__("Card", card_id)


class InviteCodeNotFoundError(EntityNotFoundError):
    """Raised when no group carries the given invite code."""

    def __init__(self, invite_code: str) -> None:
        super().__init__("Group with invite code", invite_code)
        self.message = f"No group found for invite code {invite_code}"


class RootGroupNotFoundError(EntityNotFoundError):
    """Raised when a user has no root group provisioned."""

    def __init__(self, user_id: int) -> None:
        super().__init__("Root group for user", user_id)


class NotGroupOwnerError(AuthorizationError):
    """Raised when the acting user does not own the root of the target subtree."""

    def __init__(self, group_id: int) -> None:
        super().__init__(f"Not authorized for group {group_id}")
        self.group_id = group_id


class RootGroupDeletionError(InvalidOperationError):
    """Raised when attempting to delete a root group."""

    def __init__(self, group_id: int) -> None:
        super().__init__("delete_group", f"Root group {group_id} cannot be deleted")
        self.group_id = group_id


class MissingParentError(InvalidOperationError):
    """Raised when creating a group without a parent."""

    def __init__(self) -> None:
        super().__init__("create_group", "Parent group id must be set")


class GroupCycleError(InvalidOperationError):
    """Raised when a move or copy would make a group its own ancestor."""

    def __init__(self, operation: str, group_id: int, target_id: int) -> None:
        super().__init__(
            operation,
            f"Group {target_id} is inside the subtree of group {group_id}",
        )
        self.group_id = group_id
        self.target_id = target_id


class TreeLimitExceededError(InvalidOperationError):
    """Raised when a traversal exceeds the configured depth or node ceiling."""

    def __init__(self, operation: str, limit_name: str, limit: int) -> None:
        super().__init__(operation, f"Content tree exceeds {limit_name} of {limit}")
        self.limit_name = limit_name
        self.limit = limit


class TreeCycleError(InvalidOperationError):
    """Raised when an ancestor walk revisits a group (corrupted parent chain)."""

    def __init__(self, group_id: int) -> None:
        super().__init__("walk_tree", f"Cycle detected in parent chain at group {group_id}")
        self.group_id = group_id
