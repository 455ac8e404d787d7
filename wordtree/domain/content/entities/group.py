"""
Group entity for the content tree.
"""

from dataclasses import dataclass
from datetime import datetime

from wordtree.domain.common.entity import Entity
from wordtree.domain.common.exceptions import InvalidOperationError, ValidationError
from wordtree.domain.common.value_objects import GroupId, InviteCode

MAX_TITLE_LENGTH = 255


def _validate_title(title: str) -> str:
    if not title or not title.strip():
        raise ValidationError("Group title cannot be empty", field="title")
    title = title.strip()
    if len(title) > MAX_TITLE_LENGTH:
        raise ValidationError(
            f"Group title cannot exceed {MAX_TITLE_LENGTH} characters", field="title"
        )
    return title


@dataclass
class Group(Entity[GroupId]):
    """
    Folder-like node holding cards and nested groups.

    Business Rules:
    - Title cannot be empty
    - parent_id is None only for a user's root group
    - A group can never be its own parent
    - Roots cannot be re-parented
    """

    id: GroupId
    title: str
    invite_code: InviteCode
    parent_id: GroupId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_title(self.title)
        if self.parent_id is not None and self.id.is_persisted() and self.parent_id == self.id:
            raise InvalidOperationError("move_group", "A group cannot be its own parent")

    def is_root(self) -> bool:
        """Check if this group is the root of a tree."""
        return self.parent_id is None

    def rename(self, title: str) -> None:
        """
        Change the group's title.

        Raises:
            ValidationError: If title is empty or too long
        """
        self.title = _validate_title(title)

    def move_to(self, new_parent_id: GroupId) -> None:
        """
        Re-parent the group.

        Only the single-hop invariant is checked here; descendant checks need
        the store and live in the application layer.

        Raises:
            InvalidOperationError: If the group is a root or the target is itself
        """
        if new_parent_id == self.id:
            raise InvalidOperationError("move_group", "A group cannot be moved into itself")
        if self.is_root():
            raise InvalidOperationError("move_group", "A root group cannot be moved")
        self.parent_id = new_parent_id

    def regenerate_invite_code(self) -> InviteCode:
        """Replace the invite code; the previous one stops resolving."""
        self.invite_code = InviteCode.generate()
        return self.invite_code

    @classmethod
    def create(cls, title: str, parent_id: GroupId | None) -> "Group":
        """Create a new group with a fresh invite code (ID will be 0 until persisted)."""
        return cls(
            id=GroupId.generate(),
            title=_validate_title(title),
            invite_code=InviteCode.generate(),
            parent_id=parent_id,
        )

    @classmethod
    def create_root(cls, title: str = "root") -> "Group":
        """Create a new root group."""
        return cls.create(title=title, parent_id=None)

    @classmethod
    def create_with_id(
        cls,
        id: GroupId,
        title: str,
        invite_code: InviteCode,
        parent_id: GroupId | None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "Group":
        """Reconstitute a group from persistence."""
        return cls(
            id=id,
            title=title,
            invite_code=invite_code,
            parent_id=parent_id,
            created_at=created_at,
            updated_at=updated_at,
        )
