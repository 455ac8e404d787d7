from dataclasses import dataclass
from uuid import uuid4

from ..exceptions import ValidationError
from ..value_object import ValueObject

MAX_INVITE_CODE_LENGTH = 64


@dataclass(frozen=True)
class InviteCode(ValueObject):
    """
    Opaque token that identifies a group as a copy source.

    Holding an invite code grants no ownership. It only lets another user
    duplicate the group's subtree into a tree they own.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationError("Invite code cannot be empty", field="invite_code")
        if len(self.value) > MAX_INVITE_CODE_LENGTH:
            raise ValidationError(
                "Invite code is too long", field="invite_code", value=self.value
            )

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> "InviteCode":
        """Mint a fresh, globally unique invite code."""
        return cls(str(uuid4()))
