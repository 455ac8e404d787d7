"""Account holder of a content tree."""

from dataclasses import dataclass

from wordtree.domain.common.entity import Entity
from wordtree.domain.common.exceptions import ValidationError
from wordtree.domain.common.value_objects.ids import UserId

MAX_EMAIL_LENGTH = 100


def normalize_email(email: str) -> str:
    """Emails are matched case-insensitively, ignoring surrounding whitespace."""
    return email.strip().lower()


@dataclass
class User(Entity[UserId]):
    """
    A registered account.

    The user's only link to the content tree is the root ownership row
    written when the account is registered.
    """

    id: UserId
    email: str
    password_hash: str

    def __post_init__(self) -> None:
        if "@" not in self.email:
            raise ValidationError("Email must contain '@'", field="email", value=self.email)
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters", field="email"
            )

    @classmethod
    def register(cls, email: str, password_hash: str) -> "User":
        return cls(id=UserId.generate(), email=normalize_email(email), password_hash=password_hash)
