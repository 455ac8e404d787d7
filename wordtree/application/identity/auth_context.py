"""What the content tree needs to know about the caller."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthContext:
    """A verified caller. Only ``user_id`` is used for authorization."""

    user_id: int
    email: str
