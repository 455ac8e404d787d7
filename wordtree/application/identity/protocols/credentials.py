from typing import Protocol

from wordtree.application.identity.tokens import TokenPair


class PasswordHasherProtocol(Protocol):
    def hash(self, password: str) -> str: ...

    def verify(self, password: str, password_hash: str) -> bool: ...

    def verify_dummy(self, password: str) -> None:
        """Spend the time of a real verification when there is no hash to check."""
        ...


class TokenIssuerProtocol(Protocol):
    def issue(self, user_id: int) -> TokenPair: ...

    def read_access(self, token: str) -> int | None: ...

    def read_refresh(self, token: str) -> int | None: ...
