"""Password hashing with pwdlib."""

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError


class PepperedPasswordHasher:
    """
    Hashes passwords with pwdlib's recommended algorithm.

    An application-wide pepper is appended before hashing, so a leaked
    database alone is not enough to run an offline guessing attack.
    """

    def __init__(self, pepper: str = "") -> None:
        self._hasher = PasswordHash.recommended()
        self._pepper = pepper
        # pwdlib rejects malformed hashes, so the timing dummy must be a real one
        self._dummy_hash = self._hasher.hash("wordtree-timing-dummy")

    def hash(self, password: str) -> str:
        return self._hasher.hash(password + self._pepper)

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return self._hasher.verify(password + self._pepper, password_hash)
        except UnknownHashError:
            return False

    def verify_dummy(self, password: str) -> None:
        self._hasher.verify(password + self._pepper, self._dummy_hash)
