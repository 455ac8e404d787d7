from .credentials import PasswordHasherProtocol, TokenIssuerProtocol
from .user_repository import UserRepositoryProtocol

__all__ = [
    "PasswordHasherProtocol",
    "TokenIssuerProtocol",
    "UserRepositoryProtocol",
]
