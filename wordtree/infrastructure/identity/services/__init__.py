from .jwt_token_issuer import JwtTokenIssuer
from .password_hasher import PepperedPasswordHasher

__all__ = [
    "JwtTokenIssuer",
    "PepperedPasswordHasher",
]
