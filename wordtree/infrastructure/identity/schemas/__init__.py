"""Identity context schemas."""

from wordtree.infrastructure.identity.schemas.account_schemas import (
    MeResponse,
    RefreshRequest,
    RegisterRequest,
    TokenResponse,
)

__all__ = [
    "MeResponse",
    "RefreshRequest",
    "RegisterRequest",
    "TokenResponse",
]
