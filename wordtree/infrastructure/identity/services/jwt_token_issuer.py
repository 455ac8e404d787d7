"""Signed access and refresh tokens (PyJWT, HS256)."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError

from wordtree.application.identity.tokens import TokenPair

ALGORITHM = "HS256"
ACCESS = "access"
REFRESH = "refresh"


class JwtTokenIssuer:
    """
    Issues HS256 tokens carrying the user id as ``sub``.

    Every token also carries a ``type`` claim, and refresh tokens may be
    signed with their own key, so neither kind is accepted in place of
    the other.
    """

    def __init__(
        self,
        secret_key: str,
        access_ttl: timedelta,
        refresh_ttl: timedelta,
        refresh_secret_key: str = "",
    ) -> None:
        self.secret_key = secret_key
        self.refresh_secret_key = refresh_secret_key or secret_key
        self.access_ttl = access_ttl
        self.refresh_ttl = refresh_ttl

    def issue(self, user_id: int) -> TokenPair:
        return TokenPair(
            access_token=self._encode(user_id, ACCESS, self.access_ttl, self.secret_key),
            refresh_token=self._encode(
                user_id, REFRESH, self.refresh_ttl, self.refresh_secret_key
            ),
            expires_in=int(self.access_ttl.total_seconds()),
        )

    def read_access(self, token: str) -> int | None:
        return self._decode(token, ACCESS, self.secret_key)

    def read_refresh(self, token: str) -> int | None:
        return self._decode(token, REFRESH, self.refresh_secret_key)

    def _encode(self, user_id: int, token_type: str, ttl: timedelta, key: str) -> str:
        claims = {"sub": str(user_id), "type": token_type, "exp": datetime.now(UTC) + ttl}
        return jwt.encode(claims, key, algorithm=ALGORITHM)

    def _decode(self, token: str, token_type: str, key: str) -> int | None:
        try:
            claims = jwt.decode(token, key, algorithms=[ALGORITHM])
        except InvalidTokenError:
            return None
        if claims.get("type") != token_type:
            return None
        subject = str(claims.get("sub", ""))
        return int(subject) if subject.isdigit() else None
