"""Pydantic schemas for accounts and tokens."""

from pydantic import BaseModel, Field

from wordtree.application.identity.tokens import TokenPair


class RegisterRequest(BaseModel):
    """Request body for account registration."""

    email: str = Field(..., min_length=3, max_length=100, description="Login email")
    password: str = Field(..., min_length=8, max_length=128, description="Plain text password")


class RefreshRequest(BaseModel):
    """Refresh token sent in the body by clients that do not keep cookies."""

    refresh_token: str | None = None


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Seconds until the access token expires")

    @classmethod
    def from_pair(cls, pair: TokenPair) -> "TokenResponse":
        return cls(
            access_token=pair.access_token,
            refresh_token=pair.refresh_token,
            expires_in=pair.expires_in,
        )


class MeResponse(BaseModel):
    """The caller's account and the entry point of their tree."""

    id: int = Field(..., description="User ID")
    email: str = Field(..., description="Login email")
    root_group_id: int | None = Field(None, description="ID of the user's root group")
