from dataclasses import dataclass


@dataclass(frozen=True)
class TokenPair:
    """Access and refresh token issued together for one user."""

    access_token: str
    refresh_token: str
    # Seconds until the access token expires
    expires_in: int
