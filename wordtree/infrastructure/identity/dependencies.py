"""Turns the bearer token of a request into an ``AuthContext``."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from wordtree.application.identity.auth_context import AuthContext
from wordtree.application.identity.use_cases.account_use_case import AccountUseCase
from wordtree.config import get_settings
from wordtree.core import container
from wordtree.infrastructure.common.di import inject_use_case

settings = get_settings()

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_PREFIX.lstrip('/')}/auth/login")


def get_auth_context(
    token: Annotated[str, Depends(oauth2_scheme)],
    use_case: AccountUseCase = Depends(inject_use_case(container.account_use_case)),
) -> AuthContext:
    """Raises AuthenticationFailedError (401) for a bad, expired or orphaned token."""
    return use_case.authenticate(token)


CurrentUser = Annotated[AuthContext, Depends(get_auth_context)]
