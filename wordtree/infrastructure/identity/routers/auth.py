"""Token endpoints: password login, refresh and logout."""

from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.security import OAuth2PasswordRequestForm

from wordtree.application.identity.use_cases.account_use_case import AccountUseCase
from wordtree.core import container
from wordtree.domain.identity.exceptions import AuthenticationFailedError
from wordtree.infrastructure.common.di import inject_use_case
from wordtree.infrastructure.common.rate_limit import limiter
from wordtree.infrastructure.common.schemas import SuccessResponse
from wordtree.infrastructure.identity.refresh_cookie import (
    clear_refresh_cookie,
    set_refresh_cookie,
)
from wordtree.infrastructure.identity.schemas import RefreshRequest, TokenResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
@limiter.limit("5/minute")  # type: ignore[misc]
def login(
    request: Request,
    response: Response,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    use_case: AccountUseCase = Depends(inject_use_case(container.account_use_case)),
) -> TokenResponse:
    """
    Log in with email and password.

    The OAuth2 form calls the email ``username``. Failures answer 401
    through the application's error handler.
    """
    pair = use_case.log_in(form_data.username, form_data.password)
    set_refresh_cookie(response, pair.refresh_token)
    return TokenResponse.from_pair(pair)


@router.post("/refresh", response_model=TokenResponse)
@limiter.limit("10/minute")  # type: ignore[misc]
def refresh(
    request: Request,
    response: Response,
    body: RefreshRequest | None = None,
    refresh_token: Annotated[str | None, Cookie()] = None,
    use_case: AccountUseCase = Depends(inject_use_case(container.account_use_case)),
) -> TokenResponse | JSONResponse:
    """Rotate the token pair. The cookie wins over a token sent in the body."""
    token = refresh_token or (body.refresh_token if body else None)
    try:
        if not token:
            raise AuthenticationFailedError("Refresh token required")
        pair = use_case.refresh(token)
    except AuthenticationFailedError as e:
        # A dead refresh token is dropped so the browser stops sending it
        failed = JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": e.message}
        )
        clear_refresh_cookie(failed)
        return failed

    set_refresh_cookie(response, pair.refresh_token)
    return TokenResponse.from_pair(pair)


@router.post("/logout", response_model=SuccessResponse)
def logout(response: Response) -> SuccessResponse:
    """Drop the refresh cookie. Access tokens stay valid until they expire."""
    clear_refresh_cookie(response)
    return SuccessResponse(success=True, message="Logged out")
