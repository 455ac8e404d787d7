"""Account endpoints: registration and the caller's profile."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from wordtree.application.content.use_cases.tree_query_use_case import TreeQueryUseCase
from wordtree.application.identity.use_cases.account_use_case import AccountUseCase
from wordtree.core import container
from wordtree.domain.common.exceptions import DomainError
from wordtree.domain.content.exceptions import RootGroupNotFoundError
from wordtree.exceptions import WordtreeError
from wordtree.infrastructure.common.di import inject_use_case
from wordtree.infrastructure.common.rate_limit import limiter
from wordtree.infrastructure.identity.dependencies import CurrentUser
from wordtree.infrastructure.identity.refresh_cookie import set_refresh_cookie
from wordtree.infrastructure.identity.schemas import MeResponse, RegisterRequest, TokenResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", response_model=TokenResponse)
@limiter.limit("5/minute")  # type: ignore[misc]
def register(
    request: Request,
    response: Response,
    register_data: RegisterRequest,
    use_case: AccountUseCase = Depends(inject_use_case(container.account_use_case)),
) -> TokenResponse:
    """
    Register an account and log it in.

    The account starts with an empty root group. Answers 403 while
    registrations are disabled and 400 for an email that is taken.
    """
    try:
        pair = use_case.register(register_data.email, register_data.password)
    except (WordtreeError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to register user: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e

    set_refresh_cookie(response, pair.refresh_token)
    return TokenResponse.from_pair(pair)


@router.get("/me", response_model=MeResponse)
def get_me(
    current_user: CurrentUser,
    use_case: TreeQueryUseCase = Depends(inject_use_case(container.tree_query_use_case)),
) -> MeResponse:
    try:
        root_group_id: int | None = use_case.get_root(current_user.user_id).id.value
    except RootGroupNotFoundError:
        root_group_id = None
    return MeResponse(
        id=current_user.user_id, email=current_user.email, root_group_id=root_group_id
    )
