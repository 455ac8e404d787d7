"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from wordtree.config import configure_logging, get_settings
from wordtree.database import dispose_engine, initialize_database
from wordtree.domain.common.exceptions import (
    AuthorizationError,
    DomainError,
    EntityNotFoundError,
)
from wordtree.domain.identity.exceptions import AuthenticationFailedError
from wordtree.exceptions import StorageError, WordtreeError
from wordtree.infrastructure.common.rate_limit import limiter
from wordtree.infrastructure.content.routers import cards, groups
from wordtree.infrastructure.identity.routers import auth, users

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} starting ({settings.ENVIRONMENT})")
    yield
    dispose_engine()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    lifespan=lifespan,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _status_for(exc: DomainError) -> int:
    if isinstance(exc, AuthenticationFailedError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, AuthorizationError):
        return status.HTTP_403_FORBIDDEN
    # InvalidOperationError, ValidationError and identity conflicts
    return status.HTTP_400_BAD_REQUEST


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = _status_for(exc)
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=status_code, content={"detail": exc.message}, headers=headers)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error(f"Storage failure during {exc.operation}", exc_info=exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": "Storage temporarily unavailable, please retry"},
    )


@app.exception_handler(WordtreeError)
async def wordtree_error_handler(request: Request, exc: WordtreeError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


for router in (auth.router, users.router, groups.router, cards.router):
    app.include_router(router, prefix=settings.API_V1_PREFIX)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "healthy", "version": settings.VERSION}
