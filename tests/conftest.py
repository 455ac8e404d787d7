"""Pytest configuration and fixtures."""

import os

# Settings are read at import time, so the test environment must be set first
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-wordtree-tests-0123456789")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("COOKIE_SECURE", "false")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from wordtree import models  # noqa: E402
from wordtree.application.identity.auth_context import AuthContext  # noqa: E402
from wordtree.core import container  # noqa: E402
from wordtree.database import Base, get_db  # noqa: E402
from wordtree.infrastructure.identity.dependencies import get_auth_context  # noqa: E402
from wordtree.main import app  # noqa: E402

TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

TEST_PASSWORD = "correct-horse-battery"


def _auth_context(user: models.User) -> AuthContext:
    return AuthContext(user_id=user.id, email=user.email)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


def _create_user_with_root(db: Session, email: str) -> tuple[models.User, models.Group]:
    user = models.User(email=email, password_hash=container.password_hasher().hash(TEST_PASSWORD))
    root = models.Group(title="root", invite_code=str(uuid4()), parent_id=None)
    db.add_all([user, root])
    db.flush()
    db.add(models.GroupOwner(user_id=user.id, group_id=root.id))
    db.commit()
    db.refresh(user)
    db.refresh(root)
    return user, root


@pytest.fixture
def test_user_with_root(db_session: Session) -> tuple[models.User, models.Group]:
    return _create_user_with_root(db_session, "owner@example.com")


@pytest.fixture
def test_user(test_user_with_root: tuple[models.User, models.Group]) -> models.User:
    return test_user_with_root[0]


@pytest.fixture
def test_root(test_user_with_root: tuple[models.User, models.Group]) -> models.Group:
    return test_user_with_root[1]


@pytest.fixture
def other_user_with_root(db_session: Session) -> tuple[models.User, models.Group]:
    """A second account with its own tree."""
    return _create_user_with_root(db_session, "other@example.com")


@pytest.fixture
def other_root(other_user_with_root: tuple[models.User, models.Group]) -> models.Group:
    return other_user_with_root[1]


@pytest.fixture
def create_group(db_session: Session) -> Callable[..., models.Group]:
    """Factory inserting a group row directly."""

    def _create(title: str, parent: models.Group | None) -> models.Group:
        group = models.Group(
            title=title,
            invite_code=str(uuid4()),
            parent_id=parent.id if parent is not None else None,
        )
        db_session.add(group)
        db_session.commit()
        db_session.refresh(group)
        return group

    return _create


@pytest.fixture
def create_card(db_session: Session) -> Callable[..., models.Card]:
    """Factory inserting a card row directly."""

    def _create(word: str, translation: str, group: models.Group) -> models.Card:
        card = models.Card(word=word, translation=translation, group_id=group.id)
        db_session.add(card)
        db_session.commit()
        db_session.refresh(card)
        return card

    return _create


@pytest.fixture
def anonymous_client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Test client with the real authentication dependency."""

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def client(db_session: Session, test_user: models.User) -> Generator[TestClient, Any, None]:
    """Test client authenticated as ``test_user``."""

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    def override_get_auth_context() -> AuthContext:
        return _auth_context(test_user)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_auth_context] = override_get_auth_context

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def act_as(client: TestClient) -> Callable[[models.User], None]:
    """Switch the authenticated user of ``client`` for the rest of the test."""

    def _act_as(user: models.User) -> None:
        app.dependency_overrides[get_auth_context] = lambda: _auth_context(user)

    return _act_as
