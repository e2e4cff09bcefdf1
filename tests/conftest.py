# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from itertools import count

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from tech_news.core.security import create_access_token
from tech_news.db.session import Base, build_engine
from tech_news.db.session import get_db as app_get_session
from tech_news.main import app as fastapi_app
from tech_news.models import Comment, Post, User
from tech_news.repositories import CommentRepository, PostRepository, UserRepository

TEST_DB_URL = "sqlite://"

_USER_COUNTER = count(1)


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = build_engine(TEST_DB_URL, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory that persists users with unique emails."""

    def _make_user(username: str | None = None, password: str = "password1234") -> User:
        n = next(_USER_COUNTER)
        user = UserRepository(db_session).create(
            username=username or f"user{n}",
            email=f"user{n}@example.com",
            password=password,
        )
        db_session.commit()
        return user

    return _make_user


@pytest.fixture()
def test_user(make_user: Callable[..., User]) -> User:
    """Create and return the primary test user."""
    return make_user("lernantino")


@pytest.fixture()
def other_user(make_user: Callable[..., User]) -> User:
    """Create and return a second persisted user."""
    return make_user("other")


@pytest.fixture()
def auth_headers() -> Callable[[User], dict[str, str]]:
    """Return a helper building bearer headers for a user."""

    def _headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}

    return _headers


@pytest.fixture()
def auth_token(test_user: User, auth_headers: Callable[[User], dict[str, str]]) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return auth_headers(test_user)


@pytest.fixture()
def make_post(db_session: Session, test_user: User) -> Callable[..., Post]:
    """Return a factory that persists posts owned by ``test_user`` by default."""

    def _make_post(
        title: str = "Taskmaster goes public!",
        post_url: str = "https://taskmaster.com/press",
        user: User | None = None,
    ) -> Post:
        post = PostRepository(db_session).create(
            title=title,
            post_url=post_url,
            user_id=(user or test_user).id,
        )
        db_session.commit()
        return post

    return _make_post


@pytest.fixture()
def test_post(make_post: Callable[..., Post]) -> Post:
    """Create a baseline post for tests."""
    return make_post()


@pytest.fixture()
def make_comment(db_session: Session) -> Callable[..., Comment]:
    """Return a factory that persists comments."""

    def _make_comment(post: Post, user: User, text: str = "Nice find!") -> Comment:
        comment = CommentRepository(db_session).create(
            comment_text=text,
            user_id=user.id,
            post_id=post.id,
        )
        db_session.commit()
        return comment

    return _make_comment
