# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from itertools import count

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")
# argon2id minimums keep password hashing fast under test.
os.environ.setdefault("PASSWORD_HASH_OPSLIMIT", "1")
os.environ.setdefault("PASSWORD_HASH_MEMLIMIT", "8192")

from tiredd_core.db.session import Base
from tiredd_core.db.session import get_db as app_get_session
from tiredd_core.main import app as fastapi_app
from tiredd_core.services import AccountDirectory, AccountIdentity, ContentStore, ScoredPost

TEST_DB_URL = "sqlite://"

_USERNAME_COUNTER = count(1)


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
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
def login(db_session: Session) -> Callable[..., str]:
    """Return a helper that logs a user in and hands back the session token."""

    def _login(username: str | None = None, password: str = "hunter2") -> str:
        name = username or f"user{next(_USERNAME_COUNTER)}"
        _, token, _ = AccountDirectory(db_session).login(name, password)
        return token

    return _login


@pytest.fixture()
def auth_token(login: Callable[..., str]) -> str:
    return login("alice")


@pytest.fixture()
def author(db_session: Session, auth_token: str) -> AccountIdentity:
    account = AccountDirectory(db_session).get_by_username("alice")
    assert account is not None
    return AccountIdentity(account_id=account.id, username=account.username)


@pytest.fixture()
def test_post(db_session: Session, author: AccountIdentity) -> ScoredPost:
    return ContentStore(db_session).create_post(
        author,
        sub="python",
        title="Test Post",
        content="This is a test post",
    )
