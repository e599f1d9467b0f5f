import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("WHITELIST_EMAILS", "alex@local.test,sam@local.test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from blindaudit.main import app
from blindaudit.db.base import Base
from blindaudit.db.session import build_engine, get_db


@pytest.fixture()
def engine():
    """
    Fresh in-memory database per test. StaticPool keeps a single connection
    so the TestClient worker thread sees the same database.
    """
    engine = build_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(engine):
    TestingSessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def override_get_db(db_session):
    def _get_db_override():
        yield db_session

    app.dependency_overrides[get_db] = _get_db_override
    yield
    app.dependency_overrides.clear()


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)
