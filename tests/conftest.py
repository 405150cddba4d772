# tests/conftest.py

import os

# Settings are read at import time, so the test environment goes first.
os.environ.setdefault("ENV", "local")
os.environ.setdefault("DATABASE_URL_LOCAL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.testclient import TestClient

from vendor_api.api.deps import get_blob_store
from vendor_api.core.blob_store import LocalBlobStore
from vendor_api.db.session import build_engine, get_db
from vendor_api.main import app
from vendor_api.models import Base

# --- Test Database Setup ---
# One in-memory SQLite connection shared by the whole test, foreign keys on.
engine = build_engine("sqlite://", poolclass=StaticPool)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def blob_store(tmp_path):
    return LocalBlobStore(tmp_path / "uploads", url_prefix="uploads")


# --- Test Client Fixtures ---
@pytest.fixture(scope="function")
def test_client(db_session, blob_store):
    """
    Provides a TestClient wired to the in-memory database and a blob store
    rooted in a temporary directory.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_blob_store] = lambda: blob_store

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
