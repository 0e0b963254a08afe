# tests/conftest.py
import os
import tempfile

# keep the import-time create_all away from the working directory
os.environ.setdefault("DATABASE_URL", "sqlite://")
# sqlite commits on a test box can take longer than the production 10ms
os.environ.setdefault("PERSIST_BUDGET_S", "1.0")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from lookup.main import app
from lookup.db import Base, get_db
from lookup.deps import get_quote_writer
from lookup.persistence import SqlQuoteWriter


# --- Temporary SQLite DB file for the whole test session ---
@pytest.fixture(scope="session")
def tmp_db_url():
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    url = f"sqlite:///{path}"
    yield url
    try:
        os.remove(path)
    except OSError:
        pass


@pytest.fixture(scope="session")
def engine(tmp_db_url):
    # writers run on ticket threads
    eng = create_engine(tmp_db_url, connect_args={"check_same_thread": False}, future=True)
    Base.metadata.create_all(bind=eng)
    return eng


@pytest.fixture
def session_factory(engine):
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)
    db = TestingSession()
    db.execute(text("DELETE FROM quotes"))
    db.commit()
    db.close()
    return TestingSession


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


# --- Override FastAPI's DB and writer dependencies to use the test database ---
@pytest.fixture(autouse=True)
def override_deps(session_factory):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()
    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_quote_writer] = lambda: SqlQuoteWriter(session_factory)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
