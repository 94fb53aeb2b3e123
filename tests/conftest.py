"""Shared test fixtures for quicklease."""

import os
import sqlite3
import tempfile

# Fast bcrypt and a throwaway default database, set before the app is imported
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")
os.environ.setdefault(
    "DATABASE_PATH", os.path.join(tempfile.gettempdir(), "quicklease-test.db")
)

import pytest

from quicklease.main import app
from quicklease.config import settings
from quicklease.db import SCHEMA_PATH, get_core, init_db
from quicklease.auth import AccountService, Authenticator, PasswordHasher, TokenIssuer
from quicklease.auth.schemas import AccountView


@pytest.fixture
def test_db():
    """Create in-memory test database with schema."""
    db = sqlite3.connect(":memory:")
    db.row_factory = sqlite3.Row
    db.execute("PRAGMA foreign_keys = ON")
    db.executescript(SCHEMA_PATH.read_text())
    db.commit()

    yield db

    db.close()


@pytest.fixture
def db_path():
    """Point settings.database_path at a fresh, initialized temp file.

    Each test gets its own database file so separate connections (and
    threads) share the same data.
    """
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    os.unlink(path)

    original_db_path = settings.database_path
    settings.database_path = path
    try:
        init_db()
        yield path
    finally:
        settings.database_path = original_db_path
        for suffix in ("", "-journal"):
            try:
                os.unlink(path + suffix)
            except FileNotFoundError:
                pass


@pytest.fixture
def hasher():
    """Bcrypt hasher with the minimum work factor."""
    return PasswordHasher(work_factor=4)


@pytest.fixture
def token_issuer():
    return TokenIssuer()


@pytest.fixture
def account_service(db_path, hasher, token_issuer):
    """AccountService wired against the temp database."""
    return AccountService(
        get_core=get_core,
        hasher=hasher,
        token_issuer=token_issuer,
        authenticator=Authenticator(get_core, hasher),
    )


@pytest.fixture
def client(db_path):
    """Create test client for API testing against the temp database."""
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


@pytest.fixture
def registered_account(account_service):
    """Register an account and return (view, password, token)."""
    password = "TestPass123"
    view = AccountView(
        email="tenant@example.com",
        password=password,
        full_name="Test Tenant",
        phone_number="+6591234567",
    )
    result = account_service.register_account(view)
    return view, password, result.token


@pytest.fixture
def auth_headers(registered_account):
    """Authorization header for the registered account."""
    _view, _password, token = registered_account
    return {"Authorization": f"Bearer {token}"}
