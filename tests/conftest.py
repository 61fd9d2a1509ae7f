"""Shared pytest fixtures for all tests."""

import sqlite3
import pytest
from pathlib import Path

from cli.migrate import apply_pending_migrations
from config import Config, get_migrations_dir
from db.manager import DatabaseManager
from identity import StaticIdentityProvider, User
from services.base import Services
from tests.helpers import run_migrations

ALICE = User(email="alice@example.com", full_name="Alice Example")
BOB = User(email="bob@example.com", full_name="Bob Example")


@pytest.fixture
def test_db():
    """Create an in-memory SQLite database for testing.

    Yields:
        sqlite3.Connection: Connection to in-memory database.
    """
    conn = sqlite3.connect(":memory:")
    conn.execute("PRAGMA foreign_keys = ON")
    yield conn
    conn.close()


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary database.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "budgetbook",
        db_data_dir=tmp_path / "budgetbook" / "db",
        db_filename="test.db",
        log_level="DEBUG",
        log_dir=tmp_path / "budgetbook" / "logs",
        user_email=ALICE.email,
        user_name=ALICE.full_name,
    )


@pytest.fixture
def db_manager_with_schema(test_db):
    """Create a DatabaseManager with schema already set up.

    This fixture provides a DatabaseManager that uses an in-memory database
    with all migrations already applied.

    Args:
        test_db: In-memory database connection fixture.

    Returns:
        DatabaseManager: Database manager with schema ready.
    """
    run_migrations(test_db, get_migrations_dir())

    class TestDatabaseManager:
        """Test database manager that uses in-memory connection."""

        def __init__(self, conn):
            self.conn = conn

        def connect(self):
            """Return a context manager for the test connection."""
            return _TestConnectionContext(self.conn)

        def get_db_path(self):
            """Return a fake path for the test database."""
            return Path(":memory:")

        def database_exists(self):
            return True

        def get_migrations_dir(self):
            """Get the migrations directory path."""
            return get_migrations_dir()

    class _TestConnectionContext:
        """Context manager for test database connections."""

        def __init__(self, conn):
            self.conn = conn

        def __enter__(self):
            return self.conn

        def __exit__(self, exc_type, exc_val, exc_tb):
            # Don't close the connection - let the fixture handle it
            pass

    return TestDatabaseManager(test_db)


@pytest.fixture
def identity():
    """Identity provider with Alice signed in."""
    return StaticIdentityProvider(ALICE)


@pytest.fixture
def services(test_config, db_manager_with_schema, identity):
    """Create a Services container with test database and Alice signed in.

    Args:
        test_config: Test configuration fixture.
        db_manager_with_schema: Database manager with schema set up.
        identity: Identity provider fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, db_manager=db_manager_with_schema, identity=identity)


@pytest.fixture
def file_services(test_config, identity):
    """Services backed by a real SQLite file under tmp_path.

    Each operation opens its own connection, so this container can be used
    from worker threads (the dashboard poller runs queries off the event
    loop).
    """
    db_manager = DatabaseManager(test_config)
    apply_pending_migrations(db_manager)
    return Services(test_config, db_manager=db_manager, identity=identity)
