"""SQLite connections for the budgets database."""

import sqlite3
from contextlib import contextmanager
from config import Config, get_migrations_dir


class DatabaseManager:
    """Opens one SQLite connection per unit of work.

    Connections are short-lived and never shared, so services can be called
    from the dashboard poller's worker thread as well as the main thread.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        self.config = config

    @contextmanager
    def connect(self):
        """Open a connection to the budgets database, closing it afterwards.

        The data directory is created on first use. Foreign keys are
        enforced so an expense cannot reference a missing budget.

        Yields:
            sqlite3.Connection: Database connection.
        """
        self.config.db_data_dir.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(self.config.db_path)
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
        finally:
            conn.close()

    def database_exists(self) -> bool:
        """Whether the database file has been created yet."""
        return self.config.db_path.exists()

    def get_db_path(self):
        return self.config.db_path

    def get_migrations_dir(self):
        return get_migrations_dir()
