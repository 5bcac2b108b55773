"""SQLite database module.

This module contains only connection management and schema setup.
All record operations live in repositories.
"""
import logging
import sqlite3
import threading

from . import config

logger = logging.getLogger(__name__)


# =============================================================================
# Database Connection
# =============================================================================
_connection_local = threading.local()

# Every connection handed out, so close_db() can reach other threads' ones too.
_open_connections: list[sqlite3.Connection] = []
_open_lock = threading.Lock()
_generation = 0


def get_db() -> sqlite3.Connection:
    """Get thread-local database connection with row factory.

    A thread reconnects when ``config.DATABASE_PATH`` changed or when
    ``close_db`` ran since its connection was opened.
    """
    conn = getattr(_connection_local, "connection", None)
    if (
        conn is None
        or _connection_local.path != config.DATABASE_PATH
        or _connection_local.generation != _generation
    ):
        conn = sqlite3.connect(config.DATABASE_PATH, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        _connection_local.connection = conn
        _connection_local.path = config.DATABASE_PATH
        _connection_local.generation = _generation
        with _open_lock:
            _open_connections.append(conn)
    return conn


def close_db() -> None:
    """Close every connection opened by get_db()."""
    global _generation
    with _open_lock:
        connections = list(_open_connections)
        _open_connections.clear()
        _generation += 1
    for conn in connections:
        conn.close()
    _connection_local.connection = None


# =============================================================================
# Database Initialization
# =============================================================================
SCHEMA = """
    CREATE TABLE IF NOT EXISTS employees (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        email TEXT NOT NULL,
        role TEXT NOT NULL
    )
"""


def init_db() -> None:
    """Initialize database with schema."""
    db = get_db()
    db.execute(SCHEMA)
    db.commit()
    logger.info("Database ready at %s", config.DATABASE_PATH)
