"""Database abstraction layer for SQLite (aiosqlite)."""

from articles_api.db.connection import (
    Database,
    Result,
    connect,
    init_db,
)
from articles_api.db.schema import ensure_schema
