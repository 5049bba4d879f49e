"""SQLite connection management: one connection per request, no pooling."""

import logging
from pathlib import Path
from typing import Any, Optional, Sequence

import aiosqlite

from articles_api.db.schema import ensure_schema

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Result wrapper
# ---------------------------------------------------------------------------

class Result:
    """Wraps execute() results to provide lastrowid and rowcount."""
    __slots__ = ("lastrowid", "rowcount")

    def __init__(self, lastrowid: Optional[int], rowcount: int):
        self.lastrowid = lastrowid
        self.rowcount = rowcount

    def __repr__(self) -> str:
        return f"Result(lastrowid={self.lastrowid!r}, rowcount={self.rowcount!r})"


# ---------------------------------------------------------------------------
# Database wrapper
# ---------------------------------------------------------------------------

class Database:
    """Thin async wrapper over an aiosqlite connection."""

    def __init__(self, conn: aiosqlite.Connection):
        self._conn = conn

    async def execute(self, query: str, params: Sequence[Any] = ()) -> Result:
        """Execute a write query (INSERT/UPDATE/DELETE) and commit it."""
        cursor = await self._conn.execute(query, tuple(params))
        try:
            await self._conn.commit()
            return Result(lastrowid=cursor.lastrowid, rowcount=cursor.rowcount)
        finally:
            await cursor.close()

    async def fetch_one(self, query: str, params: Sequence[Any] = ()) -> Optional[dict]:
        """Fetch a single row as a dict, or None."""
        cursor = await self._conn.execute(query, tuple(params))
        try:
            row = await cursor.fetchone()
        finally:
            await cursor.close()
        return dict(row) if row else None

    async def fetch_all(self, query: str, params: Sequence[Any] = ()) -> list[dict]:
        """Fetch all rows as a list of dicts."""
        rows = await self._conn.execute_fetchall(query, tuple(params))
        return [dict(r) for r in rows]

    async def execute_script(self, sql: str) -> None:
        """Execute multi-statement DDL (no parameters)."""
        await self._conn.executescript(sql)
        await self._conn.commit()

    async def close(self) -> None:
        await self._conn.close()


# ---------------------------------------------------------------------------
# Connection helpers
# ---------------------------------------------------------------------------

async def connect(db_path) -> Database:
    """Open a connection whose rows can be read by column name."""
    conn = await aiosqlite.connect(str(db_path))
    conn.row_factory = aiosqlite.Row
    return Database(conn)


async def init_db(db_path) -> None:
    """Create the database file and schema. Called once at app startup."""
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    db = await connect(db_path)
    try:
        await ensure_schema(db)
    finally:
        await db.close()
    logger.info("Database ready at %s", db_path)
