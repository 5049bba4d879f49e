"""SQLite schema for the articles table."""

SCHEMA = """
CREATE TABLE IF NOT EXISTS articles (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT,
    content TEXT,
    category TEXT
);
"""


async def ensure_schema(db) -> None:
    """Create the articles table if it doesn't exist."""
    await db.execute_script(SCHEMA)
