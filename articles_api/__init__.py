"""Articles API: CRUD service over a single SQLite articles table."""

__version__ = "1.0.0"
