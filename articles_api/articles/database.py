"""SQLite CRUD operations for the articles table."""

from typing import Any, Dict, List, Optional

from articles_api.articles.models import ArticlePayload
from articles_api.db import Database


class ArticleRepository:
    """Single-statement reads and writes against the articles table."""

    def __init__(self, db: Database):
        self.db = db

    async def list_articles(self) -> List[Dict[str, Any]]:
        """Get all articles, oldest first."""
        rows = await self.db.fetch_all(
            "SELECT id, title, content, category FROM articles ORDER BY id"
        )
        return [_row_to_article(r) for r in rows]

    async def get_article(self, article_id: int) -> Optional[Dict[str, Any]]:
        row = await self.db.fetch_one(
            "SELECT id, title, content, category FROM articles WHERE id = ?",
            (article_id,),
        )
        return _row_to_article(row) if row else None

    async def insert_article(self, payload: ArticlePayload) -> int:
        """Insert a new article. Returns the article ID."""
        result = await self.db.execute(
            "INSERT INTO articles (title, content, category) VALUES (?, ?, ?)",
            (payload.title, payload.content, payload.category),
        )
        return result.lastrowid

    async def update_article(self, article_id: int, payload: ArticlePayload) -> bool:
        """Overwrite an existing article. Returns True if updated."""
        result = await self.db.execute(
            "UPDATE articles SET title = ?, content = ?, category = ? WHERE id = ?",
            (payload.title, payload.content, payload.category, article_id),
        )
        return result.rowcount > 0

    async def delete_article(self, article_id: int) -> bool:
        """Delete an article by ID. Returns True if deleted."""
        result = await self.db.execute(
            "DELETE FROM articles WHERE id = ?", (article_id,)
        )
        return result.rowcount > 0


def _row_to_article(r: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": r["id"],
        "title": r["title"],
        "content": r["content"],
        "category": r["category"],
    }
