"""Articles module: CRUD endpoints over the articles table."""

from articles_api.articles.routes import router as articles_router
from articles_api.articles.database import ArticleRepository

__all__ = ["articles_router", "ArticleRepository"]
