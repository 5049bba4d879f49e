"""FastAPI router for article endpoints. Thin layer: delegates to the repository."""

from fastapi import APIRouter, Depends, Path, Request, Response

from articles_api.articles.body import read_json_body
from articles_api.articles.database import ArticleRepository
from articles_api.articles.models import parse_article_payload
from articles_api.db import connect
from articles_api.errors import ArticleError, ArticleNotFoundError, internal_error

router = APIRouter(prefix="/articles", tags=["articles"])

# Largest value an SQLite INTEGER column can hold
MAX_ARTICLE_ID = 2**63 - 1


def _expose(request: Request) -> bool:
    return request.app.state.expose_error_details


async def get_repository(request: Request):
    """Open one database handle for the duration of a request."""
    try:
        db = await connect(request.app.state.database_path)
    except Exception as e:
        raise internal_error(e, _expose(request))
    try:
        yield ArticleRepository(db)
    finally:
        await db.close()


async def _read_payload(request: Request):
    state = request.app.state
    body = await read_json_body(request, state.max_body_bytes, state.body_timeout)
    return parse_article_payload(body)


@router.get("")
async def list_articles(
    request: Request,
    repo: ArticleRepository = Depends(get_repository),
):
    """List all articles."""
    try:
        return await repo.list_articles()
    except Exception as e:
        raise internal_error(e, _expose(request))


@router.get("/{article_id}")
async def get_article(
    request: Request,
    article_id: int = Path(..., gt=0, le=MAX_ARTICLE_ID),
    repo: ArticleRepository = Depends(get_repository),
):
    """Get a single article."""
    try:
        article = await repo.get_article(article_id)
    except Exception as e:
        raise internal_error(e, _expose(request))
    if not article:
        raise ArticleNotFoundError()
    return article


@router.post("", status_code=201)
async def create_article(
    request: Request,
    repo: ArticleRepository = Depends(get_repository),
):
    """Create an article and return it as stored."""
    try:
        payload = await _read_payload(request)
        article_id = await repo.insert_article(payload)
        return await repo.get_article(article_id)
    except ArticleError:
        raise
    except Exception as e:
        raise internal_error(e, _expose(request))


@router.put("/{article_id}")
async def update_article(
    request: Request,
    article_id: int = Path(..., gt=0, le=MAX_ARTICLE_ID),
    repo: ArticleRepository = Depends(get_repository),
):
    """Replace title, content and category of an existing article."""
    try:
        payload = await _read_payload(request)
        updated = await repo.update_article(article_id, payload)
        if not updated:
            raise ArticleNotFoundError()
        return await repo.get_article(article_id)
    except ArticleError:
        raise
    except Exception as e:
        raise internal_error(e, _expose(request))


@router.delete("/{article_id}", status_code=204)
async def delete_article(
    request: Request,
    article_id: int = Path(..., gt=0, le=MAX_ARTICLE_ID),
    repo: ArticleRepository = Depends(get_repository),
):
    """Delete an article."""
    try:
        deleted = await repo.delete_article(article_id)
    except Exception as e:
        raise internal_error(e, _expose(request))
    if not deleted:
        raise ArticleNotFoundError()
    return Response(status_code=204)
