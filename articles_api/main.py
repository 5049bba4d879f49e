import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from articles_api import __version__, config
from articles_api.articles import articles_router
from articles_api.db import init_db
from articles_api.errors import INTERNAL_ERROR_MESSAGE, ArticleError
from articles_api.log_writer import log_error, log_request, setup_logging

logger = logging.getLogger(__name__)


def create_app(
    database_path: Optional[Path] = None,
    log_dir: Optional[Path] = None,
    max_body_bytes: Optional[int] = None,
    body_timeout: Optional[float] = None,
    expose_error_details: Optional[bool] = None,
) -> FastAPI:
    """Build the application. Arguments left as None fall back to config."""
    database_path = Path(database_path or config.DATABASE_PATH)
    setup_logging(Path(log_dir or config.LOG_DIR), config.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_db(app.state.database_path)
        yield

    app = FastAPI(
        title="Articles API",
        description="CRUD service for articles",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.database_path = database_path
    app.state.max_body_bytes = max_body_bytes if max_body_bytes is not None else config.MAX_BODY_BYTES
    app.state.body_timeout = body_timeout if body_timeout is not None else config.BODY_READ_TIMEOUT
    app.state.expose_error_details = (
        expose_error_details if expose_error_details is not None else config.EXPOSE_ERROR_DETAILS
    )

    app.include_router(articles_router)

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        log_request(request)
        return await call_next(request)

    @app.exception_handler(ArticleError)
    async def article_error_handler(request: Request, exc: ArticleError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Path parameters are the only request parts FastAPI validates here
        if any(err.get("loc", ())[:1] == ("path",) for err in exc.errors()):
            return JSONResponse(status_code=400, content={"error": "invalid article id"})
        return JSONResponse(status_code=400, content={"error": "Invalid request"})

    # Safety net only: routes already convert failures via internal_error.
    # Starlette re-raises after this response, so the server logs it too.
    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        log_error(exc)
        content = {"error": INTERNAL_ERROR_MESSAGE}
        if request.app.state.expose_error_details:
            content["message"] = str(exc)
        return JSONResponse(status_code=500, content=content)

    # Health check endpoint (responds immediately, no database access)
    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    @app.get("/")
    async def root():
        return {
            "message": "Articles API",
            "version": __version__,
            "endpoints": {
                "health": "GET /health",
                "list_articles": "GET /articles",
                "get_article": "GET /articles/{id}",
                "create_article": "POST /articles",
                "update_article": "PUT /articles/{id}",
                "delete_article": "DELETE /articles/{id}",
            },
        }

    logger.info("Articles API configured (database=%s)", database_path)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=config.HOST, port=config.PORT)
