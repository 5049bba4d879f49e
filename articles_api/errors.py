"""Error taxonomy for the articles API.

Every error carries the HTTP status and the message shown to the client.
Only ``InternalError`` is logged; the others are ordinary client mistakes.
"""

from typing import Any, Dict, Optional

from articles_api.log_writer import log_error

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class ArticleError(Exception):
    """Base class for errors rendered as ``{"error": message}`` responses."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class InvalidArticleError(ArticleError):
    """Missing or empty required field, or invalid article id."""
    status_code = 400


class MalformedBodyError(ArticleError):
    """Request body is not valid JSON."""
    status_code = 400


class RequestTimeoutError(ArticleError):
    status_code = 408


class PayloadTooLargeError(ArticleError):
    status_code = 413


class ArticleNotFoundError(ArticleError):
    status_code = 404

    def __init__(self, message: str = "Article not found"):
        super().__init__(message)


class InternalError(ArticleError):
    """Unexpected failure. The underlying message is only disclosed on request."""

    status_code = 500

    def __init__(self, detail: Optional[str] = None):
        super().__init__(INTERNAL_ERROR_MESSAGE)
        self.detail = detail

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        if self.detail is not None:
            body["message"] = self.detail
        return body


def internal_error(exc: BaseException, expose: bool = False) -> InternalError:
    """Log ``exc`` to the error log and wrap it for the client."""
    log_error(exc)
    return InternalError(str(exc) if expose else None)
