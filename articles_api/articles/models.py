"""Pydantic request schema for the articles module."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError, field_validator

from articles_api.errors import InvalidArticleError


class ArticlePayload(BaseModel):
    """Request body for creating or replacing an article."""
    model_config = ConfigDict(extra="ignore")

    title: StrictStr
    content: StrictStr
    category: Optional[StrictStr] = None

    @field_validator("title", "content", "category")
    @classmethod
    def not_blank(cls, value: Optional[str]) -> Optional[str]:
        # Stored as sent; trimming only decides emptiness
        if value is not None and not value.strip():
            raise ValueError("blank")
        return value


# Field order decides which error wins when several fields are invalid
_FIELD_ORDER = ("title", "content", "category")

_REQUIRED_MESSAGES = {
    "title": "Title is required",
    "content": "Content is required",
    "category": "Category cannot be empty",
}


def _message_for(error: dict) -> str:
    field = error["loc"][0] if error["loc"] else ""
    if field not in _REQUIRED_MESSAGES:
        return "Invalid article"
    if error["type"] in ("missing", "value_error"):
        return _REQUIRED_MESSAGES[field]
    if error["type"] == "string_type" and error.get("input") is None and field != "category":
        # JSON null for a required field reads as "missing"
        return _REQUIRED_MESSAGES[field]
    return f"{field.capitalize()} must be a string"


def parse_article_payload(body: Any) -> ArticlePayload:
    """Validate a decoded JSON body, raising InvalidArticleError on the first bad field."""
    if not isinstance(body, dict):
        raise InvalidArticleError("Request body must be a JSON object")
    try:
        return ArticlePayload.model_validate(body)
    except ValidationError as e:
        errors = sorted(
            e.errors(),
            key=lambda err: _FIELD_ORDER.index(err["loc"][0])
            if err["loc"] and err["loc"][0] in _FIELD_ORDER
            else len(_FIELD_ORDER),
        )
        raise InvalidArticleError(_message_for(errors[0])) from None
