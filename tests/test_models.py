"""Tests for article payload validation."""
import pytest

from articles_api.articles.models import ArticlePayload, parse_article_payload
from articles_api.errors import InvalidArticleError


def _error(body):
    with pytest.raises(InvalidArticleError) as exc_info:
        parse_article_payload(body)
    assert exc_info.value.status_code == 400
    return exc_info.value.message


def test_valid_payload():
    payload = parse_article_payload({"title": "T", "content": "C", "category": "news"})
    assert isinstance(payload, ArticlePayload)
    assert (payload.title, payload.content, payload.category) == ("T", "C", "news")


def test_unknown_fields_ignored():
    payload = parse_article_payload({"title": "T", "content": "C", "id": 99, "extra": 1})
    assert not hasattr(payload, "extra")
    assert payload.category is None


def test_null_category_allowed():
    assert parse_article_payload({"title": "T", "content": "C", "category": None}).category is None


@pytest.mark.parametrize(
    "body,message",
    [
        ({}, "Title is required"),
        ({"title": " ", "content": "C"}, "Title is required"),
        ({"title": None, "content": "C"}, "Title is required"),
        ({"title": "T"}, "Content is required"),
        ({"title": "T", "content": ""}, "Content is required"),
        ({"title": "T", "content": None}, "Content is required"),
        ({"title": 1, "content": "C"}, "Title must be a string"),
        ({"title": "T", "content": ["C"]}, "Content must be a string"),
        ({"title": "T", "content": "C", "category": ""}, "Category cannot be empty"),
        ({"title": "T", "content": "C", "category": 3}, "Category must be a string"),
    ],
)
def test_field_errors(body, message):
    assert _error(body) == message


def test_first_failing_field_wins():
    assert _error({"title": "", "content": "", "category": ""}) == "Title is required"
    assert _error({"title": "T", "content": 5, "category": ""}) == "Content must be a string"


@pytest.mark.parametrize("body", [[], "text", 42, None])
def test_body_must_be_object(body):
    assert _error(body) == "Request body must be a JSON object"
