"""Global fixtures for fastapi_hateoas tests."""

import os

import pytest

from fastapi_hateoas import RepresentationModel
from fastapi_hateoas.config import get_settings
from fastapi_hateoas.logging import configure_logging


class ArticleModel(RepresentationModel):
    title: str


class CommentModel(RepresentationModel):
    body: str


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop HATEOAS_* variables and reset cached settings and logging."""
    for key in list(os.environ):
        if key.startswith("HATEOAS_"):
            monkeypatch.delenv(key)
    get_settings(reload=True)
    configure_logging()
    yield
    get_settings(reload=True)
    configure_logging()


@pytest.fixture
def articles():
    return [ArticleModel(title=f"Article {index}") for index in range(1, 5)]


@pytest.fixture
def comments():
    return [CommentModel(body=f"Comment {index}") for index in range(1, 3)]
