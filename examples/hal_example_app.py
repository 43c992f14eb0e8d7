"""Example FastAPI app serving HAL representations built with the builders.

Run with:
    uvicorn examples.hal_example_app:app --reload
"""
from __future__ import annotations

from fastapi import FastAPI, HTTPException, Request

from fastapi_hateoas import (
    EntityModel,
    HALResponse,
    IanaLinkRelations,
    Link,
    MultipleItemModelBuilder,
    RepresentationModel,
    configure_logging,
    embedded,
    entity,
    model,
)
from fastapi_hateoas.middleware import ContentNegotiationMiddleware, ErrorHandlerMiddleware
from fastapi_hateoas.pagination import StandardPagination
from fastapi_hateoas.utils import parse_page_params


class UserModel(RepresentationModel):
    id: int
    name: str
    bio: str


class ArticleModel(RepresentationModel):
    id: int
    title: str
    body: str
    author_id: int


class CommentModel(RepresentationModel):
    id: int
    body: str
    article_id: int


USERS = {
    1: {"name": "Jane Doe", "bio": "Tech writer and API enthusiast."},
    2: {"name": "John Smith", "bio": "Backend developer and data modeler."},
}

ARTICLES = {
    1: {"title": "HAL with FastAPI", "body": "Building hypermedia responses.", "author_id": 1},
    2: {"title": "Embedded resources", "body": "Grouping sub-resources by relation.", "author_id": 2},
    3: {"title": "Paging collections", "body": "Navigating with first/next/last.", "author_id": 1},
}

COMMENTS = {
    1: {"body": "Great article!", "article_id": 1},
    2: {"body": "Helpful examples.", "article_id": 1},
    3: {"body": "Thanks for sharing.", "article_id": 2},
}


def user_model(user_id: int) -> UserModel:
    return (
        model(UserModel(id=user_id, **USERS[user_id]))
        .add_link(Link.of(f"/users/{user_id}"))
        .build()
    )


def article_model(article_id: int) -> ArticleModel:
    data = ARTICLES[article_id]
    return (
        model(ArticleModel(id=article_id, **data))
        .add_link(Link.of(f"/articles/{article_id}"))
        .add_link(Link.of(f"/users/{data['author_id']}", "author"))
        .add_link(Link.of(f"/articles/{article_id}/comments", "comments"))
        .build()
    )


def comment_model(comment_id: int) -> CommentModel:
    return (
        model(CommentModel(id=comment_id, **COMMENTS[comment_id]))
        .add_link(Link.of(f"/comments/{comment_id}"))
        .build()
    )


configure_logging()

app = FastAPI(title="HAL Example", default_response_class=HALResponse)
app.add_middleware(ContentNegotiationMiddleware)
app.add_middleware(ErrorHandlerMiddleware)


@app.get("/")
async def index() -> HALResponse:
    root: EntityModel = (
        entity({"name": "HAL Example"})
        .add_link(Link.of("/"))
        .add_link(Link.of("/articles{?page[offset],page[limit]}", "articles"))
        .build()
    )
    return HALResponse(root)


@app.get("/articles")
async def list_articles(request: Request) -> HALResponse:
    params = parse_page_params(request.query_params)
    params["base_url"] = str(request.url)
    pagination = StandardPagination()
    ids = pagination.paginate_queryset(sorted(ARTICLES), params)
    builder = MultipleItemModelBuilder([article_model(article_id) for article_id in ids])
    for link in pagination.get_links(total=len(ARTICLES), params=params):
        builder.add_link(link)
    return HALResponse(builder.build())


@app.get("/articles/{article_id}")
async def get_article(article_id: int) -> HALResponse:
    if article_id not in ARTICLES:
        raise HTTPException(status_code=404, detail="Article not found")
    return HALResponse(article_model(article_id))


@app.get("/articles/{article_id}/related")
async def get_article_related(article_id: int) -> HALResponse:
    """Embed the author and comments of an article, grouped by relation."""
    if article_id not in ARTICLES:
        raise HTTPException(status_code=404, detail="Article not found")
    builder = embedded()
    builder.add_sub_model("author", user_model(ARTICLES[article_id]["author_id"]))
    for comment_id, comment in COMMENTS.items():
        if comment["article_id"] == article_id:
            builder.add_sub_model("comments", comment_model(comment_id))
    builder.add_link(Link.of(f"/articles/{article_id}/related"))
    builder.add_link(Link.of(f"/articles/{article_id}", IanaLinkRelations.UP))
    return HALResponse(builder.build())
