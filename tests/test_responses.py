from fastapi import FastAPI
from fastapi.testclient import TestClient

from fastapi_hateoas import HALResponse, HALSerializer, Link, RepresentationModel, model, sub_model


class ArticleModel(RepresentationModel):
    title: str


def create_app() -> FastAPI:
    app = FastAPI()

    @app.get("/articles/1")
    async def article() -> HALResponse:
        return HALResponse(
            model(ArticleModel(title="Hello")).add_link(Link.of("/articles/1")).build()
        )

    @app.get("/related")
    async def related() -> HALResponse:
        result = sub_model("articles", ArticleModel(title="Hello")).build()
        return HALResponse(
            result, serializer=HALSerializer(enforce_embedded_collections=True)
        )

    @app.get("/plain")
    async def plain() -> HALResponse:
        return HALResponse({"status": "ok"}, status_code=202)

    return app


def test_hal_response_renders_model():
    client = TestClient(create_app())

    response = client.get("/articles/1")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/hal+json"
    assert response.json() == {"title": "Hello", "_links": {"self": {"href": "/articles/1"}}}


def test_hal_response_uses_given_serializer():
    client = TestClient(create_app())

    response = client.get("/related")

    assert response.json() == {"_embedded": {"articles": [{"title": "Hello"}]}}


def test_hal_response_passes_plain_content_through():
    client = TestClient(create_app())

    response = client.get("/plain")

    assert response.status_code == 202
    assert response.json() == {"status": "ok"}


def test_hal_response_media_type_from_settings(monkeypatch):
    from fastapi_hateoas.config import get_settings

    monkeypatch.setenv("HATEOAS_MEDIA_TYPE", "application/prs.hal-forms+json")
    get_settings(reload=True)

    response = HALResponse(ArticleModel(title="Hello"))

    assert response.media_type == "application/prs.hal-forms+json"
    assert response.body == b'{"title":"Hello"}'
