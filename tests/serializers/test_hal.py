from dataclasses import dataclass

import pytest

from fastapi_hateoas import (
    CollectionModel,
    EmbeddedWrappers,
    HALSerializer,
    IanaLinkRelations,
    Link,
    MultipleItemModelBuilder,
    RepresentationModel,
    embedded,
    entity,
    model,
    sub_model,
)
from fastapi_hateoas.config import load_settings
from fastapi_hateoas.serializers import default_relation_provider


class ArticleModel(RepresentationModel):
    title: str


class AuthorModel(RepresentationModel):
    name: str


@dataclass
class Person:
    first_name: str
    last_name: str


class Account:
    def __init__(self, number: str) -> None:
        self.number = number
        self._secret = "hidden"


def test_representation_model_document():
    article = (
        model(ArticleModel(title="Hello"))
        .add_link(Link.of("/articles/1"))
        .add_link(Link.of("/articles/1/comments{?page}", "comments"))
        .build()
    )

    assert HALSerializer().to_document(article) == {
        "title": "Hello",
        "_links": {
            "self": {"href": "/articles/1"},
            "comments": {"href": "/articles/1/comments{?page}", "templated": True},
        },
    }


def test_repeated_link_relations_render_as_array():
    article = ArticleModel(title="Hello").add(
        Link.of("/users/1", "author"), Link.of("/users/2", "author")
    )

    document = HALSerializer().to_document(article)

    assert document["_links"] == {"author": [{"href": "/users/1"}, {"href": "/users/2"}]}


def test_model_without_links_has_no_links_section():
    assert HALSerializer().to_document(ArticleModel(title="Hello")) == {"title": "Hello"}


def test_entity_content_is_unwrapped():
    serializer = HALSerializer()

    mapping = entity({"name": "Jane"}).add_link(Link.of("/users/1")).build()
    person = entity(Person("Jane", "Doe")).build()
    account = entity(Account("42")).build()
    number = entity(42).build()

    assert serializer.to_document(mapping) == {
        "name": "Jane",
        "_links": {"self": {"href": "/users/1"}},
    }
    assert serializer.to_document(person) == {"first_name": "Jane", "last_name": "Doe"}
    assert serializer.to_document(account) == {"number": "42"}
    assert serializer.to_document(number) == {"content": 42}


def test_embedded_builder_document():
    jane = AuthorModel(name="Jane").add(Link.of("/users/1"))
    john = AuthorModel(name="John").add(Link.of("/users/2"))
    hello = ArticleModel(title="Hello").add(Link.of("/articles/1"))
    result = (
        sub_model("authors", jane)
        .add_sub_model("articles", hello)
        .add_sub_model("authors", john)
        .add_link(Link.of("/related"))
        .build()
    )

    document = HALSerializer().to_document(result)

    assert document == {
        "_embedded": {
            "authors": [
                {"name": "Jane", "_links": {"self": {"href": "/users/1"}}},
                {"name": "John", "_links": {"self": {"href": "/users/2"}}},
            ],
            "articles": {"title": "Hello", "_links": {"self": {"href": "/articles/1"}}},
        },
        "_links": {"self": {"href": "/related"}},
    }
    assert list(document["_embedded"]) == ["authors", "articles"]


def test_enforced_embedded_collections():
    result = sub_model("articles", ArticleModel(title="Hello")).build()

    document = HALSerializer(enforce_embedded_collections=True).to_document(result)

    assert document == {"_embedded": {"articles": [{"title": "Hello"}]}}


def test_serializer_from_settings():
    settings = load_settings(enforce_embedded_collections=True)

    assert HALSerializer.from_settings(settings).enforce_embedded_collections is True


def test_plain_collection_uses_derived_relation():
    result = (
        MultipleItemModelBuilder([ArticleModel(title="One"), ArticleModel(title="Two")])
        .add_link(Link.of("/articles"))
        .add_link(Link.of("/articles?page=2", IanaLinkRelations.NEXT))
        .build()
    )

    assert HALSerializer().to_document(result) == {
        "_embedded": {"articleModelList": [{"title": "One"}, {"title": "Two"}]},
        "_links": {
            "self": {"href": "/articles"},
            "next": {"href": "/articles?page=2"},
        },
    }


def test_entity_relations_derive_from_content_type():
    result = model(entity(Person("Jane", "Doe")).build()).add_model(
        entity(Person("John", "Doe")).build()
    ).build()

    document = HALSerializer().to_document(result)

    assert list(document["_embedded"]) == ["personList"]
    assert len(document["_embedded"]["personList"]) == 2


def test_unnamed_single_wrapper_uses_item_relation():
    wrapper = EmbeddedWrappers(prefer_collections=False).wrap(ArticleModel(title="Hello"))

    document = HALSerializer().to_document(CollectionModel.of([wrapper]))

    assert document == {"_embedded": {"articleModel": {"title": "Hello"}}}


def test_empty_placeholder_renders_empty_array():
    placeholder = EmbeddedWrappers(prefer_collections=False).empty_collection_of(ArticleModel)

    document = HALSerializer().to_document(CollectionModel.of([placeholder]))

    assert document == {"_embedded": {"articleModelList": []}}


def test_empty_collection_omits_embedded():
    result = embedded().add_link(Link.of("/articles")).build()

    assert HALSerializer().to_document(result) == {"_links": {"self": {"href": "/articles"}}}


def test_custom_relation_provider():
    serializer = HALSerializer(relation_provider=lambda target, collection: "items")
    result = MultipleItemModelBuilder([ArticleModel(title="One")]).build()

    assert serializer.to_document(result) == {"_embedded": {"items": [{"title": "One"}]}}


def test_default_relation_provider():
    assert default_relation_provider(ArticleModel, False) == "articleModel"
    assert default_relation_provider(ArticleModel, True) == "articleModelList"


def test_nested_representation_fields_are_serialized():
    class ReviewModel(RepresentationModel):
        article: ArticleModel

    review = ReviewModel(article=ArticleModel(title="Hello").add(Link.of("/articles/1")))

    assert HALSerializer().to_document(review) == {
        "article": {"title": "Hello", "_links": {"self": {"href": "/articles/1"}}}
    }


def test_to_many():
    documents = HALSerializer().to_many([ArticleModel(title="One"), ArticleModel(title="Two")])

    assert documents == [{"title": "One"}, {"title": "Two"}]


def test_rejects_non_models():
    with pytest.raises(ValueError):
        HALSerializer().to_document({"title": "Hello"})
