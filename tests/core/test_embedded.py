import pytest

from fastapi_hateoas import EmbeddedWrapper, EmbeddedWrappers, LinkRelation, RepresentationModel


class ArticleModel(RepresentationModel):
    title: str


def test_wrap_single_value_as_element():
    article = ArticleModel(title="Hello")

    wrapper = EmbeddedWrappers(prefer_collections=False).wrap(article, "articles")

    assert wrapper.value is article
    assert wrapper.rel == LinkRelation.of("articles")
    assert wrapper.collection_value is False
    assert wrapper.has_rel("articles")
    assert wrapper.get_rel_target_type() is ArticleModel


def test_wrap_single_value_preferring_collections():
    article = ArticleModel(title="Hello")

    wrapper = EmbeddedWrappers(prefer_collections=True).wrap(article)

    assert wrapper.collection_value is True
    assert wrapper.value == [article]
    assert wrapper.rel is None
    assert not wrapper.has_rel("articles")


@pytest.mark.parametrize("prefer_collections", [True, False])
def test_wrap_collection_values(prefer_collections):
    articles = (ArticleModel(title="One"), ArticleModel(title="Two"))

    wrapper = EmbeddedWrappers(prefer_collections).wrap(articles)

    assert wrapper.collection_value is True
    assert wrapper.value == list(articles)
    assert wrapper.get_rel_target_type() is ArticleModel


def test_wrap_returns_existing_wrappers_unchanged():
    wrappers = EmbeddedWrappers(prefer_collections=False)
    wrapper = wrappers.wrap(ArticleModel(title="Hello"), "articles")

    assert wrappers.wrap(wrapper, "other") is wrapper


def test_wrap_rejects_none():
    with pytest.raises(ValueError):
        EmbeddedWrappers(prefer_collections=False).wrap(None)


def test_empty_collection_placeholder():
    wrapper = EmbeddedWrappers(prefer_collections=False).empty_collection_of(ArticleModel)

    assert wrapper.is_empty
    assert wrapper.collection_value
    assert wrapper.get_rel_target_type() is ArticleModel


def test_wrappers_compare_by_value():
    article = ArticleModel(title="Hello")

    assert EmbeddedWrapper(value=article, rel="articles") == EmbeddedWrappers(False).wrap(
        article, LinkRelation.of("articles")
    )
