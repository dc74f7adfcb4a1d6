from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from pymongo.errors import PyMongoError

from articletags.database import Article, ArticleStore, default_uri


class FakeCollection:
    def __init__(self, aggregate_results=()):
        self.documents = []
        self.pipelines = []
        self.aggregate_results = list(aggregate_results)

    def insert_one(self, document):
        self.documents.append(dict(document))
        return SimpleNamespace(inserted_id=len(self.documents))

    def find(self, query):
        return [
            doc for doc in self.documents if all(doc.get(k) == v for k, v in query.items())
        ]

    def find_one(self, query):
        return next(iter(self.find(query)), None)

    def aggregate(self, pipeline):
        self.pipelines.append(pipeline)
        return iter(self.aggregate_results)


class FailingCollection(FakeCollection):
    def insert_one(self, document):
        raise PyMongoError("insert failed")

    def aggregate(self, pipeline):
        raise PyMongoError("aggregate failed")


class FakeClient:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


def test_store_article_sets_created_at():
    collection = FakeCollection()
    store = ArticleStore(collection)
    before = datetime.now(timezone.utc)
    article = Article(title="First", body="some body", tags=["some"])
    store.store_article(article)
    after = datetime.now(timezone.utc)
    assert before <= article.created_at <= after
    assert collection.documents[0]["title"] == "First"
    assert collection.documents[0]["tags"] == ["some"]
    assert collection.documents[0]["created_at"] == article.created_at


def test_store_article_keeps_given_created_at():
    collection = FakeCollection()
    stamp = datetime(2024, 1, 2, tzinfo=timezone.utc)
    ArticleStore(collection).store_article(Article(title="t", created_at=stamp))
    assert collection.documents[0]["created_at"] == stamp


def test_store_article_propagates_errors():
    with pytest.raises(PyMongoError):
        ArticleStore(FailingCollection()).store_article(Article(title="t"))


def test_all_articles_round_trip():
    store = ArticleStore(FakeCollection())
    originals = [
        Article(title="a", body="alpha", tags=["x", "y"]),
        Article(title="b", body="beta", tags=["z"]),
    ]
    for article in originals:
        store.store_article(article)
    assert store.all_articles() == originals


def test_article_by_title_found():
    store = ArticleStore(FakeCollection())
    article = Article(title="wanted", body="text", tags=["text"])
    store.store_article(article)
    assert store.article_by_title("wanted") == article


def test_article_by_title_missing():
    assert ArticleStore(FakeCollection()).article_by_title("absent") is None


def test_top_tags_pipeline():
    collection = FakeCollection([{"_id": "go", "count": 3}, {"_id": "db", "count": 1}])
    tags = ArticleStore(collection).top_tags(2)
    assert tags == ["go", "db"]
    pipeline = collection.pipelines[0]
    assert pipeline[0] == {"$unwind": "$tags"}
    assert pipeline[2] == {"$sort": {"count": -1}}
    assert pipeline[3] == {"$limit": 2}


def test_top_tags_skips_non_string_ids():
    collection = FakeCollection([{"_id": "go", "count": 3}, {"_id": None, "count": 1}])
    assert ArticleStore(collection).top_tags(5) == ["go"]


def test_top_tags_propagates_errors():
    with pytest.raises(PyMongoError):
        ArticleStore(FailingCollection()).top_tags(3)


def test_close_closes_client():
    client = FakeClient()
    with ArticleStore(FakeCollection(), client):
        pass
    assert client.closed is True


def test_default_uri_from_environment(monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "mongodb://db.example.com:27017")
    assert default_uri() == "mongodb://db.example.com:27017"


def test_default_uri_fallback(monkeypatch):
    monkeypatch.delenv("MONGODB_URI", raising=False)
    assert default_uri() == "mongodb://localhost:27018"