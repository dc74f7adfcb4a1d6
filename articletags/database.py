"""Article storage backed by a MongoDB collection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from pymongo import MongoClient

log = logging.getLogger(__name__)

DEFAULT_URI = "mongodb://localhost:27018"
DATABASE_NAME = "articletags"
COLLECTION_NAME = "article"


@dataclass
class Article:
    """A processed article and the tags extracted from it."""

    title: str
    body: str = ""
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None


def _to_document(article: Article) -> dict[str, Any]:
    return {
        "title": article.title,
        "tags": list(article.tags),
        "body": article.body,
        "created_at": article.created_at,
    }


def _from_document(document: dict[str, Any]) -> Article:
    return Article(
        title=document.get("title", ""),
        body=document.get("body", ""),
        tags=list(document.get("tags") or []),
        created_at=document.get("created_at"),
    )


def default_uri() -> str:
    """Return the MongoDB URI from ``MONGODB_URI`` or the default one."""
    return os.environ.get("MONGODB_URI") or DEFAULT_URI


def connect(uri: str | None = None) -> ArticleStore:
    """Connect to MongoDB, check the connection and return a store."""
    client: MongoClient = MongoClient(
        uri or default_uri(), serverSelectionTimeoutMS=10_000
    )
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        raise
    log.info("Connected to MongoDB successfully!")
    return ArticleStore(client[DATABASE_NAME][COLLECTION_NAME], client)


class ArticleStore:
    """Stores and queries articles in a collection."""

    def __init__(self, collection: Any, client: Any = None) -> None:
        self.collection = collection
        self.client = client

    def close(self) -> None:
        """Close the underlying client, if any."""
        if self.client is not None:
            self.client.close()

    def __enter__(self) -> ArticleStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def store_article(self, article: Article) -> None:
        """Insert an article, stamping its creation time if unset."""
        if article.created_at is None:
            article.created_at = datetime.now(timezone.utc)
        try:
            self.collection.insert_one(_to_document(article))
        except Exception as exc:
            log.error("Error storing article: %s", exc)
            raise
        log.info("Article stored successfully: %s", article.title)

    def top_tags(self, n: int) -> list[str]:
        """Return the ``n`` tags used by the most articles."""
        pipeline = [
            {"$unwind": "$tags"},
            {"$group": {"_id": "$tags", "count": {"$sum": 1}}},
            {"$sort": {"count": -1}},
            {"$limit": n},
            {"$project": {"_id": 1, "count": 1}},
        ]
        try:
            results = list(self.collection.aggregate(pipeline))
        except Exception as exc:
            log.error("Error aggregating tags: %s", exc)
            raise
        tags = [result["_id"] for result in results if isinstance(result.get("_id"), str)]
        log.info("Retrieved top %d tags: %s", n, tags)
        return tags

    def all_articles(self) -> list[Article]:
        """Return every stored article."""
        try:
            articles = [_from_document(doc) for doc in self.collection.find({})]
        except Exception as exc:
            log.error("Error finding articles: %s", exc)
            raise
        log.info("Retrieved %d articles", len(articles))
        return articles

    def article_by_title(self, title: str) -> Article | None:
        """Return the article with the given title, or None."""
        try:
            document = self.collection.find_one({"title": title})
        except Exception as exc:
            log.error("Error finding article: %s", exc)
            raise
        if document is None:
            log.info("Article not found: %s", title)
            return None
        log.info("Retrieved article: %s", title)
        return _from_document(document)