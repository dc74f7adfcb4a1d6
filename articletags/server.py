"""Article processing service: tag extraction plus storage."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any

from pymongo.errors import PyMongoError

from articletags.database import Article
from articletags.tagextractor import extract_tags

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArticleRequest:
    """An article to process and the number of tags wanted."""

    title: str
    body: str
    n: int


class ArticleService:
    """Extracts tags from articles, stores them and reports top tags."""

    def __init__(self, store: Any) -> None:
        self.store = store

    def _store(self, request: ArticleRequest, tags: list[str]) -> None:
        article = Article(title=request.title, body=request.body, tags=tags)
        try:
            self.store.store_article(article)
        except PyMongoError as exc:
            log.error("Error storing article in database: %s", exc)

    def process_single_article(self, request: ArticleRequest) -> list[str]:
        """Extract and store the tags of one article, returning them."""
        log.info("Processing single article: %s", request.title)
        try:
            tags = extract_tags(request.body, request.n)
        except ValueError as exc:
            log.error("Error extracting tags: %s", exc)
            raise
        self._store(request, tags)
        return tags

    def _process_streamed(self, request: ArticleRequest) -> list[str]:
        try:
            tags = extract_tags(request.body, request.n)
        except ValueError as exc:
            log.error("Error extracting tags: %s", exc)
            tags = []
        self._store(request, tags)
        return tags

    def process_articles(
        self, requests: Iterable[ArticleRequest]
    ) -> Iterator[list[str]]:
        """Process articles concurrently, yielding tags as each finishes.

        A request whose tags cannot be extracted yields an empty list.
        """
        log.info("Starting concurrent streaming processing...")
        with ThreadPoolExecutor() as executor:
            pending: set[Future[list[str]]] = set()
            for request in requests:
                pending.add(executor.submit(self._process_streamed, request))
                finished = {future for future in pending if future.done()}
                pending -= finished
                for future in finished:
                    yield future.result()
            for future in as_completed(pending):
                yield future.result()

    def get_top_tags(self, n: int) -> list[str]:
        """Return the ``n`` most used tags in the store."""
        log.info("Getting top %d tags from database", n)
        try:
            return self.store.top_tags(n)
        except Exception as exc:
            log.error("Error getting top tags from database: %s", exc)
            raise