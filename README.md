# articletags

Pick the most frequent words out of an article body and use them as its tags.
Articles and their tags can be kept in a MongoDB collection, which can then
report the tags used most often across all stored articles.

## Installation

```
pip install articletags
```

To run the tests, install the `test` extra as well:

```
pip install "articletags[test]"
pytest
```

## Extracting tags

```python
from articletags.tagextractor import extract_tags, TagCountTooHighError

extract_tags("apple banana cherry the and of in to is", 3)
# ['apple', 'banana', 'cherry']
```

First the body is lower-cased and every punctuation character becomes a
space. The text is then split on whitespace, and the stop words `the`, `and`,
`of`, `in`, `to` and `is` are dropped. What remains is ranked by frequency,
and words with the same count come out in alphabetical order. The result is
the `n` highest-ranked words.

If the body holds fewer than `n` distinct words, `TagCountTooHighError` (a
subclass of `ValueError`) is raised. A negative `n` raises `ValueError`.

These building blocks are available as well:

- `normalize(text, *transforms)` applies each character transform in turn to
  every character.
- `to_lower(ch)` and `replace_punctuation_with_space(ch)` are the two
  transforms used by `extract_tags`.
- `remove_stopwords(words)` returns the words that are not stop words.

## Storing articles

```python
from articletags.database import Article, connect

store = connect()  # uses MONGODB_URI, or mongodb://localhost:27018 if unset
store.store_article(Article(title="Go", body="...", tags=["go"]))
store.top_tags(5)
store.all_articles()
store.article_by_title("Go")  # None if there is no such article
store.close()
```

Documents are kept in the `article` collection of the `articletags` database.
An article stored without a `created_at` time is given the current UTC time.
`ArticleStore` is also a context manager that closes its client on exit, and
it can wrap any collection object directly: `ArticleStore(collection)`.

## The article service

`ArticleService` ties extraction and storage together:

```python
from articletags.database import connect
from articletags.server import ArticleRequest, ArticleService

service = ArticleService(connect())
service.process_single_article(ArticleRequest(title="Go", body="go go gophers", n=1))
# ['go']

for tags in service.process_articles(requests):
    ...

service.get_top_tags(10)
```

Each processed article is stored with its tags. If storing fails with a
MongoDB error, the failure is logged and the tags are still returned.

`process_single_article` raises when tags cannot be extracted.
`process_articles` handles its requests concurrently in a thread pool and
yields each article's tags as soon as they are ready, so results may come in
a different order from the requests; a request whose tags cannot be extracted
yields an empty list.

## What this package does not do

`ArticleService` is an ordinary Python object called in-process. The package
has no network server and no command-line program; exposing the service over
a network is left to the application that uses it.