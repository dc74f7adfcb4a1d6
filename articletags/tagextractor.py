"""Extraction of the most frequent keywords from a body of text."""

from __future__ import annotations

import unicodedata
from collections import Counter
from collections.abc import Callable, Iterable
from functools import reduce

CharTransform = Callable[[str], str]

STOPWORDS = frozenset({"the", "and", "of", "in", "to", "is"})


class TagCountTooHighError(ValueError):
    """Raised when more tags are requested than distinct words exist."""

    def __init__(self, message: str = "the tag count is too high") -> None:
        super().__init__(message)


def to_lower(ch: str) -> str:
    """Return the lower-case form of a single character."""
    return ch.lower()[:1] or ch


def replace_punctuation_with_space(ch: str) -> str:
    """Replace a Unicode punctuation character with a space."""
    if unicodedata.category(ch).startswith("P"):
        return " "
    return ch


def normalize(text: str, *transforms: CharTransform) -> str:
    """Apply each transform, in order, to every character of ``text``."""
    return "".join(
        reduce(lambda ch, transform: transform(ch), transforms, ch) for ch in text
    )


def remove_stopwords(words: Iterable[str]) -> list[str]:
    """Return the words that are not common English stopwords."""
    return [word for word in words if word not in STOPWORDS]


def extract_tags(body: str, n: int) -> list[str]:
    """Return the ``n`` most frequent non-stopword words of ``body``.

    Words of equal frequency keep alphabetical order.
    """
    if n < 0:
        raise ValueError("the tag count must not be negative")
    text = normalize(body, to_lower, replace_punctuation_with_space)
    words = sorted(remove_stopwords(text.split()))
    counts = Counter(words)
    ranked = sorted(counts, key=lambda word: -counts[word])
    if len(ranked) < n:
        raise TagCountTooHighError()
    return ranked[:n]