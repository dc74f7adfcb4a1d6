"""Extract frequent-word tags from article text and store tagged articles in MongoDB."""

__version__ = "0.1.0"
__all__ = ["database", "server", "tagextractor"]