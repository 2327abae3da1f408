"""Ordering and capping of the annotated content graph."""

from collections.abc import Iterable

from pagewright.core.types import ContentItem, ContentQuery


def _sort_key(item: ContentItem) -> tuple:
    # Undated items sort after every dated one when reversed.
    date = item.frontmatter.date
    return (date is not None, date.timestamp() if date else 0.0, item.slug or "")


def sort_items(items: Iterable[ContentItem]) -> list[ContentItem]:
    """Order items by date descending, ties broken by slug descending."""
    return sorted(items, key=_sort_key, reverse=True)


def run_query(items: Iterable[ContentItem], query: ContentQuery) -> list[ContentItem]:
    return sort_items(items)[: query.limit]
