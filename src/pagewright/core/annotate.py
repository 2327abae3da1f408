"""Attach derived fields to content items in a single in-memory pass."""

import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from urllib.parse import urlparse

from pagewright.core.i18n import LocaleConfig
from pagewright.core.slugs import (
    DOCS_COLLECTION,
    derive_slug,
    slug_to_anchor,
    split_path,
    strip_first_segment,
)
from pagewright.core.types import ContentItem, FrontMatter, NodeFields, to_utc

logger = logging.getLogger(__name__)

BLOG_SEGMENT = "blog"


def is_released(frontmatter: FrontMatter, now: datetime) -> bool:
    """A post is released once its date is no later than ``now`` (UTC)."""
    if frontmatter.date is None:
        return False
    return to_utc(now) >= to_utc(frontmatter.date)


def published_at(frontmatter: FrontMatter) -> str | None:
    """Where a cross-posted article first appeared.

    Only set for posts with a canonical link: the explicit ``publishedAt``
    wins, otherwise the canonical link's hostname.
    """
    if not frontmatter.canonical_link:
        return None
    return frontmatter.published_at or urlparse(frontmatter.canonical_link).hostname


def _resolved_directory(item: ContentItem, locales: LocaleConfig) -> str | None:
    """Directory of a docs item after locale layout normalization."""
    if item.collection == DOCS_COLLECTION:
        return split_path(item.relative_path)[0]
    if locales.locale_for_collection(item.collection) is not None:
        return split_path(strip_first_segment(item.relative_path))[0]
    return None


def annotate(item: ContentItem, locales: LocaleConfig, now: datetime | None = None) -> ContentItem:
    """Return a copy of ``item`` with its slug, locale, and blog fields set."""
    now = now or datetime.now(UTC)
    result = derive_slug(item.relative_path, item.collection, locales)
    if result.slug is None:
        logger.debug("No slug for %s in collection %r", item.relative_path, item.collection)
        return item.model_copy(update={"fields": NodeFields()})

    fields = {
        "slug": result.slug,
        "locale": result.locale,
        "anchor": slug_to_anchor(result.slug),
        "title": result.title,
        "package": result.package,
    }

    directory = _resolved_directory(item, locales)
    if directory is not None and BLOG_SEGMENT in directory.split("/"):
        fields["released"] = is_released(item.frontmatter, now)
        fields["published_at"] = published_at(item.frontmatter)

    return item.model_copy(update={"fields": NodeFields(**fields)})


def annotate_all(
    items: Iterable[ContentItem], locales: LocaleConfig, now: datetime | None = None
) -> list[ContentItem]:
    now = now or datetime.now(UTC)
    return [annotate(item, locales, now) for item in items]
