"""Builds the list of pages to register from the annotated content graph."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from pagewright.core.config import TemplateSettings
from pagewright.core.i18n import localized_path
from pagewright.core.ports import SiblingNavigation
from pagewright.core.slugs import tag_slug
from pagewright.core.types import ContentItem, PageSpec, TagGroup

logger = logging.getLogger(__name__)

BLOG_MARKER = "/blog/"
BLOG_INDEX_PATH = "/blog"
DEFAULT_POSTS_PER_PAGE = 8


def is_blog_post(item: ContentItem) -> bool:
    return bool(item.slug) and BLOG_MARKER in item.slug


def select_blog_posts(items: Sequence[ContentItem]) -> list[ContentItem]:
    """Non-draft blog posts, in query order."""
    return [item for item in items if is_blog_post(item) and not item.is_draft]


def select_released(posts: Sequence[ContentItem]) -> list[ContentItem]:
    return [post for post in posts if post.is_released]


def blog_list_path(page_number: int) -> str:
    return BLOG_INDEX_PATH if page_number == 1 else f"{BLOG_INDEX_PATH}/page/{page_number}"


def paginate(total: int, per_page: int, template: str) -> list[PageSpec]:
    """One blog index page per ``per_page`` posts; no pages when there are no posts."""
    if per_page <= 0:
        msg = f"posts per page must be positive, got {per_page}"
        raise ValueError(msg)
    num_pages = math.ceil(total / per_page)
    return [
        PageSpec(
            path=blog_list_path(index + 1),
            template=template,
            context={
                "limit": per_page,
                "skip": index * per_page,
                "num_pages": num_pages,
                "current_page": index + 1,
            },
        )
        for index in range(num_pages)
    ]


def link_posts(posts: Sequence[ContentItem], template: str) -> list[PageSpec]:
    """A page per post, linked to its older (``prev``) and newer (``next``) neighbours.

    ``posts`` is newest first. A newer neighbour that is not released yet is
    never linked.
    """
    pages = []
    for index, post in enumerate(posts):
        newer = posts[index - 1] if index > 0 else None
        if newer is not None and not newer.is_released:
            newer = None
        older = posts[index + 1] if index < len(posts) - 1 else None
        pages.append(
            PageSpec(
                path=post.slug,
                template=template,
                context={"slug": post.slug, "prev": older, "next": newer},
            )
        )
    return pages


def group_tags(posts: Sequence[ContentItem]) -> list[TagGroup]:
    """Group the distinct tags of ``posts`` by their normalized key.

    ``case-study`` and ``Case Study`` land in the same group; the key is used
    in URLs and the original spellings are kept for display. Groups appear in
    the order their key is first seen.
    """
    unique_tags = dict.fromkeys(tag for post in posts for tag in post.frontmatter.tags if tag)
    groups: dict[str, list[str]] = {}
    for tag in unique_tags:
        groups.setdefault(tag_slug(tag), []).append(tag)
    return [TagGroup(key=key, tags=tuple(tags)) for key, tags in groups.items()]


def tag_pages(groups: Sequence[TagGroup], template: str) -> list[PageSpec]:
    return [
        PageSpec(
            path=f"{BLOG_INDEX_PATH}/tags/{group.key}/",
            template=template,
            context={"tags": list(group.tags), "tag_slug": group.key},
        )
        for group in groups
    ]


def doc_pages(
    items: Sequence[ContentItem],
    navigation: SiblingNavigation,
    templates: TemplateSettings,
) -> list[PageSpec]:
    """A page per slugged non-blog item, under its locale prefix."""
    pages = []
    for item in items:
        if not item.slug or is_blog_post(item):
            continue
        locale = item.fields.locale
        pages.append(
            PageSpec(
                path=localized_path(locale, item.slug),
                template=templates.package if item.fields.package else templates.docs,
                context={"slug": item.slug, "locale": locale, **navigation.prev_and_next(item.slug)},
            )
        )
    return pages


class PageListBuilder:
    """Turns the ordered, annotated items of one build into page specs."""

    def __init__(
        self,
        navigation: SiblingNavigation,
        templates: TemplateSettings | None = None,
        posts_per_page: int = DEFAULT_POSTS_PER_PAGE,
    ) -> None:
        if posts_per_page <= 0:
            msg = f"posts_per_page must be positive, got {posts_per_page}"
            raise ValueError(msg)
        self.navigation = navigation
        self.templates = templates or TemplateSettings()
        self.posts_per_page = posts_per_page

    def build(self, items: Sequence[ContentItem]) -> list[PageSpec]:
        posts = select_blog_posts(items)
        released = select_released(posts)

        index_pages = paginate(len(released), self.posts_per_page, self.templates.blog_list)
        post_pages = link_posts(posts, self.templates.blog_post)
        tags = tag_pages(group_tags(released), self.templates.tags)
        docs = doc_pages(items, self.navigation, self.templates)

        logger.info(
            "Built %d blog index, %d post, %d tag and %d docs pages",
            len(index_pages),
            len(post_pages),
            len(tags),
            len(docs),
        )
        return [*index_pages, *post_pages, *tags, *docs]
