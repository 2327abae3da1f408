"""One page-generation pass: query the content graph, build pages, register them."""

import logging

from pagewright.core.config import PagewrightConfig
from pagewright.core.exceptions import ContentQueryError
from pagewright.core.pages import PageListBuilder
from pagewright.core.ports import ContentSource, PageSink, SiblingNavigation
from pagewright.core.types import ContentQuery, PageSpec

logger = logging.getLogger(__name__)


def create_pages(
    source: ContentSource,
    sink: PageSink,
    navigation: SiblingNavigation,
    config: PagewrightConfig | None = None,
) -> list[PageSpec]:
    """Run the page pass and return the registered pages.

    Raises:
        ContentQueryError: If the content query reports errors. Nothing is
            registered in that case.

    """
    config = config or PagewrightConfig()
    result = source.query(ContentQuery(limit=config.query.limit))
    if not result.ok:
        raise ContentQueryError(result.errors)
    logger.info("Content query returned %d items", len(result.items))

    builder = PageListBuilder(
        navigation,
        templates=config.templates,
        posts_per_page=config.blog.posts_per_page,
    )
    pages = builder.build(result.items)

    for page in pages:
        sink.create_page(page)
    logger.info("Registered %d pages", len(pages))
    return pages
