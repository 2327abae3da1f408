"""Content sources answering the page pass's content query."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

import frontmatter
import yaml
from pydantic import ValidationError

from pagewright.core.annotate import annotate_all
from pagewright.core.exceptions import FrontMatterError
from pagewright.core.query import run_query
from pagewright.core.slugs import DOCS_COLLECTION, PACKAGES_COLLECTION
from pagewright.core.types import ContentItem, ContentQuery, FrontMatter, QueryResult

if TYPE_CHECKING:
    from pagewright.core.config import PagewrightConfig
    from pagewright.core.i18n import LocaleConfig

logger = logging.getLogger(__name__)

CONTENT_SUFFIXES = frozenset({".md", ".mdx"})


def read_item(path: Path, root: Path, collection: str) -> ContentItem:
    """Read one Markdown document and its front matter.

    Raises:
        FrontMatterError: If the file cannot be read or its front matter is invalid.

    """
    try:
        post = frontmatter.load(str(path))
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValueError) as exc:
        raise FrontMatterError(str(path), str(exc)) from exc

    if not isinstance(post.metadata, dict):
        raise FrontMatterError(str(path), f"front matter is not a mapping: {type(post.metadata).__name__}")
    try:
        meta = FrontMatter.model_validate(post.metadata)
    except ValidationError as exc:
        raise FrontMatterError(str(path), str(exc)) from exc

    return ContentItem(
        relative_path=path.relative_to(root).as_posix(),
        collection=collection,
        frontmatter=meta,
        body=post.content,
    )


class FilesystemContentSource:
    """Reads Markdown/MDX documents from one directory per collection."""

    def __init__(
        self,
        collections: Mapping[str, Path],
        locales: LocaleConfig,
        now: datetime | None = None,
    ) -> None:
        self.collections = dict(collections)
        self.locales = locales
        self.now = now

    @classmethod
    def from_config(cls, config: PagewrightConfig, locales: LocaleConfig) -> FilesystemContentSource:
        paths = config.paths
        collections = {
            DOCS_COLLECTION: paths.abs_docs_dir,
            PACKAGES_COLLECTION: paths.abs_packages_dir,
        }
        for code in sorted(locales.codes):
            collections[locales.collection_for(code)] = paths.abs_translations_dir(code)
        return cls(collections, locales)

    def _files(self, root: Path) -> Iterator[Path]:
        if not root.is_dir():
            logger.debug("Collection directory %s does not exist, skipping", root)
            return
        for path in sorted(root.rglob("*")):
            if path.is_file() and path.suffix in CONTENT_SUFFIXES:
                yield path

    def query(self, query: ContentQuery) -> QueryResult:
        items: list[ContentItem] = []
        errors: list[str] = []
        for collection, root in self.collections.items():
            for path in self._files(root):
                try:
                    items.append(read_item(path, root, collection))
                except FrontMatterError as exc:
                    errors.append(str(exc))
        if errors:
            return QueryResult(errors=errors)

        logger.info("Read %d documents from %d collections", len(items), len(self.collections))
        annotated = annotate_all(items, self.locales, self.now)
        return QueryResult(items=run_query(annotated, query))


class InMemoryContentSource:
    """Answers queries over items already in memory."""

    def __init__(
        self,
        items: Iterable[ContentItem],
        locales: LocaleConfig,
        now: datetime | None = None,
    ) -> None:
        self.items = list(items)
        self.locales = locales
        self.now = now

    def query(self, query: ContentQuery) -> QueryResult:
        annotated = annotate_all(self.items, self.locales, self.now)
        return QueryResult(items=run_query(annotated, query))
