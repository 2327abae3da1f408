from typing import Protocol, TypedDict, runtime_checkable

from pagewright.core.types import ContentQuery, NavLink, PageSpec, QueryResult


class PrevAndNext(TypedDict):
    prev: NavLink | None
    next: NavLink | None


@runtime_checkable
class ContentSource(Protocol):
    """Answers content queries with annotated, ordered items or errors."""

    def query(self, query: ContentQuery) -> QueryResult: ...


@runtime_checkable
class PageSink(Protocol):
    """Registers pages for rendering."""

    def create_page(self, page: PageSpec) -> None: ...


@runtime_checkable
class SiblingNavigation(Protocol):
    """Looks up the documents before and after a docs page."""

    def prev_and_next(self, slug: str) -> PrevAndNext: ...
