"""Previous/next document lookup from the docs sidebar."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any

import yaml

from pagewright.core.exceptions import ConfigLoadError
from pagewright.core.ports import PrevAndNext
from pagewright.core.types import NavLink

logger = logging.getLogger(__name__)


def flatten_sidebar(entries: Sequence[dict[str, Any]]) -> Iterator[NavLink]:
    """Walk nested sidebar ``items`` depth-first, yielding linked pages.

    In-page anchors (links with a ``#``) are not documents of their own.
    """
    for entry in entries:
        link = entry.get("link")
        if link and "#" not in link:
            yield NavLink(title=str(entry.get("title") or link), link=link)
        children = entry.get("items")
        if children:
            yield from flatten_sidebar(children)


class SidebarNavigation:
    """Resolves a docs page's neighbours in sidebar reading order."""

    def __init__(self, links: Sequence[NavLink] = ()) -> None:
        self.links = list(links)
        self._positions: dict[str, int] = {}
        for position, nav in enumerate(self.links):
            self._positions.setdefault(nav.link, position)

    @classmethod
    def load(cls, path: Path) -> SidebarNavigation:
        """Load a sidebar YAML file; a missing file gives no navigation."""
        if not path.is_file():
            logger.debug("No sidebar at %s, docs pages get no prev/next links", path)
            return cls()
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or []
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(str(path), str(exc)) from exc
        if not isinstance(data, list):
            raise ConfigLoadError(str(path), f"expected a list of sidebar entries, got {type(data).__name__}")
        return cls(list(flatten_sidebar(data)))

    def prev_and_next(self, slug: str) -> PrevAndNext:
        position = self._positions.get(slug)
        if position is None:
            return {"prev": None, "next": None}
        return {
            "prev": self.links[position - 1] if position > 0 else None,
            "next": self.links[position + 1] if position < len(self.links) - 1 else None,
        }
