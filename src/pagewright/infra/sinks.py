"""Page sinks: where registered pages go."""

import json
import logging
from pathlib import Path

from pagewright.core.types import PageSpec

logger = logging.getLogger(__name__)


class PageRegistry:
    """Keeps registered pages in memory, in registration order."""

    def __init__(self) -> None:
        self.pages: list[PageSpec] = []

    def create_page(self, page: PageSpec) -> None:
        self.pages.append(page)

    def paths(self) -> list[str]:
        return [page.path for page in self.pages]

    def get(self, path: str) -> PageSpec | None:
        return next((page for page in self.pages if page.path == path), None)


class ManifestSink(PageRegistry):
    """Collects pages and writes them as a JSON manifest for the renderer.

    Pages are only written by ``flush``, so a pass that fails before
    flushing leaves any previous manifest untouched.
    """

    def __init__(self, output_file: Path) -> None:
        super().__init__()
        self.output_file = Path(output_file)

    def flush(self) -> Path:
        self.output_file.parent.mkdir(parents=True, exist_ok=True)
        payload = [page.model_dump(mode="json") for page in self.pages]
        self.output_file.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info("Wrote %d pages to %s", len(self.pages), self.output_file)
        return self.output_file
