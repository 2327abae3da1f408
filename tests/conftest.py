from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from pagewright.core.i18n import LocaleConfig
from pagewright.core.types import ContentItem, FrontMatter

BUILD_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    return BUILD_TIME


@pytest.fixture
def locales() -> LocaleConfig:
    return LocaleConfig.from_codes(["es", "ja"])


@pytest.fixture
def make_item():
    """Build a raw (unannotated) content item from a path and front matter."""

    def _make(relative_path: str, collection: str = "docs", **frontmatter: Any) -> ContentItem:
        return ContentItem(
            relative_path=relative_path,
            collection=collection,
            frontmatter=FrontMatter.model_validate(frontmatter),
        )

    return _make


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A small site: docs, a blog, a translation, a package, and a sidebar."""
    files = {
        "docs/index.md": "---\ntitle: Home\n---\nWelcome",
        "docs/guides/setup.md": "---\ntitle: Setup\n---\nInstall it.",
        "docs/guides/deploy.md": "---\ntitle: Deploy\n---\nShip it.",
        "docs/blog/2024-01-10-hello/index.md": (
            "---\ntitle: Hello\ndate: 2024-01-10\ntags:\n  - Case Study\n  - release\n---\nFirst post."
        ),
        "docs/blog/2024-03-02-launch/index.md": (
            "---\ntitle: Launch\ndate: 2024-03-02\ntags:\n  - case-study\n"
            "canonicalLink: https://dev.example.com/launch\n---\nWe launched."
        ),
        "docs/blog/2099-01-01-future/index.md": "---\ntitle: Future\ndate: 2099-01-01\n---\nSoon.",
        "docs/blog/2024-02-01-wip/index.md": "---\ntitle: WIP\ndate: 2024-02-01\ndraft: true\n---\nNot yet.",
        "translations/es/docs/guides/setup.md": "---\ntitle: Instalación\n---\nInstálalo.",
        "packages/site-plugin/README.md": "# site-plugin\n",
        "packages/site-plugin/CHANGELOG.md": "# Changelog\n",
    }
    for relative, content in files.items():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    (tmp_path / "i18n.json").write_text('[{"code": "es", "name": "Spanish", "localName": "Español"}]', encoding="utf-8")
    (tmp_path / "doc-links.yaml").write_text(
        "- title: Home\n"
        "  link: /index/\n"
        "- title: Guides\n"
        "  items:\n"
        "    - title: Setup\n"
        "      link: /guides/setup/\n"
        "    - title: Setup options\n"
        "      link: /guides/setup/#options\n"
        "    - title: Deploy\n"
        "      link: /guides/deploy/\n"
    )
    return tmp_path
