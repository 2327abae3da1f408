import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pagewright.core.exceptions import ConfigLoadError

CONFIG_FILENAME = ".pagewright.toml"


def _deep_merge(destination: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """Merge source into destination, with source values overwriting."""
    for key, value in source.items():
        if isinstance(value, Mapping) and key in destination and isinstance(destination[key], Mapping):
            destination[key] = _deep_merge(dict(destination[key]), dict(value))
        else:
            destination[key] = value
    return destination


class PathsSettings(BaseModel):
    """Path configuration.

    All paths are relative to the 'site_root' unless absolute.
    site_root defaults to current working directory.
    """

    site_root: Path = Field(
        default_factory=Path.cwd,
        description="Root directory of the site (defaults to current working directory)",
    )

    # Content collections
    docs_dir: Path = Field(default=Path("docs"), description="Source of the 'docs' collection")
    packages_dir: Path = Field(default=Path("packages"), description="Source of the 'packages' collection")
    translations_dir: str = Field(
        default="translations/{code}",
        description="Source of each 'docs-<code>' collection; '{code}' is the locale code",
    )

    # Site metadata
    i18n_file: Path = Field(default=Path("i18n.json"), description="Locale list")
    nav_file: Path = Field(default=Path("doc-links.yaml"), description="Docs sidebar")

    # Output
    manifest_file: Path = Field(default=Path("public/pages.json"), description="Registered pages manifest")

    @property
    def abs_docs_dir(self) -> Path:
        return self._resolve(self.docs_dir)

    @property
    def abs_packages_dir(self) -> Path:
        return self._resolve(self.packages_dir)

    @property
    def abs_i18n_file(self) -> Path:
        return self._resolve(self.i18n_file)

    @property
    def abs_nav_file(self) -> Path:
        return self._resolve(self.nav_file)

    @property
    def abs_manifest_file(self) -> Path:
        return self._resolve(self.manifest_file)

    def abs_translations_dir(self, code: str) -> Path:
        return self._resolve(Path(self.translations_dir.format(code=code)))

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.site_root / path


class BlogSettings(BaseModel):
    posts_per_page: int = Field(default=8, gt=0, description="Posts per blog index page")


class QuerySettings(BaseModel):
    limit: int = Field(default=10000, gt=0, description="Maximum number of content items queried")


class TemplateSettings(BaseModel):
    """Template identifiers handed to the renderer with each page."""

    docs: str = "templates/docs-markdown.html"
    package: str = "templates/docs-local-packages.html"
    blog_post: str = "templates/blog-post.html"
    blog_list: str = "templates/blog-list.html"
    tags: str = "templates/tags.html"


class PagewrightConfig(BaseSettings):
    """Root configuration for pagewright.

    Supports environment variable overrides with the pattern:
    PAGEWRIGHT_SECTION__KEY (e.g., PAGEWRIGHT_BLOG__POSTS_PER_PAGE)
    """

    paths: PathsSettings = Field(default_factory=PathsSettings)
    blog: BlogSettings = Field(default_factory=BlogSettings)
    query: QuerySettings = Field(default_factory=QuerySettings)
    templates: TemplateSettings = Field(default_factory=TemplateSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="PAGEWRIGHT_",
        env_nested_delimiter="__",
    )

    @classmethod
    def load(cls, site_root: Path | None = None) -> "PagewrightConfig":
        """Loads configuration from .pagewright.toml and environment variables.

        Priority (highest to lowest):
        1. Environment variables (PAGEWRIGHT_SECTION__KEY)
        2. Config file (.pagewright.toml)
        3. Defaults
        """
        root_path = site_root if site_root is not None else Path.cwd()
        config_file = root_path / CONFIG_FILENAME

        file_settings: dict[str, Any] = {}
        if config_file.is_file():
            try:
                with config_file.open("rb") as f:
                    file_settings = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigLoadError(str(config_file), str(exc)) from exc

        env_settings = cls().model_dump(exclude_unset=True)
        merged_config = _deep_merge(file_settings, env_settings)
        merged_config.setdefault("paths", {})["site_root"] = root_path

        return cls.model_validate(merged_config)
