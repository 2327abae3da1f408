"""Locale configuration and localized paths."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pagewright.core.exceptions import ConfigLoadError

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
LOCALE_COLLECTION_PREFIX = "docs-"


class Locale(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str
    name: str | None = None
    local_name: str | None = Field(default=None, alias="localName")


class LocaleConfig(BaseModel):
    """Read-only list of recognized translation locales.

    Each locale's documents are read from the ``docs-<code>`` collection.
    """

    model_config = ConfigDict(frozen=True)

    locales: tuple[Locale, ...] = ()

    @property
    def codes(self) -> frozenset[str]:
        return frozenset(locale.code for locale in self.locales)

    @staticmethod
    def collection_for(code: str) -> str:
        return f"{LOCALE_COLLECTION_PREFIX}{code}"

    def locale_for_collection(self, collection: str) -> str | None:
        """Return the locale code whose docs collection is ``collection``."""
        for locale in self.locales:
            if collection == self.collection_for(locale.code):
                return locale.code
        return None

    @classmethod
    def from_codes(cls, codes: list[str]) -> "LocaleConfig":
        return cls(locales=tuple(Locale(code=code) for code in codes))

    @classmethod
    def load(cls, path: Path) -> "LocaleConfig":
        """Load locales from an ``i18n.json`` (or YAML) list of ``{code, name}``.

        A missing file means no translations are configured.
        """
        if not path.is_file():
            logger.debug("No locale file at %s, translations disabled", path)
            return cls()
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or []
            if not isinstance(data, list):
                msg = f"expected a list of locales, got {type(data).__name__}"
                raise ConfigLoadError(str(path), msg)
            return cls(locales=tuple(Locale.model_validate(entry) for entry in data))
        except (OSError, yaml.YAMLError, ValidationError) as exc:
            raise ConfigLoadError(str(path), str(exc)) from exc


def localized_path(locale: str | None, path: str) -> str:
    """Prefix ``path`` with the locale code unless it is the default locale."""
    if not locale or locale == DEFAULT_LOCALE:
        return path
    if path == "/":
        return f"/{locale}"
    return f"/{locale}{path}"
