"""URL slug derivation from content file paths."""

import re
from pathlib import PurePosixPath
from unicodedata import normalize

from pydantic import BaseModel, ConfigDict

from pagewright.core.i18n import DEFAULT_LOCALE, LocaleConfig

DOCS_COLLECTION = "docs"
PACKAGES_COLLECTION = "packages"
PACKAGE_README = "README"
INDEX_NAME = "index"

_APOSTROPHES = re.compile(r"['’]")
_COMBINING_MARKS = re.compile("[\u0300-\u036f\ufe20-\ufe2f\u20d0-\u20ff]")
_WORD_RUNS = re.compile(r"[^\W_]+")
_ASCII_WORDS = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


class SlugResult(BaseModel):
    """Outcome of slug derivation. All fields are null when no rule applies."""

    model_config = ConfigDict(frozen=True)

    slug: str | None = None
    locale: str | None = None
    title: str | None = None
    package: bool = False


def split_path(relative_path: str) -> tuple[str, str]:
    """Split a relative file path into its directory and extensionless name.

    >>> split_path("guides/setup.md")
    ('guides', 'setup')
    >>> split_path("index.mdx")
    ('', 'index')
    """
    path = PurePosixPath(relative_path.replace("\\", "/"))
    directory = str(path.parent)
    return ("" if directory == "." else directory), path.stem


def path_to_slug(directory: str, name: str) -> str:
    """Build an absolute, trailing-slashed slug; ``index`` maps to its directory.

    >>> path_to_slug("guides", "setup")
    '/guides/setup/'
    >>> path_to_slug("a/b", "index")
    '/a/b/'
    >>> path_to_slug("", "index")
    '/index/'
    """
    if name != INDEX_NAME and directory:
        return f"/{directory}/{name}/"
    if not directory:
        return f"/{name}/"
    return f"/{directory}/"


def slug_from_relative_path(relative_path: str) -> str:
    return path_to_slug(*split_path(relative_path))


def slug_to_anchor(slug: str) -> str | None:
    """Return the last non-empty segment of ``slug``, e.g. ``/a/b/`` -> ``b``."""
    segments = [segment for segment in slug.split("/") if segment]
    return segments[-1] if segments else None


def strip_first_segment(relative_path: str) -> str:
    """Drop the leading directory of a path: ``docs/a/b.md`` -> ``a/b.md``."""
    _, _, remainder = relative_path.replace("\\", "/").lstrip("/").partition("/")
    return remainder


def derive_slug(relative_path: str, collection: str, locales: LocaleConfig) -> SlugResult:
    """Map a file path in a source collection to its slug and locale.

    Docs are served in the default locale, translated docs (``docs-<code>``)
    in their own locale with the leading source directory dropped, and package
    READMEs under ``/packages/``. Anything else gets no slug.
    """
    if collection == DOCS_COLLECTION:
        return SlugResult(slug=slug_from_relative_path(relative_path), locale=DEFAULT_LOCALE)

    code = locales.locale_for_collection(collection)
    if code is not None:
        remainder = strip_first_segment(relative_path)
        if not remainder:
            return SlugResult()
        return SlugResult(slug=slug_from_relative_path(remainder), locale=code)

    if collection == PACKAGES_COLLECTION:
        directory, name = split_path(relative_path)
        # A README at the collection root names no package.
        if name == PACKAGE_README and directory:
            return SlugResult(slug=f"/packages/{directory}/", title=directory, package=True)

    return SlugResult()


def deburr(text: str) -> str:
    """Strip accents from letters, leaving every other character alone.

    >>> deburr("Café")
    'Cafe'
    """
    return normalize("NFC", _COMBINING_MARKS.sub("", normalize("NFKD", text)))


def _split_words(run: str) -> list[str]:
    # camelCase and letter/digit boundaries only split ASCII runs.
    if run.isascii():
        return _ASCII_WORDS.findall(run)
    return [run]


def kebab_case(text: str) -> str:
    """Join the words of ``text`` with hyphens, lowercased and deburred.

    >>> kebab_case("Case Study")
    'case-study'
    >>> kebab_case("fooBar_baz")
    'foo-bar-baz'
    >>> kebab_case("Русский язык")
    'русский-язык'
    """
    cleaned = _APOSTROPHES.sub("", deburr(text))
    words = [word for run in _WORD_RUNS.findall(cleaned) for word in _split_words(run)]
    return "-".join(word.lower() for word in words)


def tag_slug(tag: str) -> str:
    """Normalized key for grouping tags: lowercase first, then kebab-case."""
    return kebab_case(tag.lower())
