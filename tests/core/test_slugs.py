import pytest

from pagewright.core.i18n import LocaleConfig
from pagewright.core.slugs import (
    derive_slug,
    kebab_case,
    path_to_slug,
    slug_to_anchor,
    split_path,
    strip_first_segment,
    tag_slug,
)


@pytest.mark.parametrize(
    "directory, name, expected",
    [
        ("a/b", "index", "/a/b/"),
        ("", "index", "/index/"),
        ("guides", "setup", "/guides/setup/"),
        ("", "faq", "/faq/"),
        ("blog/2024-01-10-hello", "index", "/blog/2024-01-10-hello/"),
    ],
)
def test_path_to_slug(directory, name, expected):
    assert path_to_slug(directory, name) == expected


@pytest.mark.parametrize(
    "relative_path, expected",
    [
        ("guides/setup.md", ("guides", "setup")),
        ("index.mdx", ("", "index")),
        ("a/b/c.d.md", ("a/b", "c.d")),
        ("guides\\windows.md", ("guides", "windows")),
    ],
)
def test_split_path(relative_path, expected):
    assert split_path(relative_path) == expected


@pytest.mark.parametrize(
    "slug, expected",
    [
        ("/a/b/", "b"),
        ("/guides/setup/", "setup"),
        ("/index/", "index"),
        ("/", None),
    ],
)
def test_slug_to_anchor(slug, expected):
    assert slug_to_anchor(slug) == expected


def test_strip_first_segment():
    assert strip_first_segment("docs/guides/setup.md") == "guides/setup.md"
    assert strip_first_segment("docs/index.md") == "index.md"
    assert strip_first_segment("README.md") == ""


class TestDeriveSlug:
    locales = LocaleConfig.from_codes(["es", "ja"])

    def test_docs_are_english(self):
        result = derive_slug("guides/setup.md", "docs", self.locales)
        assert result.slug == "/guides/setup/"
        assert result.locale == "en"
        assert not result.package

    def test_translated_docs_drop_leading_directory(self):
        result = derive_slug("docs/guides/setup.md", "docs-es", self.locales)
        assert result.slug == "/guides/setup/"
        assert result.locale == "es"

    def test_unconfigured_locale_collection_has_no_slug(self):
        result = derive_slug("docs/guides/setup.md", "docs-fr", self.locales)
        assert result.slug is None
        assert result.locale is None

    def test_package_readme(self):
        result = derive_slug("foo/bar/README.md", "packages", self.locales)
        assert result.slug == "/packages/foo/bar/"
        assert result.title == "foo/bar"
        assert result.package is True
        assert result.locale is None

    def test_other_package_files_have_no_slug(self):
        assert derive_slug("foo/CHANGELOG.md", "packages", self.locales).slug is None

    def test_readme_at_packages_root_has_no_slug(self):
        assert derive_slug("README.md", "packages", self.locales).slug is None

    def test_unknown_collection_has_no_slug(self):
        result = derive_slug("anything.md", "blog", self.locales)
        assert result.slug is None
        assert result.title is None
        assert result.package is False

    def test_is_idempotent(self):
        first = derive_slug("docs/a/index.md", "docs-ja", self.locales)
        second = derive_slug("docs/a/index.md", "docs-ja", self.locales)
        assert first == second
        assert slug_to_anchor(first.slug) == slug_to_anchor(second.slug) == "a"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Case Study", "case-study"),
        ("case-study", "case-study"),
        ("fooBar_baz", "foo-bar-baz"),
        ("  spaced   out ", "spaced-out"),
        ("Café", "cafe"),
        ("don't panic", "dont-panic"),
        ("v2 release", "v-2-release"),
        ("日本語", "日本語"),
        ("Русский язык", "русский-язык"),
        ("Ünïcödé Tag", "unicode-tag"),
    ],
)
def test_kebab_case(text, expected):
    assert kebab_case(text) == expected


def test_tag_slug_lowercases_before_splitting():
    # Lowercasing first keeps acronyms in one word.
    assert tag_slug("GraphQL") == "graphql"
    assert kebab_case("GraphQL") == "graph-ql"
