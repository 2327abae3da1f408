import pytest
from pydantic import ValidationError

from pagewright.core.exceptions import ConfigLoadError
from pagewright.core.i18n import LocaleConfig, localized_path


@pytest.mark.parametrize(
    "locale, path, expected",
    [
        ("en", "/guides/setup/", "/guides/setup/"),
        (None, "/packages/foo/", "/packages/foo/"),
        ("es", "/guides/setup/", "/es/guides/setup/"),
        ("es", "/", "/es"),
    ],
)
def test_localized_path(locale, path, expected):
    assert localized_path(locale, path) == expected


def test_locale_for_collection(locales):
    assert locales.locale_for_collection("docs-es") == "es"
    assert locales.locale_for_collection("docs-fr") is None
    assert locales.locale_for_collection("docs") is None
    assert LocaleConfig.collection_for("ja") == "docs-ja"
    assert locales.codes == {"es", "ja"}


def test_load_from_json(tmp_path):
    path = tmp_path / "i18n.json"
    path.write_text('[{"code": "es", "name": "Spanish", "localName": "Español"}, {"code": "ja"}]', encoding="utf-8")

    config = LocaleConfig.load(path)

    assert config.codes == {"es", "ja"}
    assert config.locales[0].local_name == "Español"


def test_missing_file_means_no_locales(tmp_path):
    assert LocaleConfig.load(tmp_path / "missing.json").locales == ()


@pytest.mark.parametrize("content", ['{"code": "es"}', "[{name: no code}]", "[: broken"])
def test_malformed_file_raises(tmp_path, content):
    path = tmp_path / "i18n.json"
    path.write_text(content)

    with pytest.raises(ConfigLoadError):
        LocaleConfig.load(path)


def test_locale_config_is_read_only(locales):
    with pytest.raises(ValidationError):
        locales.locales = ()
