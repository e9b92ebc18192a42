from flask import g

from cmsgrid.config import load_translations
from cmsgrid.utils.i18n import get_locale, translate


def test_default_without_app_context():
    assert translate("VersionTag.MODIFIEDONDRAFTSHORT", "Modified") == "Modified"


def test_catalog_lookup(app):
    g.locale = "de"

    assert translate("VersionTag.MODIFIEDONDRAFTSHORT", "Modified") == "Geändert"


def test_missing_key_falls_back(app):
    g.locale = "nl"

    assert translate("VersionTag.MODIFIEDONDRAFTSHORT", "Modified") == "Gewijzigd"
    assert translate("VersionTag.MODIFIEDONDRAFTHELP", "Item has unpublished changes") == (
        "Item has unpublished changes"
    )


def test_unknown_locale_falls_back(app):
    g.locale = "xx"

    assert translate("VersionTag.MODIFIEDONDRAFTSHORT", "Modified") == "Modified"


def test_locale_defaults_to_config(app):
    assert get_locale() == app.config["DEFAULT_LOCALE"]


def test_locale_from_accept_language(app):
    with app.test_request_context(headers={"Accept-Language": "de-DE,de;q=0.9"}):
        app.preprocess_request()
        assert g.locale == "de"


def test_load_translations(tmp_path):
    (tmp_path / "fr.json").write_text('{"greeting": "Bonjour"}', encoding="utf-8")

    assert load_translations(tmp_path) == {"fr": {"greeting": "Bonjour"}}
