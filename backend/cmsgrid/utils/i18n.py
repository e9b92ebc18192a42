from flask import current_app, g, has_app_context


def get_locale() -> str:
    return g.get("locale") or current_app.config.get("DEFAULT_LOCALE", "en")


def translate(key: str, default: str) -> str:
    """
    Look up key in the catalog of the current locale.
    Falls back to default outside an app context or when no translation exists.
    """
    if not has_app_context():
        return default

    locale = get_locale()
    catalog = current_app.config.get("TRANSLATIONS", {}).get(locale, {})
    if key not in catalog:
        current_app.logger.debug("No %s translation for %s", locale, key)
        return default
    return catalog[key]
