import json
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

LANG_DIR = Path(__file__).resolve().parent / "lang"


def load_translations(lang_dir=LANG_DIR):
    """
    Load every <locale>.json catalog in lang_dir into {locale: {key: text}}.
    """
    catalogs = {}
    for path in sorted(Path(lang_dir).glob("*.json")):
        with path.open(encoding="utf-8") as fh:
            catalogs[path.stem] = json.load(fh)
    return catalogs


def _csv(value):
    return [item.strip() for item in value.split(",") if item.strip()]


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Grid
    GRID_VERSIONED_LABEL_FIELDS = _csv(os.getenv("GRID_VERSIONED_LABEL_FIELDS", "Name,Title"))
    GRID_DEFAULT_COLUMNS = _csv(os.getenv("GRID_DEFAULT_COLUMNS", "ID,Title,Created"))

    # Localization
    DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en")
    TRANSLATIONS = load_translations()
    LANGUAGES = sorted(TRANSLATIONS) or ["en"]

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///cmsgrid-dev.db")

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")

class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"

config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
