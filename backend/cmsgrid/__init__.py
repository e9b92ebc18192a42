from flask import Flask, send_from_directory, current_app
from .config import config_by_name
from .extensions import db, migrate
from .api.v1 import v1_bp
from .middleware.locale_middleware import locale_middleware
from .errors import register_error_handlers
from flask_swagger_ui import get_swaggerui_blueprint
import os

SWAGGER_URL = "/swagger"
OPENAPI_URL = "/openapi/cms.yaml"


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)

    # -------------------------------------------------
    # Middleware & errors
    # -------------------------------------------------
    locale_middleware(app)
    register_error_handlers(app)

    # -------------------------------------------------
    # API
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")

    @app.route(OPENAPI_URL, methods=["GET"], endpoint="openapi_cms")
    def serve_openapi():
        return send_from_directory(
            os.path.join(current_app.root_path, "api", "v1"),
            "cms_openapi.yaml",
            mimetype="application/yaml",
        )

    app.register_blueprint(
        get_swaggerui_blueprint(
            SWAGGER_URL,
            OPENAPI_URL,
            config={"app_name": "CMS Grid API", "deepLinking": True},
        ),
        url_prefix=SWAGGER_URL,
    )

    app.logger.debug("cmsgrid app created with %s config", config_name)
    return app
