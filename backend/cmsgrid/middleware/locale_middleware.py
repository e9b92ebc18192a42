from flask import request, g

def locale_middleware(app):
    @app.before_request
    def load_locale():
        languages = app.config.get("LANGUAGES", [])
        # Attach locale to global context
        g.locale = (
            request.accept_languages.best_match(languages)
            or app.config.get("DEFAULT_LOCALE", "en")
        )
