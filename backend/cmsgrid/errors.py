from flask import jsonify
from cmsgrid.domain.invariants.exceptions import DomainError

def register_error_handlers(app):
    @app.errorhandler(DomainError)
    def handle_domain_error(error):
        response = jsonify({
            "error": type(error).__name__,
            "message": str(error)
        })
        response.status_code = error.status_code
        return response
