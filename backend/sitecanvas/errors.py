from flask import current_app, jsonify, render_template, request
from sqlalchemy.exc import OperationalError

from sitecanvas.domain.exceptions import (
    ConflictError,
    IllegalTransition,
    NotFoundError,
    OperationTimeout,
    SiteNotFound,
    ValidationError,
)
from sitecanvas.extensions import db


def _error(name, message, status, **extra):
    response = jsonify({"error": name, "message": message, **extra})
    response.status_code = status
    return response


def register_error_handlers(app):
    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        return _error("ValidationError", "The submitted content is invalid", 400, messages=error.messages)

    @app.errorhandler(SiteNotFound)
    def handle_site_not_found(error):
        current_app.logger.warning("No published site for host %s", request.host)
        # Visitors get a bare 404, never the host or any internal id
        if request.blueprint == "sites":
            return render_template("site/not_found.html"), 404
        return _error("NotFound", "Not found", 404)

    @app.errorhandler(NotFoundError)
    def handle_not_found(error):
        if request.blueprint == "sites":
            return render_template("site/not_found.html"), 404
        return _error("NotFound", str(error), 404)

    @app.errorhandler(ConflictError)
    def handle_conflict(error):
        return _error("Conflict", str(error), 409)

    @app.errorhandler(IllegalTransition)
    def handle_illegal_transition(error):
        return _error("IllegalTransition", str(error), 409)

    @app.errorhandler(OperationTimeout)
    def handle_timeout(error):
        current_app.logger.warning("Timed out: %s", error)
        return _error("Timeout", str(error), 504)

    @app.errorhandler(OperationalError)
    def handle_database_unavailable(error):
        db.session.rollback()
        current_app.logger.error("Database unavailable: %s", error)
        return _error("ServiceUnavailable", "Database unavailable, please retry", 503)
