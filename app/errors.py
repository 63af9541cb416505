import logging

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

log = logging.getLogger(__name__)

def server_error_response(error):
    """Build the generic 500 body returned for any data access failure."""
    return jsonify({
        "message": "Server Error",
        "error": type(error).__name__
    }), 500

def register_error_handlers(app):
    """Register application error handlers."""

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        """Handle Werkzeug HTTP exceptions."""
        return jsonify({"message": e.description or e.name}), e.code

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(e):
        """Handle database errors that escaped a view."""
        log.error(f"Unhandled database error: {e}")
        return server_error_response(e)
