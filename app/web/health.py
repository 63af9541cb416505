import logging
import time
from flask import Blueprint, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import text
from app.extensions import db

health_bp = Blueprint('health', __name__)
log = logging.getLogger(__name__)

@health_bp.route('/liveness')
def liveness_check():
    """Simple liveness check to verify the application is responding."""
    return jsonify({
        "status": "ok",
        "timestamp": time.time()
    })

@health_bp.route('')
def health_check():
    """Check the application and its database."""
    database = check_database()

    return jsonify({
        "status": "ok" if database["healthy"] else "error",
        "version": current_app.config.get("VERSION", "1.0.0"),
        "timestamp": time.time(),
        "checks": {"database": database}
    }), 200 if database["healthy"] else 503

def check_database():
    """Check database connectivity."""
    try:
        # Simple query to test DB connection
        db.session.execute(text("SELECT 1"))
        return {
            "healthy": True,
            "message": "Database connection successful"
        }
    except SQLAlchemyError as e:
        log.error(f"Database health check failed: {str(e)}")
        return {
            "healthy": False,
            "message": str(e)
        }
