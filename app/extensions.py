"""
Initialize Flask extensions for the application.

These extensions are instantiated here and initialized in the application factory.
"""

from flask_sqlalchemy import SQLAlchemy

# SQLAlchemy for database access
db = SQLAlchemy()

def init_extensions(app):
    """Initialize all Flask extensions."""
    db.init_app(app)

    # Register models so create_all() knows about every table
    from app.models import notification, post, user  # noqa: F401
