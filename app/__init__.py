import os

from flask import Flask

from app.extensions import init_extensions
from app.errors import register_error_handlers
from app.logger import setup_logging
from app.services.container import init_container

def create_app(test_config=None):
    """Application factory function."""
    # Create and configure the app
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    from app.config import get_config
    if test_config is None:
        config_name = os.environ.get('FLASK_ENV', 'default')
        app.config.from_object(get_config(config_name))
    else:
        # Test config overrides the testing defaults
        app.config.from_object(get_config('testing'))
        app.config.from_mapping(test_config)

    # Configure logging
    setup_logging(app)

    # Initialize extensions
    init_extensions(app)
    init_container(app)

    # Register error handlers
    register_error_handlers(app)

    register_blueprints(app)

    from app.cli import register_commands
    register_commands(app)

    # Add teardown handler to clean up resources
    @app.teardown_appcontext
    def teardown_db(exception=None):
        """Clean up at the end of the request."""
        from app.extensions import db
        db.session.remove()

    return app

def register_blueprints(app):
    """Register all blueprints with the application."""
    from app.notifications import notifications_bp
    from app.web.health import health_bp

    app.register_blueprint(notifications_bp, url_prefix='/api/notifications')
    app.register_blueprint(health_bp, url_prefix='/api/health')

    app.logger.info("Registered blueprints: notifications, health")
