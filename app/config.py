import os
from datetime import timedelta


class Config:
    """Base configuration for the application."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-key-please-change-in-production'
    DEBUG = False
    TESTING = False

    # Database settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///app.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FORMAT = os.environ.get('LOG_FORMAT', 'json')
    LOG_DIR = os.environ.get('LOG_DIR')

    # Notification settings
    NOTIFICATION_DEDUP_WINDOW = timedelta(minutes=int(os.environ.get('NOTIFICATION_DEDUP_MINUTES', 60)))
    NOTIFICATION_LIST_LIMIT = int(os.environ.get('NOTIFICATION_LIST_LIMIT', 50))
    NOTIFICATION_CAPTION_PREVIEW = 50

    # Remote API used by the session client
    API_BASE_URL = os.environ.get('API_BASE_URL', 'http://localhost:5000/api')
    API_TIMEOUT = int(os.environ.get('API_TIMEOUT', 10))
    SESSION_FILE = os.environ.get(
        'POSTBOARD_SESSION_FILE',
        os.path.join(os.path.expanduser('~'), '.postboard', 'session.json')
    )

    # Application settings
    VERSION = '1.0.0'


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_FORMAT = os.environ.get('LOG_FORMAT', 'standard')

    # Use SQLite for development
    SQLALCHEMY_DATABASE_URI = os.environ.get('DEV_DATABASE_URL') or 'sqlite:///dev.db'


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    DEBUG = True

    # Use in-memory SQLite for testing
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_FORMAT = 'standard'
    LOG_DIR = None


class ProductionConfig(Config):
    """Production configuration."""

    # Ensure proper secret key is set
    SECRET_KEY = os.environ.get('SECRET_KEY')


# Configuration dictionary
config_dict = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration class based on environment."""
    if not config_name:
        config_name = os.environ.get('FLASK_ENV', 'default')
    return config_dict.get(config_name, config_dict['default'])
