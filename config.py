import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Safely parse boolean-like environment variables."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {'1', 'true', 'yes', 'on'}

"""
Application Configuration Module

This module contains all configuration settings for the application, including configurations
for development, testing, and production environments.
"""

class Config:
    """
    Base Configuration Class

    This class defines the basic configuration parameters required by the application.
    All environment-specific configuration classes inherit from this class.
    """
    # Basic Flask Configuration
    DEBUG = False
    TESTING = False
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Core Settings
    SECRET_KEY = os.environ.get('SECRET_KEY')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///postboard.db')
    TIMEZONE = os.environ.get('TIMEZONE', 'UTC')
    LOG_FILE = os.environ.get('LOG_FILE', 'logs/app.log')
    VERSION = os.environ.get('APP_VERSION', '1.0.0')

    # Titles used by the add/edit routes when the request carries no title
    POST_DEMO_TITLE = os.environ.get('POST_DEMO_TITLE', 'Hello from postboard')
    POST_EDIT_DEMO_TITLE = os.environ.get('POST_EDIT_DEMO_TITLE', 'Yatta !')

    # CSRF Configuration
    WTF_CSRF_ENABLED = env_bool('WTF_CSRF_ENABLED', True)
    WTF_CSRF_TIME_LIMIT = 3600

    # Session Configuration
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.environ.get('SESSION_COOKIE_SAMESITE', 'Lax')

    # Basic Content Security Policy
    CSP = {
        'default-src': ["'self'"],
        'script-src': ["'self'"],
        'style-src': ["'self'"],
        'img-src': ["'self'", "data:"],
        'object-src': ["'none'"],
        'frame-ancestors': ["'none'"]
    }

    @classmethod
    def init_app(cls, app):
        """
        Initialize application configuration

        Called once the application has been created and configured.
        Subclasses may override this to perform environment-specific setup.

        Args:
            app: Flask application instance
        """
        pass


class DevelopmentConfig(Config):
    """Development Environment Configuration"""

    DEBUG = True
    # Use a fixed key for development to maintain sessions across restarts
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    db_url = os.environ.get('DATABASE_URL')
    # Development database - create instance directory if it doesn't exist
    if db_url:
        SQLALCHEMY_DATABASE_URI = db_url
    else:
        instance_dir = os.path.join(os.path.dirname(__file__), 'instance')
        os.makedirs(instance_dir, exist_ok=True)
        SQLALCHEMY_DATABASE_URI = 'sqlite:///' + os.path.join(instance_dir, 'postboard.db')

    # Development CSP - more permissive
    CSP = {
        'default-src': ["'self'"],
        'script-src': ["'self'", "'unsafe-inline'"],
        'style-src': ["'self'", "'unsafe-inline'"],
        'img-src': ["'self'", "data:", "https:"],
        'object-src': ["'none'"]
    }

    @classmethod
    def init_app(cls, app):
        """Initialize development-specific settings"""
        super().init_app(app)

        # Enable detailed error pages in development
        app.config['PROPAGATE_EXCEPTIONS'] = True


class TestingConfig(Config):
    """Testing Environment Configuration"""

    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    WTF_CSRF_ENABLED = False
    POST_DEMO_TITLE = 'Demo post'
    POST_EDIT_DEMO_TITLE = 'Edited demo post'


class ProductionConfig(Config):
    """Production Environment Configuration"""

    DEBUG = False

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL')
    SESSION_COOKIE_SECURE = env_bool('HTTPS_ENABLED', True)

    @classmethod
    def _validate_production_config(cls):
        """Validate that all required production settings are present"""
        required_vars = ['SECRET_KEY', 'DATABASE_URL']
        missing_vars = [var for var in required_vars if not os.environ.get(var)]

        if missing_vars:
            raise ValueError(f"Missing required environment variables for production: {', '.join(missing_vars)}")

        # Validate DATABASE_URL format
        from urllib.parse import urlparse
        parsed = urlparse(os.environ['DATABASE_URL'])
        if not parsed.scheme or not parsed.path:
            raise ValueError("Invalid DATABASE_URL format")

    @classmethod
    def init_app(cls, app):
        """Initialize production-specific settings"""
        super().init_app(app)

        cls._validate_production_config()

        # Ensure log directory exists
        log_file = app.config.get('LOG_FILE', 'logs/app.log')
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """
    Get configuration class based on environment

    Args:
        config_name (str): Configuration name ('development', 'testing', 'production')

    Returns:
        Config: Configuration class
    """
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'default')

    config_class = config.get(config_name, config['default'])

    # Validate configuration class
    if not issubclass(config_class, Config):
        raise ValueError(f"Invalid configuration class: {config_class}")

    return config_class
