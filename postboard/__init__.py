import os
import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime
import click
import pytz

from flask import Flask, request, render_template
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_wtf.csrf import CSRFProtect

from config import get_config

# 初始化擴充套件
db = SQLAlchemy()
migrate = Migrate()
csrf = CSRFProtect()


def configure_logging(app: 'Flask') -> None:
    """根據環境配置應用程式日誌"""
    if app.testing:
        return

    if app.debug:
        # 開發環境日誌 - 控制台輸出
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        console_handler.setLevel(logging.DEBUG)
        app.logger.addHandler(console_handler)
        app.logger.setLevel(logging.DEBUG)
        app.logger.info('Development logging configured')
    else:
        # 生產環境日誌 - 檔案輸出與輪替
        log_file = app.config.get('LOG_FILE', 'logs/app.log')

        # 確保日誌目錄存在
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            try:
                os.makedirs(log_dir, exist_ok=True)
            except OSError as e:
                app.logger.error(f"Failed to create log directory {log_dir}: {e}. Falling back to 'app.log'.")
                log_file = 'app.log'

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=10
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)
        app.logger.setLevel(logging.INFO)
        app.logger.info('Production logging configured')


def register_blueprints(app: 'Flask') -> None:
    """註冊所有應用程式藍圖"""
    from postboard.routes.posts import bp as posts_bp
    app.register_blueprint(posts_bp)

    app.logger.info('All blueprints registered successfully')


def setup_security_headers(app: 'Flask') -> None:
    """配置安全相關的回應標頭"""

    @app.after_request
    def set_security_headers(response):
        """為所有回應新增安全標頭"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'

        csp_config = app.config.get('CSP')
        if csp_config:
            csp_parts = []
            for directive, values in csp_config.items():
                if values:
                    csp_parts.append(f"{directive} {' '.join(values)}")
                else:
                    csp_parts.append(directive)
            response.headers['Content-Security-Policy'] = '; '.join(csp_parts)

        return response


def register_error_handlers(app: 'Flask') -> None:
    """為應用程式註冊錯誤處理器"""
    from postboard.services.post_store import PostNotFound

    @app.errorhandler(PostNotFound)
    def post_not_found(error):
        """將找不到文章轉為 404 回應"""
        app.logger.info(f"Post not found: id={error.post_id} ({request.url})")
        return render_template('error/404.html'), 404

    @app.errorhandler(404)
    def not_found_error(error):
        """處理 404 找不到頁面錯誤"""
        app.logger.info(f"Page not found: {request.url}")
        return render_template('error/404.html'), 404

    @app.errorhandler(500)
    def internal_error(error):
        """處理 500 伺服器內部錯誤"""
        db.session.rollback()
        app.logger.error(f"Server Error: {error}")
        return render_template('error/500.html'), 500


def register_template_helpers(app: 'Flask') -> None:
    """Register template context processors and filters"""

    @app.context_processor
    def inject_template_vars():
        """Inject common variables into template context"""
        tz = pytz.timezone(app.config.get('TIMEZONE', 'UTC'))
        return {
            'now': datetime.now(tz),
            'app_version': app.config.get('VERSION', '1.0.0'),
        }

    @app.template_filter('localtime')
    def localtime_filter(value, fmt='%Y-%m-%d %H:%M'):
        """Render a naive UTC timestamp in the configured timezone"""
        if value is None:
            return ''
        tz = pytz.timezone(app.config.get('TIMEZONE', 'UTC'))
        if value.tzinfo is None:
            value = pytz.utc.localize(value)
        return value.astimezone(tz).strftime(fmt)


def register_commands(app: 'Flask') -> None:
    """Register CLI commands"""

    @app.cli.command('init-db')
    def init_db_command():
        """Create the database tables."""
        create_tables(app)
        click.echo('Database tables created.')


def create_app(config_name: str = None, config_class = None) -> 'Flask':
    """
    Application factory function

    Args:
        config_name (str): Configuration environment name
        config_class: Configuration class (overrides config_name if provided)

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    # Load configuration
    if config_class is None:
        config_class = get_config(config_name)
    app.config.from_object(config_class)

    # Initialize configuration
    config_class.init_app(app)

    # Initialize core extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    # Configure application components
    configure_logging(app)
    register_blueprints(app)
    setup_security_headers(app)
    register_error_handlers(app)
    register_template_helpers(app)
    register_commands(app)

    app.logger.info(f'Application created with {config_class.__name__}')
    return app


def create_tables(app: 'Flask') -> None:
    """
    Create database tables

    Suitable for development or one-time initialization only. Use Flask-Migrate
    (flask db init/migrate/upgrade) to manage schema changes in production.

    Args:
        app: Flask application instance
    """
    from postboard import models  # noqa: F401

    with app.app_context():
        try:
            db.create_all()
            app.logger.info('Database tables created successfully')
        except Exception as e:
            app.logger.error(f'Error creating database tables: {e}')
            raise
