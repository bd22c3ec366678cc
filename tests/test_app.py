# tests/test_app.py

import logging
from logging.handlers import RotatingFileHandler

import pytest
from flask import Flask
from sqlalchemy import inspect

from config import (
    get_config, DevelopmentConfig, TestingConfig, ProductionConfig
)
from postboard import create_app, configure_logging, db


def test_app_exists(app):
    assert app is not None
    assert app.config['TESTING'] is True


@pytest.mark.parametrize('name, expected', [
    ('development', DevelopmentConfig),
    ('testing', TestingConfig),
    ('production', ProductionConfig),
    ('unknown', DevelopmentConfig),
])
def test_get_config(name, expected):
    assert get_config(name) is expected


def test_get_config_reads_flask_env(monkeypatch):
    monkeypatch.setenv('FLASK_ENV', 'testing')
    assert get_config() is TestingConfig


def test_production_requires_environment(monkeypatch):
    monkeypatch.delenv('SECRET_KEY', raising=False)
    monkeypatch.delenv('DATABASE_URL', raising=False)

    with pytest.raises(ValueError, match='SECRET_KEY'):
        create_app(config_class=ProductionConfig)


def test_production_rejects_bad_database_url(monkeypatch):
    monkeypatch.setenv('SECRET_KEY', 'prod-secret')
    monkeypatch.setenv('DATABASE_URL', 'not-a-url')

    with pytest.raises(ValueError, match='Invalid DATABASE_URL'):
        ProductionConfig._validate_production_config()


def test_init_db_command(runner, app):
    db.drop_all()

    result = runner.invoke(args=['init-db'])

    assert 'Database tables created.' in result.output
    assert 'posts' in inspect(db.engine).get_table_names()


class ErrorPageConfig(TestingConfig):
    PROPAGATE_EXCEPTIONS = False


def test_database_error_renders_500_page(monkeypatch):
    from sqlalchemy.exc import SQLAlchemyError
    from postboard.services.post_store import PostStore

    app = create_app(config_class=ErrorPageConfig)

    def broken_find_all(self):
        raise SQLAlchemyError('database is gone')

    monkeypatch.setattr(PostStore, 'find_all', broken_find_all)

    with app.app_context():
        db.create_all()
        rollbacks = []
        monkeypatch.setattr(db.session, 'rollback', lambda: rollbacks.append(True))

        response = app.test_client().get('/')

        assert response.status_code == 500
        assert b'500 - Server error' in response.data
        assert rollbacks

        monkeypatch.undo()
        db.drop_all()


def _fresh_app(name, **config):
    app = Flask(name)
    app.config.update(config)
    return app


def _handlers(app, handler_type):
    return [h for h in app.logger.handlers if type(h) is handler_type]


def test_logging_skipped_when_testing():
    app = _fresh_app('postboard_log_testing', TESTING=True, DEBUG=True)
    before = list(app.logger.handlers)

    configure_logging(app)

    assert app.logger.handlers == before


def test_logging_uses_console_in_debug():
    app = _fresh_app('postboard_log_debug', DEBUG=True)

    configure_logging(app)

    handlers = _handlers(app, logging.StreamHandler)
    try:
        assert handlers
        assert handlers[-1].level == logging.DEBUG
        assert app.logger.level == logging.DEBUG
        assert not _handlers(app, RotatingFileHandler)
    finally:
        for handler in handlers:
            app.logger.removeHandler(handler)


def test_logging_uses_rotating_file_in_production(tmp_path):
    log_file = tmp_path / 'logs' / 'postboard.log'
    app = _fresh_app('postboard_log_production', DEBUG=False, LOG_FILE=str(log_file))

    configure_logging(app)

    handlers = _handlers(app, RotatingFileHandler)
    try:
        assert len(handlers) == 1
        assert handlers[0].level == logging.INFO
        assert handlers[0].maxBytes == 10 * 1024 * 1024
        assert handlers[0].backupCount == 10
        assert log_file.exists()
        assert 'Production logging configured' in log_file.read_text()
    finally:
        for handler in handlers:
            app.logger.removeHandler(handler)
            handler.close()
