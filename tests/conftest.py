# tests/conftest.py

import pytest
from postboard import create_app, db
from postboard.models import Post
from postboard.services.post_store import PostStore
from postboard.services.post_service import PostService
from config import TestingConfig


@pytest.fixture(scope='function')
def app():
    """
    Function-scoped test Flask application on an in-memory SQLite database.
    Tables are created before and dropped after each test.
    """
    app = create_app(config_class=TestingConfig)

    with app.app_context():
        db.create_all()

        yield app

        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """
    Provides a Flask test client for the function-scoped app.
    """
    return app.test_client()


@pytest.fixture(scope='function')
def runner(app):
    """
    Provides a Flask test CLI runner for the function-scoped app.
    """
    return app.test_cli_runner()


@pytest.fixture
def store(app):
    return PostStore()


@pytest.fixture
def service(store):
    return PostService(store)


@pytest.fixture
def make_post(store):
    """Insert a post through the store and return it"""
    def _make_post(title='A post'):
        return store.save(Post(title=title))
    return _make_post


class CsrfTestingConfig(TestingConfig):
    WTF_CSRF_ENABLED = True


@pytest.fixture(scope='function')
def csrf_app():
    """
    Test application with CSRF protection switched on, as in the shipped configs.
    """
    app = create_app(config_class=CsrfTestingConfig)

    with app.app_context():
        db.create_all()

        yield app

        db.session.remove()
        db.drop_all()


@pytest.fixture(scope='function')
def csrf_client(csrf_app):
    return csrf_app.test_client()
