import os
import tempfile
from datetime import datetime, timedelta

import pytest

from app import create_app
from app.extensions import db as _db
from app.models.notification_repository import SqlAlchemyNotificationRepository
from app.models.post import Post
from app.models.user import User
from app.services.container import container
from app.services.session_store import MemorySessionStore


@pytest.fixture
def app():
    """Create and configure a Flask app for testing."""
    # Create a temp file to isolate the database for each test
    db_fd, db_path = tempfile.mkstemp()

    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': f'sqlite:///{db_path}',
        'SECRET_KEY': 'test-key',
        'VERSION': '1.0.0-test',
    })

    yield app

    # Close and remove the temp database
    os.close(db_fd)
    os.unlink(db_path)

@pytest.fixture
def db(app):
    """Create a database instance for testing."""
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()

@pytest.fixture
def client(app, db):
    """A test client for the app."""
    return app.test_client()

@pytest.fixture
def runner(app):
    """A test CLI runner for the app."""
    return app.test_cli_runner()

@pytest.fixture
def repository(db):
    return SqlAlchemyNotificationRepository(db)

@pytest.fixture
def notification_service(db):
    return container().get('notification_service')

@pytest.fixture
def users(db):
    """Create the users notifications refer to."""
    alice = User(id=1, username='alice', email='alice@example.com')
    bob = User(id=2, username='bob', email='bob@example.com')
    carol = User(id=3, username='carol', email='carol@example.com')
    db.session.add_all([alice, bob, carol])
    db.session.commit()
    return alice, bob, carol

@pytest.fixture
def post(db, users):
    """A post owned by alice with a caption longer than the preview."""
    post = Post(
        id=5,
        user_id=1,
        title='Sunset at the pier',
        caption='A long caption that keeps going well beyond the fifty character preview'
    )
    db.session.add(post)
    db.session.commit()
    return post

@pytest.fixture
def add_notification(repository):
    """Insert a notification directly, optionally backdated."""
    def _add(user_id=1, actor_id=2, post_id=5, type='like', age=timedelta(0)):
        repository.insert(user_id, actor_id, post_id, type, created_at=datetime.utcnow() - age)
    return _add

@pytest.fixture
def session_store():
    return MemorySessionStore()
