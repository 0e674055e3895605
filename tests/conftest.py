import pytest

from access_dashboard.config.settings import TestingConfig
from access_dashboard.dashboard_app import create_app

ADMIN = {
    'name': 'Ana Torres',
    'document': '55667788',
    'email': 'ana@example.com',
    'photo_url': None,
    'role': 'admin',
    'two_factor_enabled': False,
}

USER = dict(ADMIN, name='Juan Pérez', email='juan@example.com', role='usuario')


@pytest.fixture
def app(tmp_path):
    app = create_app(TestingConfig, overrides={'DATA_DIR': str(tmp_path)})
    yield app
    app.extensions['camera'].stop()


@pytest.fixture
def client(app):
    return app.test_client()


def log_in(client, user=None, token='session-token'):
    with client.session_transaction() as sess:
        sess['token'] = token
        sess['user'] = dict(user or ADMIN)


@pytest.fixture
def admin_client(client):
    log_in(client, ADMIN)
    return client


@pytest.fixture
def user_client(client):
    log_in(client, USER)
    return client
