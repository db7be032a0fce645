"""
Shared fixtures: an app on in-memory SQLite with a mocked Cloudinary uploader.
Run with: pytest -v
"""

from unittest.mock import MagicMock

import pytest

from app import create_app
from common.database import db
from services.cloudinary_service import CloudinaryService


ADMIN_EMAIL = 'admin@test.dev'
ADMIN_PASSWORD = 'admin-password'


@pytest.fixture
def uploader():
    """Stand-in for cloudinary.uploader; tests set upload/destroy behaviour."""
    return MagicMock()


@pytest.fixture
def sleeps():
    """Records every delay the retry loop asks for."""
    return []


@pytest.fixture
def app(uploader, sleeps):
    service = CloudinaryService(folder='gdgoc-newsletter', attempts=3, delay=1.0,
                                uploader=uploader, sleep=sleeps.append)
    app = create_app('testing', cloudinary_service=service)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def auth_header(token):
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def admin_token(client):
    resp = client.post('/auth/signin', json={'email': ADMIN_EMAIL, 'password': ADMIN_PASSWORD})
    assert resp.status_code == 200
    return resp.get_json()['token']


@pytest.fixture
def admin_headers(admin_token):
    return auth_header(admin_token)


@pytest.fixture
def reader_token(client):
    resp = client.post('/auth/signup', json={
        'name': 'Test Reader',
        'email': 'reader@test.dev',
        'password': 'reader-password',
    })
    assert resp.status_code == 201
    return resp.get_json()['token']


@pytest.fixture
def reader_headers(reader_token):
    return auth_header(reader_token)


@pytest.fixture
def make_newsletter(client, admin_headers):
    """Create a newsletter through the admin API and return its JSON."""
    def _make(**overrides):
        payload = {
            'title': 'Cloud Study Jams',
            'slug': 'cloud-study-jams',
            'contentMarkdown': '## Highlights\n\nWe explored Compute Engine.',
            'template': 'workshop',
            'status': 'published',
        }
        payload.update(overrides)
        resp = client.post('/admin/newsletters', json=payload, headers=admin_headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()['data']
    return _make
