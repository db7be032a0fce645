import os

import pytest

from auth.models import User, UserRole
from config import ProductionConfig
from create_admin import upsert_admin


def auth_header(token):
    return {'Authorization': f'Bearer {token}'}


def test_stored_admin_can_sign_in_and_manage(app, client):
    user, created = upsert_admin('Editor@GDG.dev', 'editor-password', 'Chief Editor')
    assert created
    assert user.is_admin

    resp = client.post('/auth/signin', json={'email': 'editor@gdg.dev', 'password': 'editor-password'})
    body = resp.get_json()
    assert resp.status_code == 200
    assert body['role'] == 'admin'
    assert body['user']['name'] == 'Chief Editor'

    headers = auth_header(body['token'])
    assert client.get('/admin/newsletters', headers=headers).status_code == 200
    me = client.get('/auth/me', headers=headers).get_json()
    assert me['user']['id'] == user.id


def test_upsert_promotes_existing_reader(app, client, reader_token):
    user, created = upsert_admin('reader@test.dev', 'fresh-password')
    assert not created
    assert user.role == UserRole.ADMIN
    assert User.query.count() == 1

    old = client.post('/auth/signin', json={'email': 'reader@test.dev', 'password': 'reader-password'})
    assert old.status_code == 401
    new = client.post('/auth/signin', json={'email': 'reader@test.dev', 'password': 'fresh-password'})
    assert new.get_json()['role'] == 'admin'


def test_upsert_rejects_short_password(app):
    with pytest.raises(ValueError):
        upsert_admin('someone@gdg.dev', '123')
    assert User.get_by_email('someone@gdg.dev') is None


def test_production_has_no_default_admin_password():
    assert ProductionConfig.ADMIN_PASSWORD == (os.getenv('ADMIN_PASSWORD') or None)
    assert ProductionConfig.ADMIN_PASSWORD != 'admin123456' or os.getenv('ADMIN_PASSWORD') == 'admin123456'


def test_unset_admin_credentials_disable_configured_login(app, client):
    app.config['ADMIN_EMAIL'] = None
    app.config['ADMIN_PASSWORD'] = None
    resp = client.post('/auth/signin', json={'email': 'admin@test.dev', 'password': 'admin-password'})
    assert resp.status_code == 401
