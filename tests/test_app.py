def test_health(client):
    resp = client.get('/health')
    assert resp.status_code == 200
    assert resp.get_json() == {'status': 'Server running'}


def test_unknown_route(client):
    resp = client.get('/api/nothing-here')
    assert resp.status_code == 404
    assert resp.get_json() == {'success': False, 'message': 'Route not found'}


def test_method_not_allowed_uses_envelope(client):
    resp = client.patch('/api/subscribers/count')
    assert resp.status_code == 405
    assert resp.get_json()['success'] is False


def test_api_docs_served(client):
    resp = client.get('/apispec.json')
    assert resp.status_code == 200
    assert '/admin/newsletters' in resp.get_json()['paths']
