from models.subscriber import Subscriber


def test_subscribe(client):
    resp = client.post('/api/subscribers', json={'email': '  Fan@Example.com '})
    body = resp.get_json()
    assert resp.status_code == 201
    assert body['success'] is True
    assert body['data']['email'] == 'fan@example.com'
    assert body['data']['subscribedAt']


def test_subscribe_twice_is_conflict(client):
    assert client.post('/api/subscribers', json={'email': 'fan@example.com'}).status_code == 201

    resp = client.post('/api/subscribers', json={'email': 'FAN@example.com'})
    body = resp.get_json()
    assert resp.status_code == 409
    assert body['success'] is False
    assert body['alreadySubscribed'] is True
    assert Subscriber.query.count() == 1


def test_subscribe_requires_valid_email(client):
    missing = client.post('/api/subscribers', json={})
    assert missing.status_code == 400
    assert missing.get_json()['message'] == 'Email is required'

    blank = client.post('/api/subscribers', json={'email': '   '})
    assert blank.get_json()['message'] == 'Email is required'

    invalid = client.post('/api/subscribers', json={'email': 'not-an-email'})
    assert invalid.status_code == 400
    assert invalid.get_json()['message'] == 'Please provide a valid email address'


def test_count_is_public(client):
    client.post('/api/subscribers', json={'email': 'one@example.com'})
    client.post('/api/subscribers', json={'email': 'two@example.com'})

    resp = client.get('/api/subscribers/count')
    assert resp.status_code == 200
    assert resp.get_json() == {'success': True, 'count': 2}


def test_list_and_delete_are_admin_only(client, reader_headers, admin_headers):
    client.post('/api/subscribers', json={'email': 'one@example.com'})
    client.post('/api/subscribers', json={'email': 'two@example.com'})

    assert client.get('/api/subscribers').status_code == 401
    assert client.get('/api/subscribers', headers=reader_headers).status_code == 403

    body = client.get('/api/subscribers', headers=admin_headers).get_json()
    assert body['count'] == 2
    assert [s['email'] for s in body['data']] == ['two@example.com', 'one@example.com']

    subscriber_id = body['data'][0]['id']
    assert client.delete(f'/api/subscribers/{subscriber_id}', headers=reader_headers).status_code == 403
    assert client.delete(f'/api/subscribers/{subscriber_id}', headers=admin_headers).status_code == 200
    assert client.delete(f'/api/subscribers/{subscriber_id}', headers=admin_headers).status_code == 404
    assert client.get('/api/subscribers/count').get_json()['count'] == 1
