import io

import pytest


def image_form(data=b'\x89PNG fake image bytes', filename='cover.png', content_type='image/png'):
    return {'image': (io.BytesIO(data), filename, content_type)}


@pytest.fixture
def uploaded(uploader):
    uploader.upload.return_value = {
        'secure_url': 'https://res.cloudinary.com/demo/image/upload/v1/gdgoc-newsletter/cover.png',
        'public_id': 'gdgoc-newsletter/cover',
    }
    return uploader


def test_upload_image(client, admin_headers, uploaded, sleeps):
    resp = client.post('/api/cloudinary-upload', headers=admin_headers,
                       data=image_form(), content_type='multipart/form-data')
    body = resp.get_json()
    assert resp.status_code == 200
    assert body['success'] is True
    assert body['imageUrl'].endswith('gdgoc-newsletter/cover.png')
    assert body['publicId'] == 'gdgoc-newsletter/cover'

    args, kwargs = uploaded.upload.call_args
    assert args[0].read() == b'\x89PNG fake image bytes'
    assert kwargs['folder'] == 'gdgoc-newsletter'
    assert sleeps == []


def test_upload_requires_admin(client, reader_headers, uploaded):
    resp = client.post('/api/cloudinary-upload', headers=reader_headers,
                       data=image_form(), content_type='multipart/form-data')
    assert resp.status_code == 403
    uploaded.upload.assert_not_called()


def test_upload_without_file(client, admin_headers):
    resp = client.post('/api/cloudinary-upload', headers=admin_headers,
                       data={}, content_type='multipart/form-data')
    assert resp.status_code == 400
    assert resp.get_json()['message'] == 'No file uploaded'


def test_upload_rejects_non_image(client, admin_headers, uploaded):
    resp = client.post('/api/cloudinary-upload', headers=admin_headers,
                       data=image_form(b'hello', 'notes.txt', 'text/plain'),
                       content_type='multipart/form-data')
    assert resp.status_code == 400
    assert resp.get_json()['message'] == 'Only image files are allowed!'
    uploaded.upload.assert_not_called()


def test_upload_too_large(client, admin_headers, uploaded):
    big = b'0' * (10 * 1024 * 1024 + 1)
    resp = client.post('/api/cloudinary-upload', headers=admin_headers,
                       data=image_form(big), content_type='multipart/form-data')
    assert resp.status_code == 413
    uploaded.upload.assert_not_called()


def test_upload_retries_then_succeeds(client, admin_headers, uploader, sleeps):
    uploader.upload.side_effect = [
        ConnectionError('timeout'),
        {'secure_url': 'https://res.cloudinary.com/x.png', 'public_id': 'gdgoc-newsletter/x'},
    ]
    resp = client.post('/api/cloudinary-upload', headers=admin_headers,
                       data=image_form(), content_type='multipart/form-data')
    assert resp.status_code == 200
    assert uploader.upload.call_count == 2
    assert sleeps == [1.0]


def test_upload_fails_after_three_attempts(client, admin_headers, uploader, sleeps):
    uploader.upload.side_effect = ConnectionError('Cloudinary unreachable')
    resp = client.post('/api/cloudinary-upload', headers=admin_headers,
                       data=image_form(), content_type='multipart/form-data')
    assert resp.status_code == 500
    assert resp.get_json() == {'success': False, 'message': 'Cloudinary unreachable'}
    assert uploader.upload.call_count == 3
    assert sleeps == [1.0, 1.0]


@pytest.mark.parametrize('path', ['/api/cloudinary-upload', '/api/cloudinary-delete'])
def test_delete_by_url(client, admin_headers, uploader, path):
    uploader.destroy.return_value = {'result': 'ok'}
    resp = client.delete(path, headers=admin_headers, json={
        'imageUrl': 'https://res.cloudinary.com/demo/image/upload/v1614028020/gdgoc-newsletter/sample.jpg',
    })
    assert resp.status_code == 200
    uploader.destroy.assert_called_once_with('gdgoc-newsletter/sample', invalidate=True)


def test_delete_by_public_id(client, admin_headers, uploader):
    uploader.destroy.return_value = {'result': 'ok'}
    resp = client.delete('/api/cloudinary-delete', headers=admin_headers,
                         json={'publicId': 'gdgoc-newsletter/abc'})
    assert resp.status_code == 200
    uploader.destroy.assert_called_once_with('gdgoc-newsletter/abc', invalidate=True)


def test_delete_requires_target(client, admin_headers):
    resp = client.delete('/api/cloudinary-delete', headers=admin_headers, json={})
    assert resp.status_code == 400
    assert resp.get_json()['message'] == 'Image URL or Public ID is required'


def test_delete_url_outside_folder(client, admin_headers, uploader):
    resp = client.delete('/api/cloudinary-delete', headers=admin_headers,
                         json={'imageUrl': 'https://example.com/elsewhere/pic.jpg'})
    assert resp.status_code == 400
    uploader.destroy.assert_not_called()


def test_delete_not_found_result(client, admin_headers, uploader):
    uploader.destroy.return_value = {'result': 'not found'}
    resp = client.delete('/api/cloudinary-delete', headers=admin_headers,
                         json={'publicId': 'gdgoc-newsletter/missing'})
    assert resp.status_code == 500
    assert resp.get_json()['message'] == 'not found'
    uploader.destroy.assert_called_once()


def test_delete_rejects_array_body(client, admin_headers, uploader):
    resp = client.delete('/api/cloudinary-upload', headers=admin_headers, json=['gdgoc-newsletter/x'])
    assert resp.status_code == 400
    assert resp.get_json()['success'] is False
    uploader.destroy.assert_not_called()


def test_delete_rejects_non_string_url(client, admin_headers, uploader):
    resp = client.delete('/api/cloudinary-delete', headers=admin_headers, json={'imageUrl': 123})
    assert resp.status_code == 400
    assert resp.get_json()['message'] == 'Not a valid string.'
    uploader.destroy.assert_not_called()


def test_delete_blank_fields_count_as_missing(client, admin_headers, uploader):
    resp = client.delete('/api/cloudinary-delete', headers=admin_headers,
                         json={'imageUrl': '  ', 'publicId': None})
    assert resp.status_code == 400
    assert resp.get_json()['message'] == 'Image URL or Public ID is required'
