from tests.conftest import ADMIN_PASSWORD, make_content


def test_status_is_false_without_session(client):
    response = client.get('/api/admin/status')
    assert response.status_code == 200
    assert response.get_json() == {'isAdmin': False}


def test_login_with_correct_password(client):
    response = client.post('/api/admin/login', json={'password': ADMIN_PASSWORD})
    assert response.status_code == 200
    assert response.get_json() == {'success': True, 'message': 'Admin logged in successfully'}
    assert client.get('/api/admin/status').get_json() == {'isAdmin': True}


def test_login_with_wrong_password(client):
    response = client.post('/api/admin/login', json={'password': 'nope'})
    assert response.status_code == 401
    body = response.get_json()
    assert body['success'] is False
    assert body['message'] == 'Invalid admin password'
    assert client.get('/api/admin/status').get_json() == {'isAdmin': False}


def test_login_without_password_is_rejected(client):
    assert client.post('/api/admin/login', json={}).status_code == 401
    assert client.post('/api/admin/login', data='not json').status_code == 401
    assert client.post('/api/admin/login', json={'password': 58933}).status_code == 401


def test_session_cookie_has_fixed_expiry_and_no_secure_flag(client):
    response = client.post('/api/admin/login', json={'password': ADMIN_PASSWORD})
    cookies = response.headers.getlist('Set-Cookie')
    session_cookie = next(c for c in cookies if c.startswith('session='))
    assert 'Expires=' in session_cookie
    assert 'HttpOnly' in session_cookie
    assert 'Secure' not in session_cookie


def test_logout_clears_session_and_is_idempotent(admin_client):
    response = admin_client.post('/api/admin/logout')
    assert response.status_code == 200
    assert response.get_json()['success'] is True
    assert admin_client.get('/api/admin/status').get_json() == {'isAdmin': False}

    again = admin_client.post('/api/admin/logout')
    assert again.status_code == 200
    assert again.get_json()['success'] is True


def test_protected_routes_reject_anonymous_sessions(client):
    for method, path in [('GET', '/api/contacts'),
                         ('GET', '/api/contacts/export'),
                         ('POST', '/api/admin/portfolio-content')]:
        response = client.open(path, method=method, json=make_content())
        assert response.status_code == 401, path
        assert response.get_json() == {'success': False, 'message': 'Admin authentication required'}


def test_logged_out_session_loses_access(admin_client):
    assert admin_client.get('/api/contacts').status_code == 200
    admin_client.post('/api/admin/logout')
    assert admin_client.get('/api/contacts').status_code == 401
