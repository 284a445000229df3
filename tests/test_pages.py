from tests.conftest import make_content


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json()['status'] == 'ok'


def test_index_renders_fallback_content(client):
    response = client.get('/')
    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert 'Shashank Karan' in html
    assert 'E-Commerce Platform' in html
    assert 'Analytics Dashboard' not in html
    assert 'MongoDB' in html


def test_index_renders_saved_content(admin_client, client):
    admin_client.post('/api/admin/portfolio-content', json=make_content(skillsList='[]'))
    html = client.get('/').get_data(as_text=True)
    assert 'Ada Lovelace' in html
    assert 'Note G' in html
    # Empty skill list falls back to the defaults
    assert 'JavaScript' in html


def test_unknown_api_path_returns_json_404(client):
    response = client.get('/api/nothing-here')
    assert response.status_code == 404
    assert response.get_json()['success'] is False


def test_wrong_method_returns_json_405(client):
    response = client.get('/api/contact')
    assert response.status_code == 405
    assert response.get_json()['success'] is False
