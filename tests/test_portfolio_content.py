import json

from extensions import db
from models import PortfolioContent
from tests.conftest import make_content


def stored_rows(app):
    with app.app_context():
        return PortfolioContent.query.count()


def test_default_content_when_nothing_stored(client, app):
    response = client.get('/api/portfolio-content')
    assert response.status_code == 200
    body = response.get_json()
    assert body['heroTitle'] == 'Shashank Karan'
    assert json.loads(body['skillsList'])[:3] == ['HTML', 'CSS', 'JavaScript']
    assert len(json.loads(body['projectsList'])) == 1
    assert body['profileImage'] == ''
    # Reading never persists the default
    assert stored_rows(app) == 0


def test_admin_save_and_read_back(admin_client, client):
    response = admin_client.post('/api/admin/portfolio-content', json=make_content())
    assert response.status_code == 200
    body = response.get_json()
    assert body['success'] is True
    assert body['message'] == 'Portfolio content updated successfully'
    assert body['content']['heroTitle'] == 'Ada Lovelace'
    assert body['content']['version'] == 1
    assert body['content']['updatedAt']

    public = client.get('/api/portfolio-content').get_json()
    assert public['heroTitle'] == 'Ada Lovelace'
    assert json.loads(public['projectsList'])[0]['title'] == 'Note G'


def test_skills_round_trip_through_json_string(admin_client):
    admin_client.post('/api/admin/portfolio-content', json=make_content(skillsList='["A","B"]'))
    fetched = admin_client.get('/api/portfolio-content').get_json()
    assert json.loads(fetched['skillsList']) == ['A', 'B']


def test_native_arrays_are_accepted(admin_client, app):
    response = admin_client.post('/api/admin/portfolio-content', json=make_content(
        skillsList=['Flask', 'SQL'],
        projectsList=[{'title': 'Site', 'description': 'This one', 'technologies': 'Flask, SQLAlchemy ,'}]
    ))
    assert response.status_code == 200
    content = response.get_json()['content']
    assert json.loads(content['skillsList']) == ['Flask', 'SQL']
    project = json.loads(content['projectsList'])[0]
    assert project['technologies'] == ['Flask', 'SQLAlchemy']
    assert project['githubUrl'] == ''

    with app.app_context():
        row = PortfolioContent.query.one()
        assert row.skills == ['Flask', 'SQL']
        assert row.projects[0]['title'] == 'Site'


def test_single_project_object_is_wrapped(admin_client):
    response = admin_client.post('/api/admin/portfolio-content', json=make_content(
        projectsList=json.dumps({'title': 'Solo', 'description': 'Only one', 'index': 3})
    ))
    assert response.status_code == 200
    projects = json.loads(response.get_json()['content']['projectsList'])
    assert [p['title'] for p in projects] == ['Solo']
    assert 'index' not in projects[0]


def test_project_items_are_not_revalidated(admin_client):
    response = admin_client.post('/api/admin/portfolio-content', json=make_content(
        skillsList='["Python", 3]',
        projectsList='[{"description": "no title yet", "image": null}]'
    ))
    assert response.status_code == 200
    content = response.get_json()['content']
    assert json.loads(content['skillsList']) == ['Python', '3']
    project = json.loads(content['projectsList'])[0]
    assert project['title'] == ''
    assert project['description'] == 'no title yet'
    assert project['image'] == ''


def test_empty_fields_report_field_messages(admin_client):
    content = make_content(heroTitle='', heroSubtitle='')
    del content['skillsList']
    response = admin_client.post('/api/admin/portfolio-content', json=content)
    assert response.status_code == 400
    messages = {e['field']: e['message'] for e in response.get_json()['errors']}
    assert messages == {
        'heroTitle': 'Hero title is required',
        'heroSubtitle': 'Hero subtitle is required',
        'skillsList': 'Skills list is required',
    }


def test_long_hero_texts_are_stored_in_full(admin_client, app):
    subtitle = 'Engineer ' * 40
    response = admin_client.post('/api/admin/portfolio-content', json=make_content(heroSubtitle=subtitle))
    assert response.status_code == 200
    with app.app_context():
        assert PortfolioContent.query.one().hero_subtitle == subtitle
        assert isinstance(PortfolioContent.__table__.c.hero_title.type, db.Text)
        assert isinstance(PortfolioContent.__table__.c.hero_subtitle.type, db.Text)


def test_only_one_document_after_many_updates(admin_client, app):
    for i in range(5):
        response = admin_client.post('/api/admin/portfolio-content', json=make_content(heroTitle=f'Title {i}'))
        assert response.status_code == 200

    assert stored_rows(app) == 1
    with app.app_context():
        row = PortfolioContent.query.one()
        assert row.hero_title == 'Title 4'
        assert row.version == 5


def test_missing_and_empty_fields_are_rejected(admin_client, app):
    content = make_content(heroTitle='')
    del content['aboutText']
    response = admin_client.post('/api/admin/portfolio-content', json=content)
    assert response.status_code == 400
    body = response.get_json()
    assert body['success'] is False
    assert body['message'] == 'Invalid content data'
    assert sorted(e['field'] for e in body['errors']) == ['aboutText', 'heroTitle']
    assert stored_rows(app) == 0


def test_malformed_list_json_is_rejected(admin_client, app):
    response = admin_client.post('/api/admin/portfolio-content', json=make_content(skillsList='["A", '))
    assert response.status_code == 400
    errors = response.get_json()['errors']
    assert errors[0]['field'] == 'skillsList'
    assert 'valid JSON' in errors[0]['message']
    assert stored_rows(app) == 0


def test_empty_list_string_is_rejected(admin_client):
    response = admin_client.post('/api/admin/portfolio-content', json=make_content(projectsList=''))
    assert response.status_code == 400
    assert response.get_json()['errors'][0]['field'] == 'projectsList'


def test_non_object_body_is_rejected(admin_client):
    response = admin_client.post('/api/admin/portfolio-content', json=['not', 'a', 'document'])
    assert response.status_code == 400


def test_anonymous_save_does_not_change_content(admin_client, client, app):
    admin_client.post('/api/admin/portfolio-content', json=make_content())

    response = client.post('/api/admin/portfolio-content', json=make_content(heroTitle='Intruder'))
    assert response.status_code == 401
    assert client.get('/api/portfolio-content').get_json()['heroTitle'] == 'Ada Lovelace'


def test_stale_version_is_a_conflict(admin_client):
    first = admin_client.post('/api/admin/portfolio-content', json=make_content()).get_json()['content']
    assert first['version'] == 1

    ok = admin_client.post('/api/admin/portfolio-content', json=make_content(heroTitle='Second', version=1))
    assert ok.status_code == 200
    assert ok.get_json()['content']['version'] == 2

    stale = admin_client.post('/api/admin/portfolio-content', json=make_content(heroTitle='Third', version=1))
    assert stale.status_code == 409
    body = stale.get_json()
    assert body['success'] is False
    assert body['currentVersion'] == 2
    assert admin_client.get('/api/portfolio-content').get_json()['heroTitle'] == 'Second'


def test_content_read_falls_back_to_default_when_store_fails(admin_client, client, app):
    admin_client.post('/api/admin/portfolio-content', json=make_content())
    with app.app_context():
        PortfolioContent.__table__.drop(db.engine)

    response = client.get('/api/portfolio-content')
    assert response.status_code == 200
    assert response.get_json()['heroTitle'] == 'Shashank Karan'


def test_content_write_failure_returns_500(admin_client, app):
    with app.app_context():
        PortfolioContent.__table__.drop(db.engine)

    response = admin_client.post('/api/admin/portfolio-content', json=make_content())
    assert response.status_code == 500
    assert response.get_json() == {'success': False, 'message': 'Failed to update content'}
