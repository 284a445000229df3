import json

import pytest

from app import create_app
from extensions import db

ADMIN_PASSWORD = 'test-password'


def make_content(**overrides):
    """A valid wire document for POST /api/admin/portfolio-content"""
    content = {
        'heroTitle': 'Ada Lovelace',
        'heroSubtitle': 'Analyst',
        'heroDescription': 'Notes on the Analytical Engine.',
        'aboutText': 'I write programs for machines that do not exist yet.',
        'skillsList': json.dumps(['Mathematics', 'Poetry']),
        'projectsList': json.dumps([{
            'title': 'Note G',
            'description': 'Bernoulli numbers on the Analytical Engine',
            'image': 'https://example.com/note-g.png',
            'technologies': ['Punched cards'],
            'githubUrl': '#',
            'demoUrl': '#'
        }]),
        'profileImage': ''
    }
    content.update(overrides)
    return content


@pytest.fixture
def app():
    app = create_app('testing')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app):
    client = app.test_client()
    response = client.post('/api/admin/login', json={'password': ADMIN_PASSWORD})
    assert response.status_code == 200
    return client
