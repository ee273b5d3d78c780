"""Shared fixtures for the GeoTrack test suite."""
import json
import pytest
from geotrack import create_app, db
from geotrack.services.auth_service import AuthService

@pytest.fixture
def app():
    """Create test app."""
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()

@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()

@pytest.fixture
def sample_user(app):
    """Create sample user with a complete profile."""
    user, error = AuthService.create_user('worker@example.com', 'password123')
    assert error is None
    AuthService.update_profile(user, {
        'customUserId': 'EMP-042',
        'managerEmail': 'boss@example.com'
    })
    return user

@pytest.fixture
def auth_headers(client, sample_user):
    """Bearer token headers for the sample user."""
    response = client.post('/api/auth/login', json={
        'email': 'worker@example.com',
        'password': 'password123'
    })
    token = json.loads(response.data)['data']['access_token']
    return {'Authorization': f'Bearer {token}'}

@pytest.fixture
def located_user(client, auth_headers, sample_user):
    """Sample user with a reported last known location."""
    response = client.post('/api/locations', headers=auth_headers, json={
        'latitude': 17.7321,
        'longitude': 83.3144,
        'accuracy': 12.5
    })
    assert response.status_code == 200
    return sample_user
