"""Test the /register and /logAttendance pass-through endpoints."""
import json
from datetime import datetime
from geotrack.models import AttendanceRecord, User

def test_register_returns_user_id(client):
    """Test successful user registration."""
    response = client.post('/register', json={
        'email': 'newuser@example.com',
        'password': 'password123'
    })

    assert response.status_code == 200
    data = json.loads(response.data)
    user = User.query.filter_by(email='newuser@example.com').first()
    assert user is not None
    assert data == {'userId': user.uid}

def test_register_hashes_password(client):
    client.post('/register', json={'email': 'hash@example.com', 'password': 'password123'})

    user = User.query.filter_by(email='hash@example.com').first()
    assert user.password_hash != 'password123'
    assert user.check_password('password123')

def test_register_duplicate_email(client):
    client.post('/register', json={'email': 'dup@example.com', 'password': 'password123'})
    response = client.post('/register', json={'email': 'dup@example.com', 'password': 'password123'})

    assert response.status_code == 500
    data = json.loads(response.data)
    assert data['error'].startswith('Error creating user: ')
    assert 'already in use' in data['error']
    assert User.query.filter_by(email='dup@example.com').count() == 1

def test_register_invalid_input(client):
    """Every failure collapses to a 500 with an error string."""
    bad_bodies = [
        {'email': 'not-an-email', 'password': 'password123'},
        {'email': 'short@example.com', 'password': '123'},
        {},
    ]
    for body in bad_bodies:
        response = client.post('/register', json=body)
        assert response.status_code == 500
        assert 'Error creating user' in json.loads(response.data)['error']

    response = client.post('/register', data='not json', content_type='text/plain')
    assert response.status_code == 500
    assert User.query.count() == 0

def test_log_attendance_iso_timestamp(client):
    response = client.post('/logAttendance', json={
        'userId': 'EMP-042',
        'timestamp': '2024-03-01T09:15:00Z',
        'isEntering': True
    })

    assert response.status_code == 200
    assert response.get_data(as_text=True) == 'Attendance logged successfully'

    record = AttendanceRecord.query.one()
    assert record.user_id == 'EMP-042'
    assert record.timestamp == datetime(2024, 3, 1, 9, 15)
    assert record.is_entering is True

def test_log_attendance_offset_and_epoch_timestamps(client):
    client.post('/logAttendance', json={
        'userId': 'EMP-042',
        'timestamp': '2024-03-01T14:45:00+05:30',
        'isEntering': False
    })
    client.post('/logAttendance', json={
        'userId': 'EMP-042',
        'timestamp': 1709284500000,
        'isEntering': True
    })

    records = AttendanceRecord.query.order_by(AttendanceRecord.id).all()
    assert [r.timestamp for r in records] == [datetime(2024, 3, 1, 9, 15)] * 2
    assert [r.is_entering for r in records] == [False, True]

def test_log_attendance_without_user_id_still_writes(client):
    """No server-side validation: a record without a user id is stored."""
    response = client.post('/logAttendance', json={
        'timestamp': '2024-03-01T09:15:00Z',
        'isEntering': True
    })

    assert response.status_code == 200
    record = AttendanceRecord.query.one()
    assert record.user_id is None

def test_log_attendance_keeps_field_values_as_sent(client):
    response = client.post('/logAttendance', json={
        'userId': {'id': 7},
        'timestamp': '2024-03-01T09:15:00Z',
        'isEntering': 'true'
    })

    assert response.status_code == 200
    record = AttendanceRecord.query.one()
    assert record.user_id == {'id': 7}
    assert record.is_entering == 'true'
    assert record.to_dict()['isEntering'] == 'true'

def test_log_attendance_bad_timestamp(client):
    for timestamp in ('yesterday', None):
        response = client.post('/logAttendance', json={
            'userId': 'EMP-042',
            'timestamp': timestamp,
            'isEntering': True
        })
        assert response.status_code == 500
        assert json.loads(response.data)['error'].startswith('Error logging attendance: ')

    assert AttendanceRecord.query.count() == 0
