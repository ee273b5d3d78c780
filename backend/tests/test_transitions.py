"""Test the geofence transition receiver, handler and activity logger."""
import json
import logging
import pytest
from geotrack import dispatcher
from geotrack.models import ActivityLog, AttendanceRecord, BackendServiceLog, BaseModel, Notification
from geotrack.models.activity import ActivityType
from geotrack.services.activity_service import ActivityService
from geotrack.services.transition_service import TransitionService
from geotrack.utils.geofencing import GeofenceTransition

DEVICE = {'deviceModel': 'Pixel 7', 'osVersion': '14'}

def post_transition(client, headers, transition, **extra):
    body = {'transition': transition, **DEVICE, **extra}
    return client.post('/api/geofence/transitions', headers=headers, json=body)

def record_counts():
    return (
        ActivityLog.query.count(),
        BackendServiceLog.query.count(),
        AttendanceRecord.query.count(),
        Notification.query.count()
    )

def test_enter_writes_one_event_per_collection(client, auth_headers, located_user):
    response = post_transition(client, auth_headers, GeofenceTransition.ENTER.value)

    assert response.status_code == 202
    data = json.loads(response.data)
    assert data['data'] == {'accepted': True, 'transition': 'ENTER'}

    assert ActivityLog.query.count() == 1
    assert BackendServiceLog.activities().count() == 1
    assert AttendanceRecord.query.count() == 1

    event = ActivityLog.query.one().to_dict()
    assert event['userId'] == 'EMP-042'
    assert event['managerEmail'] == 'boss@example.com'
    assert event['activity'] == 'ENTER'
    assert event['description'] == 'User entered the geofence'
    assert event['latitude'] == pytest.approx(17.7321)
    assert event['longitude'] == pytest.approx(83.3144)
    assert event['deviceModel'] == 'Pixel 7'
    assert event['osVersion'] == '14'

    logged = BackendServiceLog.activities().one().to_dict()
    for key in ('userId', 'managerEmail', 'activity', 'description', 'latitude', 'longitude'):
        assert logged[key] == event[key]

    attendance = AttendanceRecord.query.one()
    assert attendance.user_id == 'EMP-042'
    assert attendance.is_entering is True

def test_enter_notifications(client, auth_headers, located_user):
    post_transition(client, auth_headers, 'ENTER')

    messages = [n.message for n in Notification.query.order_by(Notification.id).all()]
    assert messages == [
        'You have entered the geofence area.',
        'Activity logged: ENTER'
    ]

def test_exit_records_not_entering(client, auth_headers, located_user):
    response = post_transition(client, auth_headers, 'exit')

    assert response.status_code == 202
    assert ActivityLog.query.one().activity == 'EXIT'
    assert ActivityLog.query.one().description == 'User exited the geofence'
    assert AttendanceRecord.query.one().is_entering is False
    assert Notification.query.order_by(Notification.id).first().message == \
        'You have exited the geofence area.'

@pytest.mark.parametrize('transition, event, description', [
    ('ENTER', 'ENTER', 'User entered the geofence'),
    ('EXIT', 'EXIT', 'User exited the geofence'),
])
def test_transition_writes_one_service_event(client, auth_headers, located_user,
                                             transition, event, description):
    post_transition(client, auth_headers, transition)

    assert BackendServiceLog.service_events().count() == 1
    assert BackendServiceLog.activities().count() == 1

    service_event = BackendServiceLog.service_events().one().to_dict()
    assert service_event['userId'] == located_user.uid
    assert service_event['event'] == event
    assert service_event['description'] == description
    assert service_event['latitude'] == pytest.approx(17.7321)
    assert service_event['longitude'] == pytest.approx(83.3144)
    assert 'managerEmail' not in service_event

def test_service_event_failure_does_not_stop_activity_logging(app, located_user, monkeypatch, caplog):
    def broken_save(self):
        if self.kind == BackendServiceLog.SERVICE_EVENT:
            raise RuntimeError('write failed')
        return BaseModel.save(self)

    monkeypatch.setattr(BackendServiceLog, 'save', broken_save)

    with caplog.at_level(logging.ERROR):
        TransitionService.on_geofence_transition(located_user.uid, GeofenceTransition.ENTER, DEVICE)

    assert 'Error logging backend service event: write failed' in caplog.text
    assert BackendServiceLog.service_events().count() == 0
    assert ActivityLog.query.count() == 1
    assert AttendanceRecord.query.count() == 1

@pytest.mark.parametrize('transition', [
    GeofenceTransition.DWELL.value, 0, 3, 99, 'DWELL', 'LEAVE', None, True
])
def test_other_transitions_write_nothing(client, auth_headers, located_user, transition):
    response = post_transition(client, auth_headers, transition)

    assert response.status_code == 200
    assert json.loads(response.data)['data']['accepted'] is False
    assert record_counts() == (0, 0, 0, 0)

def test_geofencing_error_is_dropped(client, auth_headers, located_user):
    response = post_transition(client, auth_headers, 'ENTER', hasError=True, errorCode=1000)

    assert response.status_code == 200
    assert record_counts() == (0, 0, 0, 0)

def test_duplicate_broadcasts_duplicate_records(client, auth_headers, located_user):
    post_transition(client, auth_headers, 'ENTER')
    post_transition(client, auth_headers, 'ENTER')

    assert ActivityLog.query.count() == 2
    assert BackendServiceLog.activities().count() == 2
    assert BackendServiceLog.service_events().count() == 2
    assert AttendanceRecord.query.count() == 2

def test_missing_location_is_logged_not_raised(client, auth_headers, sample_user, caplog):
    """Failures stop at the background task and are only logged."""
    with caplog.at_level(logging.ERROR):
        response = post_transition(client, auth_headers, 'ENTER')

    assert response.status_code == 202
    assert ActivityLog.query.count() == 0
    assert BackendServiceLog.query.count() == 0
    assert AttendanceRecord.query.count() == 0
    # The transition notification is shown before the lookup fails
    assert Notification.query.count() == 1
    assert 'No known location' in caplog.text

def test_profile_defaults(app, located_user):
    located_user.custom_user_id = None
    located_user.manager_email = None
    located_user.save()

    data = ActivityService.log_activity(located_user.uid, ActivityType.EXIT,
                                        'User exited the geofence', True)

    assert data['user_id'] == ''
    assert data['manager_email'] == app.config['DEFAULT_MANAGER_EMAIL']
    assert data['device_model'] is None
    assert AttendanceRecord.query.one().user_id == ''

def test_log_activity_without_attendance(app, located_user):
    ActivityService.log_activity(located_user.uid, ActivityType.ENTER,
                                 'User entered the geofence', False)

    assert ActivityLog.query.count() == 1
    assert BackendServiceLog.activities().count() == 1
    assert AttendanceRecord.query.count() == 0

def test_log_activity_unknown_user(app):
    assert ActivityService.log_activity('missing-uid', ActivityType.ENTER, 'x', True) is None
    assert ActivityLog.query.count() == 0

def test_receive_dispatches_only_handled(app, located_user, monkeypatch):
    submitted = []
    monkeypatch.setattr(dispatcher, 'submit', lambda fn, *args: submitted.append(args))

    assert TransitionService.receive(located_user.uid, GeofenceTransition.EXIT, DEVICE) is True
    assert TransitionService.receive(located_user.uid, GeofenceTransition.DWELL, DEVICE) is False
    assert TransitionService.receive(located_user.uid, None, DEVICE) is False

    assert submitted == [(located_user.uid, GeofenceTransition.EXIT, DEVICE)]
    assert record_counts() == (0, 0, 0, 0)

def test_transition_requires_token(client):
    response = client.post('/api/geofence/transitions', json={'transition': 1})
    assert response.status_code == 401
