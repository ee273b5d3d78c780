"""Activity events written on each geofence transition."""
from datetime import datetime
from enum import Enum
from geotrack import db
from geotrack.models.base import BaseModel

class ActivityType(Enum):
    """Kinds of activity recorded for a transition."""
    ENTER = 'ENTER'
    EXIT = 'EXIT'

class ActivityEventMixin:
    """Columns shared by every collection an activity event is written to."""

    user_id = db.Column(db.String(100), nullable=True, index=True)  # profile customUserId, or account uid
    manager_email = db.Column(db.String(255), nullable=True)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    activity = db.Column(db.String(10), nullable=False)
    description = db.Column(db.String(255), nullable=True)
    latitude = db.Column(db.Float, nullable=True)
    longitude = db.Column(db.Float, nullable=True)
    device_model = db.Column(db.String(100), nullable=True)
    os_version = db.Column(db.String(50), nullable=True)

    def to_dict(self):
        """Serialize with the field names the mobile client uses."""
        return {
            'id': self.id,
            'userId': self.user_id,
            'managerEmail': self.manager_email,
            'timestamp': self.timestamp.isoformat() if self.timestamp else None,
            'activity': self.activity,
            'description': self.description,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'deviceModel': self.device_model,
            'osVersion': self.os_version
        }

class ActivityLog(ActivityEventMixin, BaseModel):
    """Entry in the activity_logs collection."""

    __tablename__ = 'activity_logs'

class BackendServiceLog(ActivityEventMixin, BaseModel):
    """Entry in the backend_service_logs collection.

    Two kinds of rows share this table. ``activity`` rows carry the full
    activity event. ``service_event`` rows record the bare transition
    under the account uid; their event name is kept in ``activity`` and
    the profile and device columns stay empty.
    """

    __tablename__ = 'backend_service_logs'

    ACTIVITY = 'activity'
    SERVICE_EVENT = 'service_event'

    kind = db.Column(db.String(20), nullable=False, default=ACTIVITY, index=True)

    @classmethod
    def activities(cls):
        return cls.query.filter_by(kind=cls.ACTIVITY)

    @classmethod
    def service_events(cls):
        return cls.query.filter_by(kind=cls.SERVICE_EVENT)

    def to_dict(self):
        if self.kind != self.SERVICE_EVENT:
            return super().to_dict()

        return {
            'id': self.id,
            'userId': self.user_id,
            'event': self.activity,
            'description': self.description,
            'timestamp': self.timestamp.isoformat() if self.timestamp else None,
            'latitude': self.latitude,
            'longitude': self.longitude
        }
