"""Models package with all models."""
from .base import BaseModel
from .user import User
from .activity import ActivityType, ActivityLog, BackendServiceLog
from .attendance import AttendanceRecord
from .notification import Notification
from .location import LastKnownLocation

__all__ = [
    'BaseModel', 'User',
    'ActivityType', 'ActivityLog', 'BackendServiceLog',
    'AttendanceRecord', 'Notification', 'LastKnownLocation'
]
