# backend/geotrack/services/activity_service.py
"""Activity and attendance logging for geofence transitions."""
from datetime import datetime
from typing import Dict, Optional

from flask import current_app

from geotrack.models.activity import ActivityLog, ActivityType, BackendServiceLog
from geotrack.models.attendance import AttendanceRecord
from geotrack.models.user import User
from geotrack.services.location_service import LocationService
from geotrack.services.notification_service import NotificationService

class ActivityService:
    """Writes the records that make up one handled transition.

    Writes are independent: each one is committed on its own and nothing
    is rolled back when a later write fails.
    """

    @staticmethod
    def build_event(user: User, activity: ActivityType, description: str,
                    device: Optional[Dict] = None) -> Dict:
        """Assemble an activity event from the profile and last known location."""
        device = device or {}
        position = LocationService.require_last_location(user.uid)

        return {
            'user_id': user.custom_user_id or '',
            'manager_email': user.manager_email or current_app.config['DEFAULT_MANAGER_EMAIL'],
            'timestamp': datetime.utcnow(),
            'activity': activity.value,
            'description': description,
            'latitude': position.latitude,
            'longitude': position.longitude,
            'device_model': device.get('deviceModel'),
            'os_version': device.get('osVersion')
        }

    @staticmethod
    def log_activity(user_uid: str, activity: ActivityType, description: str,
                     log_attendance: bool, device: Optional[Dict] = None) -> Optional[Dict]:
        """Record a transition for the user.

        Returns the event data, or None when the user no longer exists.
        Lookup and write failures propagate to the caller.
        """
        user = User.get_by_uid(user_uid)
        if user is None:
            current_app.logger.warning(f'Activity {activity.value} dropped: user {user_uid} not found')
            return None

        data = ActivityService.build_event(user, activity, description, device)

        ActivityLog(**data).save()
        current_app.logger.debug(f'Activity log added: {data}')

        BackendServiceLog(**data).save()
        current_app.logger.debug(f'Backend service log added: {data}')

        if log_attendance:
            AttendanceRecord(
                user_id=data['user_id'],
                timestamp=datetime.utcnow(),
                is_entering=activity == ActivityType.ENTER
            ).save()
            current_app.logger.debug(f"Attendance log added for user: {data['user_id']}")

        NotificationService.show_notification(
            user_uid, 'Geofence Alert', f'Activity logged: {activity.value}'
        )

        return data
