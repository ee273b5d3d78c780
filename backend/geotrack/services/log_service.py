"""Service events written to backend_service_logs."""
from datetime import datetime
from typing import Optional

from flask import current_app

from geotrack import db
from geotrack.models.activity import BackendServiceLog
from geotrack.models.user import User
from geotrack.services.location_service import LocationService

class LogService:
    @staticmethod
    def log_backend_service_event(user_uid: str, event: str, description: str) -> Optional[BackendServiceLog]:
        """Record a transition under the account uid with the last known position.

        Runs independently of activity logging: a failure here is logged and
        does not stop the records written after it.
        """
        if User.get_by_uid(user_uid) is None:
            current_app.logger.warning(f'Service event {event} dropped: user {user_uid} not found')
            return None

        try:
            position = LocationService.require_last_location(user_uid)
            entry = BackendServiceLog(
                kind=BackendServiceLog.SERVICE_EVENT,
                user_id=user_uid,
                activity=event,
                description=description,
                timestamp=datetime.utcnow(),
                latitude=position.latitude,
                longitude=position.longitude
            ).save()
            current_app.logger.debug(f'Backend service log added: {entry.to_dict()}')
            return entry

        except Exception as e:
            db.session.rollback()
            current_app.logger.error(f'Error logging backend service event: {e}')
            return None
