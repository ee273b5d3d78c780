# backend/geotrack/services/location_service.py
"""Last known location service."""
from datetime import datetime
from typing import Optional, Tuple

from geotrack.models.location import LastKnownLocation
from geotrack.utils.validators import Validator

class LocationUnavailableError(Exception):
    """Raised when no location has been reported for a user."""
    pass

class LocationService:
    """Keeps the most recent location fix per user."""

    @staticmethod
    def update_location(user_uid: str, latitude, longitude,
                        accuracy=None) -> Tuple[Optional[LastKnownLocation], Optional[str]]:
        check = Validator.validate_coordinates(latitude, longitude)
        if not check["is_valid"]:
            return None, "; ".join(check["errors"])

        location = LastKnownLocation.query.filter_by(user_uid=user_uid).first()
        if location is None:
            location = LastKnownLocation(user_uid=user_uid)

        location.latitude = float(latitude)
        location.longitude = float(longitude)
        location.accuracy = float(accuracy) if accuracy is not None else None
        location.recorded_at = datetime.utcnow()
        location.save()

        return location, None

    @staticmethod
    def get_last_location(user_uid: str) -> Optional[LastKnownLocation]:
        return LastKnownLocation.query.filter_by(user_uid=user_uid).first()

    @staticmethod
    def require_last_location(user_uid: str) -> LastKnownLocation:
        """Like get_last_location, but raise when nothing was reported."""
        location = LocationService.get_last_location(user_uid)
        if location is None:
            raise LocationUnavailableError(f'No known location for user {user_uid}')
        return location
