# backend/geotrack/services/geofence_service.py
"""Geofence registration service."""
from typing import Dict, Optional

from flask import current_app

from geotrack import geofencing, preferences
from geotrack.services.notification_service import NotificationService
from geotrack.utils.geofencing import Geofence

GEOFENCE_ACTIVE_KEY = 'isGeofenceActive'

class GeofenceService:
    """Owns the monitored geofence and the flag that survives restarts."""

    @staticmethod
    def build_geofence() -> Geofence:
        """Create the geofence described by the configuration."""
        config = current_app.config
        return Geofence(
            request_id=config['GEOFENCE_REQUEST_ID'],
            latitude=config['GEOFENCE_LATITUDE'],
            longitude=config['GEOFENCE_LONGITUDE'],
            radius_meters=config['GEOFENCE_RADIUS_METERS']
        )

    @staticmethod
    def is_active() -> bool:
        return preferences.get_boolean(GEOFENCE_ACTIVE_KEY, False)

    @staticmethod
    def create_geofence() -> Geofence:
        """Register the geofence and mark it active once registered."""
        geofence = GeofenceService.build_geofence()
        geofencing.add_geofences([geofence])
        preferences.put_boolean(GEOFENCE_ACTIVE_KEY, True)
        current_app.logger.info(
            f'Geofence {geofence.request_id} registered at '
            f'({geofence.latitude}, {geofence.longitude}) r={geofence.radius_meters}m'
        )
        return geofence

    @staticmethod
    def start(user_uid: Optional[str] = None) -> Geofence:
        """Start tracking: register the geofence and post the service notification."""
        geofence = GeofenceService.create_geofence()
        if user_uid:
            NotificationService.show_notification(user_uid, 'Geofence Service', 'Tracking your location')
        return geofence

    @staticmethod
    def restart() -> bool:
        """Recreate the registration when the geofence was active."""
        if not GeofenceService.is_active():
            return False
        GeofenceService.create_geofence()
        return True

    @staticmethod
    def stop() -> None:
        """Stop tracking and clear the active flag."""
        request_id = current_app.config['GEOFENCE_REQUEST_ID']
        geofencing.remove_geofences([request_id])
        preferences.put_boolean(GEOFENCE_ACTIVE_KEY, False)
        current_app.logger.info(f'Geofence {request_id} stopped')

    @staticmethod
    def status() -> Dict:
        geofence = GeofenceService.build_geofence()
        return {
            'geofence': geofence.to_dict(),
            'is_active': GeofenceService.is_active(),
            'is_registered': geofencing.get(geofence.request_id) is not None
        }
