# backend/geotrack/services/transition_service.py
"""Geofence transition handling."""
from typing import Dict, Optional

from flask import current_app

from geotrack import dispatcher
from geotrack.models.activity import ActivityType
from geotrack.services.activity_service import ActivityService
from geotrack.services.log_service import LogService
from geotrack.services.notification_service import NotificationService
from geotrack.utils.geofencing import GeofenceTransition

# transition -> (notification text, activity, activity description)
TRANSITION_ACTIONS = {
    GeofenceTransition.ENTER: (
        'You have entered the geofence area.', ActivityType.ENTER, 'User entered the geofence'
    ),
    GeofenceTransition.EXIT: (
        'You have exited the geofence area.', ActivityType.EXIT, 'User exited the geofence'
    ),
}

class TransitionService:
    """Routes delivered transitions to notifications and activity logging."""

    @staticmethod
    def is_handled(transition: Optional[GeofenceTransition]) -> bool:
        return transition in TRANSITION_ACTIONS

    @staticmethod
    def receive(user_uid: str, transition: Optional[GeofenceTransition],
                device: Optional[Dict] = None) -> bool:
        """Hand a delivered transition to the background and return at once.

        Returns False when the transition is not one that gets handled.
        """
        if not TransitionService.is_handled(transition):
            current_app.logger.info(f'Ignoring geofence transition {transition!r} for {user_uid}')
            return False

        dispatcher.submit(TransitionService.on_geofence_transition, user_uid, transition, device)
        return True

    @staticmethod
    def on_geofence_transition(user_uid: str, transition: GeofenceTransition,
                               device: Optional[Dict] = None) -> None:
        action = TRANSITION_ACTIONS.get(transition)
        if action is None:
            return

        message, activity, description = action
        NotificationService.show_notification(user_uid, 'Geofence Alert', message)
        LogService.log_backend_service_event(user_uid, activity.value, description)
        ActivityService.log_activity(user_uid, activity, description, True, device)
        current_app.logger.debug(f'{transition.name} transition handled for {user_uid}')
