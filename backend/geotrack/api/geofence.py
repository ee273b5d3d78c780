# File: backend/geotrack/api/geofence.py
"""Geofence service control and the transition receiver."""
from flask import Blueprint, current_app, g, request
from geotrack.services.geofence_service import GeofenceService
from geotrack.services.transition_service import TransitionService
from geotrack.utils.decorators import active_user_required
from geotrack.utils.geofencing import GeofenceTransition
from geotrack.utils.helpers import success_response, error_response

geofence_bp = Blueprint('geofence', __name__)

@geofence_bp.route('', methods=['GET'])
@active_user_required
def get_status():
    """Geofence definition, active flag and registration state."""
    return success_response(data=GeofenceService.status())

@geofence_bp.route('/start', methods=['POST'])
@active_user_required
def start():
    """Register the geofence and start tracking."""
    try:
        geofence = GeofenceService.start(g.current_user.uid)
        return success_response(
            data={'geofence': geofence.to_dict(), 'is_active': True},
            message="Geofence tracking started"
        )
    except Exception as e:
        return error_response(f"Error starting geofence: {str(e)}", 500)

@geofence_bp.route('/restart', methods=['POST'])
@active_user_required
def restart():
    """Recreate the registration if the geofence was active."""
    try:
        recreated = GeofenceService.restart()
        return success_response(
            data={'recreated': recreated},
            message="Geofence re-registered" if recreated else "Geofence is not active"
        )
    except Exception as e:
        return error_response(f"Error restarting geofence: {str(e)}", 500)

@geofence_bp.route('/stop', methods=['POST'])
@active_user_required
def stop():
    """Stop tracking and clear the active flag."""
    try:
        GeofenceService.stop()
        return success_response(data={'is_active': False}, message="Geofence tracking stopped")
    except Exception as e:
        return error_response(f"Error stopping geofence: {str(e)}", 500)

@geofence_bp.route('/transitions', methods=['POST'])
@active_user_required
def receive_transition():
    """Receive a transition broadcast from the device.

    Handling runs in the background; the response does not wait for it.
    """
    data = request.get_json(silent=True)

    if not data:
        return error_response("Request body must be JSON", 400)

    if data.get('hasError'):
        current_app.logger.warning(
            f"Geofencing error {data.get('errorCode')} reported by {g.current_user.uid}"
        )
        return success_response(data={'accepted': False}, message="Geofencing error ignored")

    transition = GeofenceTransition.parse(data.get('transition'))
    device = {
        'deviceModel': data.get('deviceModel'),
        'osVersion': data.get('osVersion')
    }

    if not TransitionService.receive(g.current_user.uid, transition, device):
        return success_response(
            data={'accepted': False, 'transition': transition.name if transition else None},
            message="Transition ignored"
        )

    return success_response(
        data={'accepted': True, 'transition': transition.name},
        message="Transition accepted"
    ), 202
