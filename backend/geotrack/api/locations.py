# File: backend/geotrack/api/locations.py
"""Location updates reported by the device."""
from flask import Blueprint, g, request
from geotrack.services.location_service import LocationService
from geotrack.utils.decorators import active_user_required
from geotrack.utils.helpers import success_response, error_response

locations_bp = Blueprint('locations', __name__)

@locations_bp.route('', methods=['POST'])
@active_user_required
def update_location():
    """Store the caller's last known location."""
    try:
        data = request.get_json(silent=True)

        if not data:
            return error_response("Request body must be JSON", 400)

        for field in ('latitude', 'longitude'):
            if field not in data:
                return error_response(f"Missing required field: {field}", 400)

        location, error = LocationService.update_location(
            g.current_user.uid,
            data['latitude'],
            data['longitude'],
            data.get('accuracy')
        )
        if error:
            return error_response(error, 400)

        return success_response(data=location.to_dict(), message="Location updated")

    except Exception as e:
        return error_response(f"Error updating location: {str(e)}", 500)

@locations_bp.route('/last', methods=['GET'])
@active_user_required
def last_location():
    """Return the caller's last known location."""
    location = LocationService.get_last_location(g.current_user.uid)
    if location is None:
        return error_response("No known location", 404)

    return success_response(data=location.to_dict())
