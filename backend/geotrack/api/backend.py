# File: backend/geotrack/api/backend.py
"""Pass-through endpoints for user registration and attendance logging.

These keep the plain response shapes the mobile client expects instead
of the JSON envelope used under /api.
"""
from flask import Blueprint, current_app, jsonify, request
from geotrack import db, limiter
from geotrack.services.attendance_service import AttendanceService
from geotrack.services.auth_service import AuthService

backend_bp = Blueprint('backend', __name__)

@backend_bp.route('/register', methods=['POST'])
@limiter.limit("10 per minute")
def register():
    """Register new user."""
    data = request.get_json(silent=True) or {}
    try:
        user, error = AuthService.create_user(data.get('email'), data.get('password'))
        if error:
            raise ValueError(error)
        return jsonify({'userId': user.uid}), 200
    except Exception as e:
        db.session.rollback()
        current_app.logger.warning(f'Error creating user: {e}')
        return jsonify({'error': f'Error creating user: {str(e)}'}), 500

@backend_bp.route('/logAttendance', methods=['POST'])
def log_attendance():
    """Log attendance."""
    data = request.get_json(silent=True) or {}
    try:
        AttendanceService.log_attendance(
            data.get('userId'),
            data.get('timestamp'),
            data.get('isEntering')
        )
        return 'Attendance logged successfully', 200
    except Exception as e:
        db.session.rollback()
        current_app.logger.warning(f'Error logging attendance: {e}')
        return jsonify({'error': f'Error logging attendance: {str(e)}'}), 500
