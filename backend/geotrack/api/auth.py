# File: backend/geotrack/api/auth.py
"""Authentication API for device sessions and the user profile."""
from flask import Blueprint, g, request
from geotrack import limiter
from geotrack.services.auth_service import AuthService
from geotrack.utils.decorators import active_user_required
from geotrack.utils.helpers import success_response, error_response

auth_bp = Blueprint("auth", __name__)

@auth_bp.route("/health", methods=["GET"])
def health_check():
    """Health check endpoint."""
    return success_response(message="Auth service is running")

@auth_bp.route("/login", methods=["POST"])
@limiter.limit("5 per minute")
def login():
    """Exchange email and password for an access token."""
    try:
        data = request.get_json(silent=True)

        if not data:
            return error_response("Request body must be JSON", 400)

        email = (data.get("email") or "").strip()
        password = data.get("password") or ""

        if not email or not password:
            return error_response("Email and password are required", 400)

        result, error = AuthService.login(email, password)

        if error:
            return error_response(error, 401)

        return success_response(
            data=result,
            message="Login successful"
        )

    except Exception as e:
        return error_response(f"Login error: {str(e)}", 500)

@auth_bp.route("/me", methods=["GET"])
@active_user_required
def get_current_user():
    """Get current user profile."""
    return success_response(data=g.current_user.to_dict())

@auth_bp.route("/me", methods=["PATCH"])
@active_user_required
def update_current_user():
    """Update customUserId and managerEmail."""
    data = request.get_json(silent=True)

    if not data:
        return error_response("Request body must be JSON", 400)

    profile, error = AuthService.update_profile(g.current_user, data)
    if error:
        return error_response(error, 400)

    return success_response(data=profile, message="Profile updated")
