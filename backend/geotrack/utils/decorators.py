# backend/geotrack/utils/decorators.py
"""Custom decorators for authorization."""
from functools import wraps
from flask import g
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from geotrack.models.user import User
from geotrack.utils.helpers import error_response

def active_user_required(f):
    """Require a valid token for an existing, active user.

    The user is stored on ``g.current_user``.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        verify_jwt_in_request()
        user = User.get_by_uid(get_jwt_identity())

        if not user:
            return error_response("User not found", 404)

        if not user.is_active:
            return error_response("Account is deactivated", 403)

        g.current_user = user
        return f(*args, **kwargs)
    return decorated_function
