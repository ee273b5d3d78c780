"""Authentication service for user management."""
from datetime import datetime
from typing import Dict, Optional, Tuple

from flask_jwt_extended import create_access_token

from geotrack import db
from geotrack.models.user import User
from geotrack.utils.validators import Validator

class AuthService:
    @staticmethod
    def create_user(email: str, password: str) -> Tuple[Optional[User], Optional[str]]:
        """Create an account and return it with its generated uid."""
        if not Validator.validate_email(email):
            return None, "The email address is improperly formatted."

        password_check = Validator.validate_password(password)
        if not password_check["is_valid"]:
            return None, password_check["errors"][0]

        email = email.lower().strip()
        if User.query.filter_by(email=email).first():
            return None, "The email address is already in use by another account."

        user = User(email=email)
        user.set_password(password)
        user.save()

        return user, None

    @staticmethod
    def login(email: str, password: str) -> Tuple[Optional[Dict], Optional[str]]:
        """Authenticate user and return an access token."""
        if not email or not password:
            return None, "Email and password are required"

        if not Validator.validate_email(email):
            return None, "Invalid email format"

        user = User.query.filter_by(email=email.lower().strip()).first()

        if not user or not user.check_password(password):
            return None, "Invalid email or password"

        if not user.is_active:
            return None, "Account is deactivated"

        user.last_login = datetime.utcnow()
        user.save()

        return {
            "access_token": create_access_token(identity=user.uid),
            "user": user.to_dict()
        }, None

    @staticmethod
    def update_profile(user: User, data: Dict) -> Tuple[Optional[Dict], Optional[str]]:
        """Update the profile fields read when activity is logged."""
        if 'managerEmail' in data and data['managerEmail'] is not None:
            if not Validator.validate_email(data['managerEmail']):
                return None, "Invalid manager email format"

        if 'customUserId' in data:
            user.custom_user_id = data['customUserId']
        if 'managerEmail' in data:
            user.manager_email = data['managerEmail']

        try:
            user.save()
        except Exception as e:
            db.session.rollback()
            return None, f"Profile update failed: {str(e)}"

        return user.to_dict(), None
