"""Validation utilities for the application."""
import re
from typing import Any, Dict

class Validator:
    """Validation helper class."""

    @staticmethod
    def validate_email(email: str) -> bool:
        """Validate email format."""
        if not email or not isinstance(email, str):
            return False
        pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
        return bool(re.match(pattern, email))

    @staticmethod
    def validate_password(password: str) -> Dict[str, Any]:
        """Validate password strength."""
        errors = []

        if not password or not isinstance(password, str):
            errors.append("The password must be a string with at least 6 characters.")
        elif len(password) < 6:
            errors.append("The password must be a string with at least 6 characters.")

        return {
            "is_valid": len(errors) == 0,
            "errors": errors
        }

    @staticmethod
    def validate_coordinates(latitude: Any, longitude: Any) -> Dict[str, Any]:
        """Validate a latitude/longitude pair."""
        errors = []

        for name, value, bound in (('latitude', latitude, 90), ('longitude', longitude, 180)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                errors.append(f"{name.title()} must be a number")
            elif not -bound <= value <= bound:
                errors.append(f"{name.title()} must be between {-bound} and {bound}")

        return {
            "is_valid": len(errors) == 0,
            "errors": errors
        }
