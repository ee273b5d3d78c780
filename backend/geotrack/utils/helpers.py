"""Helper functions for the application."""
from datetime import datetime, timezone
from typing import Any, Union

from flask import jsonify

def handle_error(error, status_code: int):
    """Handle application errors with consistent format."""
    return jsonify({
        'error': True,
        'message': str(error),
        'status_code': status_code
    }), status_code

def success_response(data: Any = None, message: str = "Success"):
    """Return consistent success response."""
    response = {
        'error': False,
        'message': message
    }

    if data is not None:
        response['data'] = data

    return jsonify(response)

def error_response(message: str, status_code: int = 400):
    """Return consistent error response."""
    return jsonify({
        'error': True,
        'message': message,
        'status_code': status_code
    }), status_code

def parse_timestamp(value: Union[str, int, float, None]) -> datetime:
    """Convert an ISO-8601 string or epoch milliseconds to naive UTC.

    Raises ValueError when the value cannot be read as a point in time.
    """
    if value is None or isinstance(value, bool):
        raise ValueError('Invalid time value')

    if isinstance(value, (int, float)):
        moment = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    else:
        text = str(value).strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        try:
            moment = datetime.fromisoformat(text)
        except ValueError:
            raise ValueError(f'Invalid time value: {value}')

    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment
