# backend/geotrack/utils/swagger.py
"""Swagger/OpenAPI configuration for the application."""
from flask_swagger_ui import get_swaggerui_blueprint

# Swagger UI configuration
SWAGGER_URL = '/api/docs'
API_URL = '/api/swagger.json'

def get_swagger_blueprint():
    """Create and return swagger UI blueprint."""
    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            'app_name': "GeoTrack Attendance API",
            'defaultModelsExpandDepth': -1,
            'docExpansion': 'list',
            'supportedSubmitMethods': ['get', 'post', 'put', 'patch'],
            'validatorUrl': None,
        }
    )
    return swaggerui_blueprint

def _json_body(schema_ref: str) -> dict:
    return {
        "required": True,
        "content": {"application/json": {"schema": {"$ref": f"#/components/schemas/{schema_ref}"}}}
    }

def _envelope(description: str) -> dict:
    return {
        "description": description,
        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Envelope"}}}
    }

def generate_swagger_spec():
    """Generate OpenAPI/Swagger specification."""
    secured = [{"bearerAuth": []}]

    return {
        "openapi": "3.0.0",
        "info": {
            "title": "GeoTrack Attendance API",
            "description": "Geofence attendance tracking: transitions, activity logs and attendance records",
            "version": "1.0.0"
        },
        "components": {
            "securitySchemes": {
                "bearerAuth": {
                    "type": "http",
                    "scheme": "bearer",
                    "bearerFormat": "JWT"
                }
            },
            "schemas": {
                "Envelope": {
                    "type": "object",
                    "properties": {
                        "error": {"type": "boolean"},
                        "message": {"type": "string"},
                        "data": {"type": "object"},
                        "status_code": {"type": "integer"}
                    }
                },
                "Credentials": {
                    "type": "object",
                    "required": ["email", "password"],
                    "properties": {
                        "email": {"type": "string", "format": "email"},
                        "password": {"type": "string", "minLength": 6}
                    }
                },
                "AttendanceInput": {
                    "type": "object",
                    "properties": {
                        "userId": {"type": "string"},
                        "timestamp": {
                            "oneOf": [
                                {"type": "string", "format": "date-time"},
                                {"type": "integer", "description": "Epoch milliseconds"}
                            ]
                        },
                        "isEntering": {"type": "boolean"}
                    }
                },
                "Transition": {
                    "type": "object",
                    "required": ["transition"],
                    "properties": {
                        "transition": {
                            "oneOf": [
                                {"type": "integer", "enum": [1, 2, 4]},
                                {"type": "string", "enum": ["ENTER", "EXIT", "DWELL"]}
                            ]
                        },
                        "deviceModel": {"type": "string"},
                        "osVersion": {"type": "string"},
                        "hasError": {"type": "boolean"},
                        "errorCode": {"type": "integer"}
                    }
                },
                "Location": {
                    "type": "object",
                    "required": ["latitude", "longitude"],
                    "properties": {
                        "latitude": {"type": "number", "minimum": -90, "maximum": 90},
                        "longitude": {"type": "number", "minimum": -180, "maximum": 180},
                        "accuracy": {"type": "number"}
                    }
                },
                "Profile": {
                    "type": "object",
                    "properties": {
                        "customUserId": {"type": "string"},
                        "managerEmail": {"type": "string", "format": "email"}
                    }
                }
            }
        },
        "paths": {
            "/register": {
                "post": {
                    "tags": ["Backend"],
                    "summary": "Create a user account",
                    "requestBody": _json_body("Credentials"),
                    "responses": {
                        "200": {"description": "Created", "content": {"application/json": {"schema": {
                            "type": "object", "properties": {"userId": {"type": "string"}}}}}},
                        "500": {"description": "Error creating user"}
                    }
                }
            },
            "/logAttendance": {
                "post": {
                    "tags": ["Backend"],
                    "summary": "Write one attendance record",
                    "requestBody": _json_body("AttendanceInput"),
                    "responses": {
                        "200": {"description": "Attendance logged successfully"},
                        "500": {"description": "Error logging attendance"}
                    }
                }
            },
            "/api/auth/login": {
                "post": {
                    "tags": ["Auth"],
                    "summary": "Obtain an access token",
                    "requestBody": _json_body("Credentials"),
                    "responses": {"200": _envelope("Logged in"), "401": _envelope("Invalid credentials")}
                }
            },
            "/api/auth/me": {
                "get": {
                    "tags": ["Auth"],
                    "summary": "Current user profile",
                    "security": secured,
                    "responses": {"200": _envelope("Profile")}
                },
                "patch": {
                    "tags": ["Auth"],
                    "summary": "Update profile fields",
                    "security": secured,
                    "requestBody": _json_body("Profile"),
                    "responses": {"200": _envelope("Profile updated"), "400": _envelope("Invalid profile")}
                }
            },
            "/api/geofence": {
                "get": {
                    "tags": ["Geofence"],
                    "summary": "Geofence definition, active flag and registration",
                    "security": secured,
                    "responses": {"200": _envelope("Status")}
                }
            },
            "/api/geofence/start": {
                "post": {
                    "tags": ["Geofence"],
                    "summary": "Register the geofence and mark it active",
                    "security": secured,
                    "responses": {"200": _envelope("Started")}
                }
            },
            "/api/geofence/restart": {
                "post": {
                    "tags": ["Geofence"],
                    "summary": "Re-register the geofence when it was active",
                    "security": secured,
                    "responses": {"200": _envelope("Restarted")}
                }
            },
            "/api/geofence/stop": {
                "post": {
                    "tags": ["Geofence"],
                    "summary": "Stop monitoring and clear the active flag",
                    "security": secured,
                    "responses": {"200": _envelope("Stopped")}
                }
            },
            "/api/geofence/transitions": {
                "post": {
                    "tags": ["Geofence"],
                    "summary": "Deliver a geofence transition",
                    "security": secured,
                    "requestBody": _json_body("Transition"),
                    "responses": {
                        "202": _envelope("Transition accepted for processing"),
                        "200": _envelope("Transition ignored")
                    }
                }
            },
            "/api/locations": {
                "post": {
                    "tags": ["Locations"],
                    "summary": "Store the last known location",
                    "security": secured,
                    "requestBody": _json_body("Location"),
                    "responses": {"200": _envelope("Stored"), "400": _envelope("Invalid location")}
                }
            },
            "/api/locations/last": {
                "get": {
                    "tags": ["Locations"],
                    "summary": "Last known location",
                    "security": secured,
                    "responses": {"200": _envelope("Location"), "404": _envelope("No location")}
                }
            },
            "/api/notifications": {
                "get": {
                    "tags": ["Notifications"],
                    "summary": "List notifications",
                    "security": secured,
                    "parameters": [
                        {"name": "unread_only", "in": "query", "schema": {"type": "boolean"}},
                        {"name": "page", "in": "query", "schema": {"type": "integer"}},
                        {"name": "per_page", "in": "query", "schema": {"type": "integer"}}
                    ],
                    "responses": {"200": _envelope("Notifications")}
                }
            },
            "/api/notifications/{notification_id}/read": {
                "put": {
                    "tags": ["Notifications"],
                    "summary": "Mark a notification read",
                    "security": secured,
                    "parameters": [
                        {"name": "notification_id", "in": "path", "required": True, "schema": {"type": "integer"}}
                    ],
                    "responses": {"200": _envelope("Marked read"), "404": _envelope("Not found")}
                }
            }
        }
    }
