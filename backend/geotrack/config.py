"""Configuration module for GeoTrack Attendance."""
import os
from datetime import timedelta

class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = False

    # JWT Configuration
    JWT_SECRET_KEY = os.environ.get('JWT_SECRET_KEY') or 'jwt-secret-key-change-in-production'
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=30)
    JWT_ALGORITHM = 'HS256'

    # CORS
    CORS_ORIGINS = ["*"]

    # Rate Limiting
    RATELIMIT_STORAGE_URI = os.environ.get('REDIS_URL') or 'memory://'

    # Local key-value storage for the geofence flag
    PREFERENCES_STORAGE_URL = os.environ.get('PREFERENCES_STORAGE_URL') or 'file://instance/geofence_prefs.json'
    PREFERENCES_NAMESPACE = 'GeofencePrefs'

    # Geofence
    GEOFENCE_REQUEST_ID = 'geoFenceId'
    GEOFENCE_LATITUDE = float(os.environ.get('GEOFENCE_LATITUDE', 17.732036))
    GEOFENCE_LONGITUDE = float(os.environ.get('GEOFENCE_LONGITUDE', 83.314367))
    GEOFENCE_RADIUS_METERS = float(os.environ.get('GEOFENCE_RADIUS_METERS', 100))
    GEOFENCE_RESTORE_ON_STARTUP = True

    # Activity logging
    DEFAULT_MANAGER_EMAIL = os.environ.get('DEFAULT_MANAGER_EMAIL') or 'manager@geotrack.dev'
    TRANSITION_WORKERS = int(os.environ.get('TRANSITION_WORKERS', 4))
    TRANSITION_DISPATCH_INLINE = False

    # Pagination
    DEFAULT_PAGE_SIZE = 20
    MAX_PAGE_SIZE = 100

    # Logging
    LOG_LEVEL = 'INFO'
    LOG_FILE = 'logs/app.log'

class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    TESTING = False
    SQLALCHEMY_DATABASE_URI = os.environ.get('DEV_DATABASE_URL') or \
        'sqlite:///geotrack_dev.db'
    LOG_LEVEL = 'DEBUG'

class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    TESTING = False
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL')

    # Redis (required in production)
    REDIS_URL = os.environ.get('REDIS_URL')
    PREFERENCES_STORAGE_URL = os.environ.get('PREFERENCES_STORAGE_URL') or REDIS_URL

    # Stricter limits
    RATELIMIT_DEFAULT = "1000 per day, 200 per hour"

class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(minutes=5)
    RATELIMIT_ENABLED = False
    PREFERENCES_STORAGE_URL = 'memory://'
    GEOFENCE_RESTORE_ON_STARTUP = False
    TRANSITION_DISPATCH_INLINE = True
    LOG_LEVEL = 'WARNING'

# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name."""
    return config.get(config_name or os.environ.get('FLASK_ENV', 'default'), config['default'])
