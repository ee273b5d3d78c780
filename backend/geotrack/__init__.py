"""GeoTrack Attendance - Application Factory."""
import logging
import os
from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from geotrack.utils.background import BackgroundDispatcher
from geotrack.utils.geofencing import GeofencingClient
from geotrack.utils.preferences import PreferenceStore

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()
jwt = JWTManager()
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["2000 per day", "500 per hour"]
)
preferences = PreferenceStore()
geofencing = GeofencingClient()
dispatcher = BackgroundDispatcher()

def create_app(config_name: str = None) -> Flask:
    """Application factory pattern."""
    app = Flask(__name__)

    # Load configuration
    from geotrack.config import get_config
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    limiter.init_app(app)
    preferences.init_app(app)
    geofencing.init_app(app)
    dispatcher.init_app(app)

    # Configure CORS
    CORS(app, origins=app.config.get('CORS_ORIGINS', ["*"]))

    # Setup logging
    setup_logging(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Setup database
    setup_database(app)

    # Add CLI commands
    register_commands(app)

    # Re-register the geofence if it was active before the restart
    restore_geofence(app)

    @app.route('/health')
    def health_check():
        return jsonify({
            'status': 'healthy',
            'service': 'GeoTrack Attendance',
            'version': '1.0.0'
        })

    return app

def register_blueprints(app: Flask) -> None:
    """Register all application blueprints."""
    from geotrack.api.backend import backend_bp
    from geotrack.api.auth import auth_bp
    from geotrack.api.geofence import geofence_bp
    from geotrack.api.locations import locations_bp
    from geotrack.api.notifications import notifications_bp
    from geotrack.utils.swagger import SWAGGER_URL, get_swagger_blueprint, generate_swagger_spec

    # Pass-through endpoints used by the mobile client
    app.register_blueprint(backend_bp)

    # Device API
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(geofence_bp, url_prefix='/api/geofence')
    app.register_blueprint(locations_bp, url_prefix='/api/locations')
    app.register_blueprint(notifications_bp, url_prefix='/api/notifications')

    # Swagger UI
    @app.route('/api/swagger.json')
    def swagger_spec():
        """Serve Swagger/OpenAPI specification."""
        return jsonify(generate_swagger_spec())

    app.register_blueprint(get_swagger_blueprint(), url_prefix=SWAGGER_URL)

def register_error_handlers(app: Flask) -> None:
    """Register error handlers."""
    from geotrack.utils.helpers import handle_error
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        return handle_error(error, 500)

    @app.errorhandler(HTTPException)
    def handle_exception(e):
        return handle_error(e.description, e.code)

    # JWT error handlers
    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return handle_error('Token has expired', 401)

    @jwt.invalid_token_loader
    def invalid_token_callback(error):
        return handle_error('Invalid token', 401)

    @jwt.unauthorized_loader
    def missing_token_callback(error):
        return handle_error('Authorization token required', 401)

def setup_logging(app: Flask) -> None:
    """Setup application logging."""
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    if not app.debug and not app.testing:
        if not os.path.exists('logs'):
            os.mkdir('logs')

        file_handler = logging.FileHandler(app.config.get('LOG_FILE', 'logs/app.log'))
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

        app.logger.info('GeoTrack Attendance startup')

def setup_database(app: Flask) -> None:
    """Import models so their tables are registered with SQLAlchemy."""
    with app.app_context():
        from geotrack.models import (
            User, ActivityLog, BackendServiceLog,
            AttendanceRecord, Notification, LastKnownLocation
        )

def restore_geofence(app: Flask) -> None:
    """Recreate the geofence registration when the active flag is set."""
    if not app.config.get('GEOFENCE_RESTORE_ON_STARTUP'):
        return

    from geotrack.services.geofence_service import GeofenceService

    with app.app_context():
        try:
            if GeofenceService.restart():
                app.logger.info('Geofence registration restored on startup')
        except Exception as e:
            app.logger.error(f'Could not restore geofence registration: {e}')

def register_commands(app: Flask) -> None:
    """Register CLI commands."""
    import click

    @app.cli.command('seed-db')
    def seed_db():
        """Seed database with a demo user."""
        from geotrack.services.auth_service import AuthService

        user, error = AuthService.create_user('demo@geotrack.dev', 'demo123456')
        if error:
            click.echo(f'Error seeding database: {error}')
            return

        AuthService.update_profile(user, {
            'customUserId': 'EMP-0001',
            'managerEmail': app.config['DEFAULT_MANAGER_EMAIL']
        })
        click.echo(f'Created demo user: demo@geotrack.dev / demo123456 (uid {user.uid})')

    @app.cli.command('create-user')
    def create_user():
        """Create a user account."""
        email = click.prompt('Email')
        password = click.prompt('Password', hide_input=True)

        from geotrack.services.auth_service import AuthService

        user, error = AuthService.create_user(email, password)
        if error:
            click.echo(f'Error creating user: {error}')
            return

        click.echo(f'User created: {email} (uid {user.uid})')

    @app.cli.command('geofence-status')
    def geofence_status():
        """Show the geofence definition and active flag."""
        from geotrack.services.geofence_service import GeofenceService

        status = GeofenceService.status()
        click.echo(f"Geofence {status['geofence']['request_id']}: "
                   f"active={status['is_active']} registered={status['is_registered']}")
