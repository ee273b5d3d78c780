"""User model for authentication and the user profile document."""
import secrets
from werkzeug.security import generate_password_hash, check_password_hash
from geotrack import db
from geotrack.models.base import BaseModel

class User(BaseModel):
    """Account plus the profile fields read when logging activity."""

    __tablename__ = 'users'

    # Public identifier handed back by /register and used as token identity
    uid = db.Column(db.String(32), unique=True, nullable=False, index=True,
                    default=lambda: User.generate_uid())

    # Basic Information
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

    # Profile
    custom_user_id = db.Column(db.String(100), nullable=True)
    manager_email = db.Column(db.String(255), nullable=True)

    # Security and Authentication
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    last_login = db.Column(db.DateTime, nullable=True)

    @staticmethod
    def generate_uid() -> str:
        """Generate an opaque 28 character identifier."""
        return secrets.token_urlsafe(21)

    @classmethod
    def get_by_uid(cls, uid: str) -> 'User':
        if not uid:
            return None
        return cls.query.filter_by(uid=uid).first()

    def set_password(self, password: str) -> None:
        """Set user password with hashing."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        """Check if provided password matches user's password."""
        return check_password_hash(self.password_hash, password)

    def to_dict(self, exclude: list = None) -> dict:
        """Convert to dictionary excluding sensitive data."""
        default_exclude = ['password_hash']
        exclude = (exclude or []) + default_exclude

        result = super().to_dict(exclude=exclude)
        result['customUserId'] = result.pop('custom_user_id', None)
        result['managerEmail'] = result.pop('manager_email', None)

        return result

    def __repr__(self) -> str:
        return f'<User {self.email}>'
