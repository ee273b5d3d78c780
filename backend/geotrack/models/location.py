"""Last known device location."""
from datetime import datetime
from geotrack import db
from geotrack.models.base import BaseModel

class LastKnownLocation(BaseModel):
    """Most recent location fix reported for a user (one row per user)."""

    __tablename__ = 'locations'

    user_uid = db.Column(db.String(32), db.ForeignKey('users.uid'), nullable=False, unique=True, index=True)
    latitude = db.Column(db.Float, nullable=False)
    longitude = db.Column(db.Float, nullable=False)
    accuracy = db.Column(db.Float, nullable=True)
    recorded_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            'latitude': self.latitude,
            'longitude': self.longitude,
            'accuracy': self.accuracy,
            'recorded_at': self.recorded_at.isoformat() if self.recorded_at else None
        }
