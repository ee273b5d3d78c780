"""Attendance record model."""
from datetime import datetime
from geotrack import db
from geotrack.models.base import BaseModel

class AttendanceRecord(BaseModel):
    """Attendance record model."""

    __tablename__ = 'attendance'

    # Stored as sent by the client, any JSON value; a record may lack a user id
    user_id = db.Column(db.JSON(none_as_null=True), nullable=True)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    is_entering = db.Column(db.JSON(none_as_null=True), nullable=True)

    def to_dict(self):
        """Convert to dictionary."""
        return {
            'id': self.id,
            'userId': self.user_id,
            'timestamp': self.timestamp.isoformat() if self.timestamp else None,
            'isEntering': self.is_entering
        }

    def __repr__(self):
        return f'<AttendanceRecord {self.user_id!r} entering={self.is_entering!r}>'
