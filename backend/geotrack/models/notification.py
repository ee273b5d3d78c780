"""Local notifications shown on the user's device."""
from datetime import datetime
from geotrack import db
from geotrack.models.base import BaseModel

class Notification(BaseModel):
    """A notification waiting to be shown or already read."""

    __tablename__ = 'notifications'

    user_uid = db.Column(db.String(32), db.ForeignKey('users.uid'), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)
    read_at = db.Column(db.DateTime, nullable=True)

    def mark_read(self) -> None:
        if self.read_at is None:
            self.read_at = datetime.utcnow()
            self.save()

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'message': self.message,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'read_at': self.read_at.isoformat() if self.read_at else None
        }
