# backend/geotrack/services/notification_service.py
"""Local notifications for the user's device."""
from typing import Dict

from flask import current_app

from geotrack.models.notification import Notification

class NotificationService:
    """Stores notifications the device shows to its user."""

    @staticmethod
    def show_notification(user_uid: str, title: str, message: str) -> Notification:
        notification = Notification(user_uid=user_uid, title=title, message=message).save()
        current_app.logger.info(f'Notification for {user_uid}: {title} - {message}')
        return notification

    @staticmethod
    def list_for_user(user_uid: str, unread_only: bool = False,
                      page: int = 1, per_page: int = 20) -> Dict:
        """Return one page of the user's notifications, newest first."""
        query = Notification.query.filter_by(user_uid=user_uid)
        unread_count = query.filter(Notification.read_at.is_(None)).count()

        if unread_only:
            query = query.filter(Notification.read_at.is_(None))

        pagination = query.order_by(
            Notification.created_at.desc(), Notification.id.desc()
        ).paginate(page=page, per_page=per_page, error_out=False)

        return {
            'notifications': [n.to_dict() for n in pagination.items],
            'pagination': {
                'page': pagination.page,
                'per_page': pagination.per_page,
                'total': pagination.total,
                'pages': pagination.pages,
                'has_next': pagination.has_next,
                'has_prev': pagination.has_prev
            },
            'summary': {
                'unread_count': unread_count
            }
        }

    @staticmethod
    def mark_read(user_uid: str, notification_id: int):
        """Mark one of the user's notifications read; None when not found."""
        notification = Notification.query.filter_by(id=notification_id, user_uid=user_uid).first()
        if notification is None:
            return None

        notification.mark_read()
        return notification
