# File: backend/geotrack/api/notifications.py
"""Notifications API the device polls to show local notifications."""
from flask import Blueprint, current_app, g, request
from geotrack.services.notification_service import NotificationService
from geotrack.utils.decorators import active_user_required
from geotrack.utils.helpers import success_response, error_response

notifications_bp = Blueprint('notifications', __name__)

@notifications_bp.route('', methods=['GET'])
@active_user_required
def get_notifications():
    """Get user's notifications, newest first."""
    try:
        page = max(request.args.get('page', 1, type=int), 1)
        per_page = request.args.get('per_page', current_app.config['DEFAULT_PAGE_SIZE'], type=int)
        per_page = min(max(per_page, 1), current_app.config['MAX_PAGE_SIZE'])
        unread_only = request.args.get('unread_only', 'false').lower() in ('1', 'true', 'yes')

        result = NotificationService.list_for_user(
            g.current_user.uid,
            unread_only=unread_only,
            page=page,
            per_page=per_page
        )

        return success_response(
            data=result,
            message=f"Found {len(result['notifications'])} notifications"
        )

    except Exception as e:
        return error_response(f"Error fetching notifications: {str(e)}", 500)

@notifications_bp.route('/<int:notification_id>/read', methods=['PUT'])
@active_user_required
def mark_as_read(notification_id):
    """Mark notification as read."""
    notification = NotificationService.mark_read(g.current_user.uid, notification_id)
    if notification is None:
        return error_response("Notification not found", 404)

    return success_response(data=notification.to_dict(), message="Notification marked as read")
