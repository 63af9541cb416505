"""Routes for the notifications system."""

import logging
from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from app.errors import server_error_response
from app.notifications import notifications_bp
from app.services.container import container

log = logging.getLogger(__name__)

# Malformed ids fail like any other query: generic 500, no separate status
REQUEST_ERRORS = (SQLAlchemyError, ValueError)

def _service():
    return container().get('notification_service')

def _parse_id(value):
    """Convert a path segment to an integer id, raising ValueError if it isn't one."""
    return int(value)

@notifications_bp.route('/<user_id>', methods=['GET'])
def get_notifications(user_id):
    """Get the newest notifications for a user."""
    try:
        notifications = _service().get_notifications(_parse_id(user_id))
        return jsonify({'notifications': notifications}), 200
    except REQUEST_ERRORS as e:
        log.error(f"Get notifications error: {e}")
        return server_error_response(e)

@notifications_bp.route('/<notification_id>/read', methods=['PUT'])
def mark_as_read(notification_id):
    """Mark a notification as read."""
    try:
        _service().mark_as_read(_parse_id(notification_id))
        return jsonify({'message': 'Notification marked as read'}), 200
    except REQUEST_ERRORS as e:
        log.error(f"Mark as read error: {e}")
        return server_error_response(e)

@notifications_bp.route('/user/<user_id>/read-all', methods=['PUT'])
def mark_all_as_read(user_id):
    """Mark all notifications as read for a user."""
    try:
        _service().mark_all_as_read(_parse_id(user_id))
        return jsonify({'message': 'All notifications marked as read'}), 200
    except REQUEST_ERRORS as e:
        log.error(f"Mark all as read error: {e}")
        return server_error_response(e)

@notifications_bp.route('/<user_id>/unread-count', methods=['GET'])
def get_unread_count(user_id):
    """Get the unread notification count for a user."""
    try:
        count = _service().get_unread_count(_parse_id(user_id))
        return jsonify({'count': count}), 200
    except REQUEST_ERRORS as e:
        log.error(f"Get unread count error: {e}")
        return server_error_response(e)
