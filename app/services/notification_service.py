"""Notification service: creation with a dedup window and read-side helpers."""

import logging
from datetime import datetime, timedelta

from app.models.notification import NotificationType

log = logging.getLogger(__name__)

class NotificationService:
    """Service for creating and reading user notifications."""

    def __init__(self, repository, dedup_window=timedelta(hours=1), list_limit=50, caption_length=50):
        """Initialize the notification service.

        Args:
            repository: Notification repository used for every query
            dedup_window: Trailing interval in which an identical notification
                suppresses a new one
            list_limit: Maximum number of notifications returned per user
            caption_length: Number of caption characters included in listings
        """
        self.repository = repository
        self.dedup_window = dedup_window
        self.list_limit = list_limit
        self.caption_length = caption_length

    def create_notification(self, user_id, actor_id, post_id, type):
        """Record that ``actor_id`` acted on ``user_id``'s post.

        Fire-and-forget: nothing is returned and failures are only logged,
        so the operation that triggered the notification never fails because
        of it. The work runs in its own transaction, so the caller's session is
        left untouched either way. The existence check and the insert are
        separate statements, so two concurrent calls for the same tuple may
        both insert.
        """
        try:
            if user_id == actor_id:
                return

            type = NotificationType(type).value
            since = datetime.utcnow() - self.dedup_window

            if not self.repository.create_unless_recent(user_id, actor_id, post_id, type, since):
                log.debug(f"Skipping duplicate {type} notification for user {user_id}")
        except Exception as e:
            log.error(f"Create notification error: {e}", exc_info=True)

    def notify_like(self, post_owner_id, actor_id, post_id):
        self.create_notification(post_owner_id, actor_id, post_id, NotificationType.LIKE)

    def notify_bookmark(self, post_owner_id, actor_id, post_id):
        self.create_notification(post_owner_id, actor_id, post_id, NotificationType.BOOKMARK)

    def notify_comment(self, post_owner_id, actor_id, post_id):
        self.create_notification(post_owner_id, actor_id, post_id, NotificationType.COMMENT)

    def get_notifications(self, user_id):
        """Get the newest notifications for a user, newest first."""
        rows = self.repository.list_for_user(
            user_id,
            limit=self.list_limit,
            caption_length=self.caption_length
        )
        return [self._serialize(row) for row in rows]

    def mark_as_read(self, notification_id):
        """Mark a single notification as read. Unknown ids are a no-op."""
        self.repository.mark_as_read(notification_id)

    def mark_all_as_read(self, user_id):
        """Mark all of a user's notifications as read."""
        self.repository.mark_all_as_read(user_id)

    def get_unread_count(self, user_id):
        """Get the number of unread notifications for a user."""
        return self.repository.count_unread(user_id) or 0

    @staticmethod
    def _serialize(row):
        created_at = row["created_at"]
        return {
            "_id": row["id"],
            "type": row["type"],
            "isRead": bool(row["is_read"]),
            "createdAt": created_at.isoformat() if created_at else None,
            "actor": {
                "_id": row["actor_id"],
                "username": row["actor_username"],
            },
            "post": {
                "_id": row["post_id"],
                "title": row["post_title"],
                "caption": row["post_caption"],
            },
        }
