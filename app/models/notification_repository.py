"""Repository for notification database operations.

Every statement is a parameterized SQL query run through the shared
Flask-SQLAlchemy session.
"""

import logging
from datetime import datetime
from sqlalchemy import bindparam, text, Boolean, DateTime, Integer, String, Text
from sqlalchemy.exc import SQLAlchemyError

log = logging.getLogger(__name__)

_FIND_RECENT = text(
    """
    SELECT id FROM notifications
    WHERE user_id = :user_id AND actor_id = :actor_id AND post_id = :post_id
      AND type = :type AND created_at > :since
    """
).bindparams(bindparam("since", type_=DateTime))

_INSERT = text(
    """
    INSERT INTO notifications (user_id, actor_id, post_id, type, is_read, created_at)
    VALUES (:user_id, :actor_id, :post_id, :type, :is_read, :created_at)
    """
).bindparams(
    bindparam("is_read", type_=Boolean),
    bindparam("created_at", type_=DateTime),
)

_LIST_FOR_USER = text(
    """
    SELECT
        n.id AS id,
        n.type AS type,
        n.is_read AS is_read,
        n.created_at AS created_at,
        actor.id AS actor_id,
        actor.username AS actor_username,
        p.id AS post_id,
        p.title AS post_title,
        SUBSTR(p.caption, 1, :caption_length) AS post_caption
    FROM notifications n
    LEFT JOIN users actor ON n.actor_id = actor.id
    LEFT JOIN posts p ON n.post_id = p.id
    WHERE n.user_id = :user_id
    ORDER BY n.created_at DESC, n.id DESC
    LIMIT :limit
    """
).columns(
    id=Integer,
    type=String,
    is_read=Boolean,
    created_at=DateTime,
    actor_id=Integer,
    actor_username=String,
    post_id=Integer,
    post_title=String,
    post_caption=Text,
)

_MARK_AS_READ = text(
    "UPDATE notifications SET is_read = :is_read WHERE id = :id"
).bindparams(bindparam("is_read", type_=Boolean))

_MARK_ALL_AS_READ = text(
    "UPDATE notifications SET is_read = :is_read WHERE user_id = :user_id"
).bindparams(bindparam("is_read", type_=Boolean))

_COUNT_UNREAD = text(
    "SELECT COUNT(*) AS count FROM notifications WHERE user_id = :user_id AND is_read = :is_read"
).bindparams(bindparam("is_read", type_=Boolean))


class SqlAlchemyNotificationRepository:
    """SQL implementation of the notification repository."""

    def __init__(self, db):
        self.db = db

    def find_recent(self, user_id, actor_id, post_id, type, since):
        """Return the id of a matching notification created after ``since``, or None."""
        row = self.db.session.execute(_FIND_RECENT, {
            "user_id": user_id,
            "actor_id": actor_id,
            "post_id": post_id,
            "type": type,
            "since": since,
        }).first()
        return row.id if row else None

    def create_unless_recent(self, user_id, actor_id, post_id, type, since):
        """Insert an unread notification unless a matching one exists after ``since``.

        Runs on its own connection and transaction, so the caller's session
        is never flushed, committed or rolled back by it.

        Returns:
            True if a row was inserted, False if a recent duplicate exists
        """
        with self.db.engine.begin() as conn:
            existing = conn.execute(_FIND_RECENT, {
                "user_id": user_id,
                "actor_id": actor_id,
                "post_id": post_id,
                "type": type,
                "since": since,
            }).first()
            if existing is not None:
                return False
            conn.execute(_INSERT, self._insert_params(user_id, actor_id, post_id, type))
            return True

    def insert(self, user_id, actor_id, post_id, type, created_at=None):
        """Insert an unread notification in its own transaction."""
        with self.db.engine.begin() as conn:
            conn.execute(_INSERT, self._insert_params(user_id, actor_id, post_id, type, created_at))

    @staticmethod
    def _insert_params(user_id, actor_id, post_id, type, created_at=None):
        return {
            "user_id": user_id,
            "actor_id": actor_id,
            "post_id": post_id,
            "type": type,
            "is_read": False,
            "created_at": created_at or datetime.utcnow(),
        }

    def list_for_user(self, user_id, limit=50, caption_length=50):
        """Get the newest notifications for a user joined with actor and post."""
        result = self.db.session.execute(_LIST_FOR_USER, {
            "user_id": user_id,
            "limit": limit,
            "caption_length": caption_length,
        })
        return result.mappings().all()

    def mark_as_read(self, notification_id):
        """Mark a notification as read. Returns the number of rows updated."""
        return self._write(_MARK_AS_READ, {"id": notification_id, "is_read": True})

    def mark_all_as_read(self, user_id):
        """Mark every notification of a user as read. Returns the number of rows updated."""
        return self._write(_MARK_ALL_AS_READ, {"user_id": user_id, "is_read": True})

    def count_unread(self, user_id):
        """Count unread notifications for a user."""
        count = self.db.session.execute(_COUNT_UNREAD, {"user_id": user_id, "is_read": False}).scalar()
        return int(count or 0)

    def _write(self, statement, params):
        try:
            result = self.db.session.execute(statement, params)
            self.db.session.commit()
            return result.rowcount
        except SQLAlchemyError as e:
            log.error(f"Notification write failed: {e}")
            self.db.session.rollback()
            raise
