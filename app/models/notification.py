from datetime import datetime
from enum import Enum
from app.extensions import db

class NotificationType(Enum):
    LIKE = "like"
    BOOKMARK = "bookmark"
    COMMENT = "comment"

    @classmethod
    def values(cls):
        return [member.value for member in cls]

class Notification(db.Model):
    """Model for user notifications.

    ``user_id`` is the recipient and ``actor_id`` the user whose action
    triggered the notification. No foreign keys or unique constraint are
    declared: duplicates inside the dedup window are filtered at write time
    only.
    """

    __tablename__ = "notifications"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, index=True, nullable=False)
    actor_id = db.Column(db.Integer, nullable=False)
    post_id = db.Column(db.Integer, nullable=False)
    type = db.Column(db.String(20), nullable=False)
    is_read = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, server_default=db.func.now())

    def __repr__(self):
        return f'<Notification {self.id}: {self.type} for {self.user_id}>'
