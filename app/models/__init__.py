"""Database models for the application."""

# Import models in the correct order to avoid circular dependencies
from app.models.user import User
from app.models.post import Post
from app.models.notification import Notification, NotificationType
