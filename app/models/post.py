from datetime import datetime
from app.extensions import db

class Post(db.Model):
    """Post model, the subject of a notification."""

    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, index=True, nullable=True)
    title = db.Column(db.String(255), nullable=True)
    caption = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<Post {self.id}: {self.title}>'
