from datetime import datetime
from app.extensions import db

class User(db.Model):
    """User model.

    Accounts are owned by the authentication service; this mapping only
    describes the columns notifications read when they are listed.
    """

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), index=True, unique=True, nullable=False)
    email = db.Column(db.String(120), index=True, unique=True, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<User {self.username}>'
