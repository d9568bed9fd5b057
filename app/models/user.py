"""
User model for authentication.

Usernames are the primary key and the identity carried in JWTs.
"""

from sqlalchemy import Boolean, Column, String, Text, false
from app.core.database import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(25), primary_key=True)
    # bcrypt hash, never returned by the API
    password = Column(Text, nullable=False)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False, server_default=false())

    def __repr__(self):
        return f"<User(username='{self.username}', is_admin={self.is_admin})>"
