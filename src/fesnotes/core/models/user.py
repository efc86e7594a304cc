"""
User model for authentication.
"""

from sqlalchemy import CheckConstraint, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class User(BaseModel):
    """User account: unique username and email, bcrypt password hash.

    Both identifiers are unique regardless of case; lookups ignore case too.
    Owned notes and grants go away with the user (ON DELETE CASCADE in the DB).
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        CheckConstraint(
            "length(username) >= 3 AND length(username) <= 50", name="ck_users_username_len"
        ),
        CheckConstraint("length(email) <= 100", name="ck_users_email_len"),
        Index("idx_users_email", "email"),
    )

    def __repr__(self) -> str:
        return f"<User(username='{self.username}')>"


Index("uq_users_username_lower", func.lower(User.username), unique=True)
Index("uq_users_email_lower", func.lower(User.email), unique=True)
