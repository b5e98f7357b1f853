"""User database model.

Users are created the first time an identity provider principal is seen;
``auth_id`` is the principal's ``userId``.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User profile model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at / updated_at: from BaseMutableModel
        auth_id: Identity provider user id (unique)
        email: Contact email
        first_name / last_name: Names
        photo: Avatar URL
        preferences: Opaque JSON preferences

    Indexes:
        - ix_users_auth_id: unique principal lookup
    """

    __tablename__ = "users"

    auth_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Identity provider user id",
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="User email address",
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    photo: Mapped[str | None] = mapped_column(Text, nullable=True)
    preferences: Mapped[str | None] = mapped_column(
        Text, nullable=True, comment="User preferences (JSON)"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, auth_id={self.auth_id!r})>"
