"""
Bloglist Backend — User SQLAlchemy Model
==========================================

What:  ORM model for the `users` table.
Who:   Used by SqlUserStore and by Alembic.

Table Design:
    - username: UNIQUE index. The service checks uniqueness first for a
      friendly error; the index closes the race between two concurrent
      creations with the same username.
    - password_hash: the only password column. Plaintext is never stored.
    - adult: NOT NULL, default true
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from bloglist.database import Base


class User(Base):
    """A registered user. Created by POST /api/users; never updated or deleted."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    name: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    adult: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        # No password_hash in debug output
        return f"<User(id={self.id}, username='{self.username}', adult={self.adult})>"
