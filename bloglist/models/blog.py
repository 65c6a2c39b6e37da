"""
Bloglist Backend — Blog SQLAlchemy Model
==========================================

What:  ORM model for the `blogs` table.
Who:   Used by SqlBlogStore for insert/select/delete and by Alembic.

Table Design:
    - UUID primary key: the identifier format DELETE /api/blogs/{id} parses
    - title, url: NOT NULL; the service rejects payloads without them
    - author: nullable, passed through from the payload
    - likes: NOT NULL, default 0, CHECK likes >= 0
    - created_at: UTC, indexed; gives find_all a stable insertion order
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from bloglist.database import Base


class Blog(Base):
    """
    A stored blog post.

    Lifecycle:
        1. Created by POST /api/blogs
        2. Never updated in place
        3. Removed by DELETE /api/blogs/{id}
    """

    __tablename__ = "blogs"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(String(500), nullable=False)

    author: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)

    url: Mapped[str] = mapped_column(String(2048), nullable=False)

    likes: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),
        Index("idx_blogs_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Blog(id={self.id}, title='{self.title}', likes={self.likes})>"
