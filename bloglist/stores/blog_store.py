"""
Bloglist Backend — SQL Blog Store
===================================

What:  BlogStore implementation over an async SQLAlchemy session.
Who:   Built per request by `bloglist.routes.deps.get_blog_store`.

Transactions:
    The store only flushes. Commit/rollback belongs to the session
    dependency, so a request either persists everything or nothing.
"""

import logging
from typing import Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.models.blog import Blog
from bloglist.stores.base import parse_id

logger = logging.getLogger(__name__)


class SqlBlogStore:
    """Blog persistence backed by the `blogs` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> Sequence[Blog]:
        result = await self.session.execute(select(Blog).order_by(Blog.created_at))
        return list(result.scalars().all())

    async def insert(
        self,
        *,
        title: str,
        author: Optional[str],
        url: str,
        likes: int,
    ) -> Blog:
        blog = Blog(title=title, author=author, url=url, likes=likes)
        self.session.add(blog)
        # Flush assigns defaults (id, created_at) without committing
        await self.session.flush()
        logger.debug("Inserted blog %s", blog.id)
        return blog

    async def delete(self, blog_id: str) -> bool:
        """
        Delete a blog by id.

        Query plan:
            DELETE FROM blogs WHERE id = :uuid  → primary key lookup

        Returns:
            True if a row was removed, False if no blog had that id

        Raises:
            MalformedIdError: blog_id is not a UUID (raised before any SQL)
        """
        uid = parse_id(blog_id)
        result = await self.session.execute(delete(Blog).where(Blog.id == uid))
        deleted = (result.rowcount or 0) > 0
        logger.debug("Delete blog %s: %s", uid, "removed" if deleted else "no match")
        return deleted
