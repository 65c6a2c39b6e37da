"""
Bloglist Backend — Blog Service
=================================

What:  Validates blog payloads, maps stored rows to BlogView, and delegates
       persistence to a BlogStore.
Who:   Called by the /api/blogs route handlers.

Error Handling Strategy:
    - Missing title/url → ValidationError("content missing"), before any
      store call
    - Malformed id on delete → MalformedIdError (raised by the store)
    - Anything else the store raises → StorageError, logged with traceback
"""

import logging
from typing import List, Optional

from bloglist.exceptions import (
    CONTENT_MISSING,
    BloglistError,
    StorageError,
    ValidationError,
)
from bloglist.schemas.blog import BlogCreate, BlogView
from bloglist.stores.base import BlogStore

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class BlogService:
    """
    Business logic for blog operations.

    Responsibilities:
        - list_blogs(): every stored blog as a BlogView, in store order
        - create_blog(): validate, default likes, persist, return the view
        - remove_blog(): idempotent delete by id
    """

    async def list_blogs(self, store: BlogStore) -> List[BlogView]:
        try:
            blogs = await store.find_all()
        except BloglistError:
            raise
        except Exception as e:
            logger.error("Store error listing blogs: %s", str(e), exc_info=True)
            raise StorageError(context={"operation": "list_blogs", "original_error": type(e).__name__})

        return [BlogView.model_validate(blog) for blog in blogs]

    async def create_blog(self, store: BlogStore, payload: BlogCreate) -> BlogView:
        """
        Validate and persist a new blog.

        Workflow:
            1. Reject payloads without title or url (nothing is written)
            2. Insert with likes as parsed (the schema already defaulted an
               absent `likes` to 0) and author passed through as-is
            3. Return the view of the stored row, including its new id

        Raises:
            ValidationError: title or url missing (→ 400 "content missing")
            StorageError: the store failed (→ 500 "something went wrong...")
        """
        if _is_blank(payload.title) or _is_blank(payload.url):
            missing = "title" if _is_blank(payload.title) else "url"
            raise ValidationError(message=CONTENT_MISSING, field=missing)

        try:
            blog = await store.insert(
                title=payload.title,
                author=payload.author,
                url=payload.url,
                likes=payload.likes,
            )
        except BloglistError:
            raise
        except Exception as e:
            logger.error("Store error creating blog: %s", str(e), exc_info=True)
            raise StorageError(context={"operation": "create_blog", "original_error": type(e).__name__})

        logger.info("Blog %s created (likes=%d)", blog.id, blog.likes)
        return BlogView.model_validate(blog)

    async def remove_blog(self, store: BlogStore, blog_id: str) -> None:
        """
        Delete a blog by id.

        Deleting an id that is well-formed but unknown still succeeds, so a
        retried DELETE gets the same 204 as the first one.

        Raises:
            MalformedIdError: blog_id is not in the store's id format (→ 400)
            StorageError: the store failed for any other reason (→ 500)
        """
        try:
            deleted = await store.delete(blog_id)
        except BloglistError:
            raise
        except Exception as e:
            logger.error("Store error deleting blog %s: %s", blog_id, str(e), exc_info=True)
            raise StorageError(context={"operation": "remove_blog", "blog_id": blog_id})

        if deleted:
            logger.info("Blog %s deleted", blog_id)
        else:
            logger.info("Blog %s not found; delete treated as done", blog_id)


blog_service = BlogService()
