"""
Bloglist Backend — Blog Route Handlers
========================================

What:  GET/POST /api/blogs and DELETE /api/blogs/{id}.
How:   Each handler gets a BlogStore from `get_blog_store` and delegates to
       BlogService. Errors raised by the service are rendered by the global
       handlers in main.py as `{"error": <message>}`.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from bloglist.routes.deps import get_blog_store
from bloglist.schemas.blog import BlogCreate, BlogView
from bloglist.schemas.common import ErrorResponse
from bloglist.services.blog_service import blog_service
from bloglist.stores.base import BlogStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/blogs", tags=["Blogs"])


@router.get(
    "",
    response_model=List[BlogView],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all blogs",
)
async def list_blogs(store: BlogStore = Depends(get_blog_store)) -> List[BlogView]:
    return await blog_service.list_blogs(store)


@router.post(
    "",
    response_model=BlogView,
    responses={
        200: {"description": "Blog created", "model": BlogView},
        400: {"description": "title or url missing", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a blog",
    description=(
        "Creates a blog from `title`, `url`, optional `author` and optional "
        "`likes` (0 when omitted). Responds 200 with the stored blog."
    ),
)
async def create_blog(
    payload: BlogCreate,
    store: BlogStore = Depends(get_blog_store),
) -> BlogView:
    return await blog_service.create_blog(store, payload)


@router.delete(
    "/{blog_id}",
    status_code=204,
    response_class=Response,
    responses={
        204: {"description": "Deleted (or already absent)"},
        400: {"description": "Malformed id", "model": ErrorResponse},
    },
    summary="Delete a blog by id",
)
async def delete_blog(
    blog_id: str,
    store: BlogStore = Depends(get_blog_store),
) -> Response:
    """
    Delete a blog.

    `blog_id` is typed as a plain string so that a malformed id reaches the
    store and comes back as 400 "malformatted id" rather than FastAPI's 422.
    """
    await blog_service.remove_blog(store, blog_id)
    return Response(status_code=204)
