"""
Bloglist Backend — Blog Request/Response Schemas
==================================================

What:  Pydantic models for the blog API contract.
Why:   Separates the public view from the ORM row: store-internal columns
       (created_at) never reach the client.

Absence vs falsiness:
    `likes` is defaulted by the schema, which only fills in the default when
    the key is absent. An explicit `"likes": 0` is kept as 0.
    `title` and `url` default to None so the service, not FastAPI, reports
    them missing with the "content missing" error.

Strict typing:
    `likes` only accepts a JSON integer. `true`, `2.0` or `"7"` are
    rejected (400 "malformatted request") rather than coerced.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field

# Upper bound of the 32-bit INTEGER column
MAX_LIKES = 2**31 - 1


class BlogCreate(BaseModel):
    """Payload accepted by POST /api/blogs."""

    title: Optional[str] = Field(default=None, description="Blog title (required)")
    author: Optional[str] = Field(default=None, description="Author name")
    url: Optional[str] = Field(default=None, description="Link to the post (required)")
    likes: int = Field(
        default=0,
        ge=0,
        le=MAX_LIKES,
        strict=True,
        description="Like count; 0 when omitted",
    )

    model_config = {"extra": "ignore"}


class BlogView(BaseModel):
    """
    Public representation of a stored blog.

    Returned by GET /api/blogs (as array items) and POST /api/blogs.
    """

    id: uuid.UUID = Field(description="Store-assigned identifier")
    title: str
    author: Optional[str] = None
    url: str
    likes: int = Field(ge=0)

    model_config = {"from_attributes": True}
