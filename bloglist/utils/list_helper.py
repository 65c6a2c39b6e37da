"""
Bloglist Backend — Blog List Aggregations
===========================================

What:  Pure functions over an in-memory sequence of blogs.
How:   Each blog may be a mapping (`{"likes": 3}`) or an object with a
       `likes` attribute (ORM row, BlogView). Inputs are never mutated.
"""

import logging
from typing import Any, Iterable, Mapping, Sequence

logger = logging.getLogger(__name__)


def _likes(blog: Any) -> int:
    if isinstance(blog, Mapping):
        return blog["likes"]
    return blog.likes


def dummy(blogs: Iterable[Any]) -> int:
    """Scaffold check: always 1, whatever is passed in."""
    logger.debug("dummy called with %r", blogs)
    return 1


def total_likes(blogs: Iterable[Any]) -> int:
    """Sum of `likes` over all blogs; 0 for an empty sequence."""
    return sum(_likes(blog) for blog in blogs)


def favorite_blog(blogs: Sequence[Any]) -> Any:
    """
    Return the blog with the most likes.

    Ties go to the earliest blog: a later blog only replaces the current
    favorite when it has strictly more likes.

    Raises:
        ValueError: blogs is empty (there is no favorite to return)
    """
    if not blogs:
        raise ValueError("favorite_blog() requires at least one blog")

    favorite = blogs[0]
    for blog in blogs[1:]:
        if _likes(blog) > _likes(favorite):
            favorite = blog
    return favorite
