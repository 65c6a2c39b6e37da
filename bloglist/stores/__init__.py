# Stores package init
"""
Bloglist Backend — Persistence Stores
=======================================

What:  The persistence collaborators the services depend on.

Store Inventory:
    - BlogStore (protocol): find_all / insert / delete
    - UserStore (protocol): find_all / insert / find_by_username
    - SqlBlogStore, SqlUserStore: async SQLAlchemy implementations

Services receive a store instead of a session, so the same service code
runs against the database in production and against in-memory fakes in
the unit tests.
"""

from bloglist.stores.base import BlogStore, UserStore, parse_id
from bloglist.stores.blog_store import SqlBlogStore
from bloglist.stores.user_store import SqlUserStore

__all__ = [
    "BlogStore",
    "UserStore",
    "SqlBlogStore",
    "SqlUserStore",
    "parse_id",
]
