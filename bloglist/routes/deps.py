"""
Bloglist Backend — Store Dependencies
=======================================

What:  FastAPI dependencies that wrap the per-request session in a store.
Why:   Routes and services depend on the store interface only. Tests
       override these two functions (app.dependency_overrides) to plug in
       fakes or a throwaway database.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.database import get_db_session
from bloglist.stores.base import BlogStore, UserStore
from bloglist.stores.blog_store import SqlBlogStore
from bloglist.stores.user_store import SqlUserStore


async def get_blog_store(db: AsyncSession = Depends(get_db_session)) -> BlogStore:
    return SqlBlogStore(db)


async def get_user_store(db: AsyncSession = Depends(get_db_session)) -> UserStore:
    return SqlUserStore(db)
