"""
Bloglist Backend — Test Helpers
=================================

What:  In-memory fake stores and database inspection helpers shared by the
       test modules (imported as `helpers`; conftest.py configures the
       environment first).
"""

import uuid
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker

from bloglist.exceptions import DuplicateKeyError
from bloglist.models.blog import Blog
from bloglist.models.user import User
from bloglist.stores.base import parse_id


class FakeBlogStore:
    """
    List-backed BlogStore.

    Set `fail_with` to an exception instance to make every call raise it,
    which is how the storage-failure paths are exercised.
    """

    def __init__(self, blogs: Optional[List[Blog]] = None):
        self.blogs: List[Blog] = list(blogs or [])
        self.fail_with: Optional[Exception] = None
        self.insert_calls = 0

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    async def find_all(self) -> List[Blog]:
        self._maybe_fail()
        return list(self.blogs)

    async def insert(self, *, title, author, url, likes) -> Blog:
        self.insert_calls += 1
        self._maybe_fail()
        blog = Blog(id=uuid.uuid4(), title=title, author=author, url=url, likes=likes)
        self.blogs.append(blog)
        return blog

    async def delete(self, blog_id: str) -> bool:
        uid = parse_id(blog_id)
        self._maybe_fail()
        before = len(self.blogs)
        self.blogs = [b for b in self.blogs if b.id != uid]
        return len(self.blogs) < before


class FakeUserStore:
    """List-backed UserStore that enforces username uniqueness on insert."""

    def __init__(self, users: Optional[List[User]] = None):
        self.users: List[User] = list(users or [])
        self.fail_with: Optional[Exception] = None
        self.insert_calls = 0

    async def find_all(self) -> List[User]:
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.users)

    async def find_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users if u.username == username), None)

    async def insert(self, *, username, name, password_hash, adult) -> User:
        self.insert_calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        if any(u.username == username for u in self.users):
            raise DuplicateKeyError(key="username", value=username)
        user = User(
            id=uuid.uuid4(),
            username=username,
            name=name,
            password_hash=password_hash,
            adult=adult,
        )
        self.users.append(user)
        return user


async def blogs_in_db(factory: async_sessionmaker) -> List[Blog]:
    async with factory() as session:
        result = await session.execute(select(Blog))
        return list(result.scalars().all())


async def users_in_db(factory: async_sessionmaker) -> List[User]:
    async with factory() as session:
        result = await session.execute(select(User))
        return list(result.scalars().all())


async def count_rows(factory: async_sessionmaker, model) -> int:
    async with factory() as session:
        result = await session.execute(select(func.count()).select_from(model))
        return result.scalar_one()


def non_existing_id() -> str:
    """A well-formed id that no stored blog has."""
    return str(uuid.uuid4())
