"""
Bloglist Backend — Store Interfaces
=====================================

What:  Structural interfaces for the blog and user stores, plus the shared
       identifier parser.
How:   typing.Protocol, so any object with matching async methods (the SQL
       stores, the test fakes) satisfies the contract without inheriting.
"""

import uuid
from typing import Optional, Protocol, Sequence

from bloglist.exceptions import MalformedIdError
from bloglist.models.blog import Blog
from bloglist.models.user import User


def parse_id(raw_id: str) -> uuid.UUID:
    """
    Parse a path id into the store's identifier format (UUID).

    Raises:
        MalformedIdError: raw_id is not a valid UUID string
    """
    try:
        return uuid.UUID(str(raw_id))
    except (ValueError, TypeError, AttributeError):
        raise MalformedIdError(raw_id=str(raw_id))


class BlogStore(Protocol):
    async def find_all(self) -> Sequence[Blog]:
        ...

    async def insert(
        self,
        *,
        title: str,
        author: Optional[str],
        url: str,
        likes: int,
    ) -> Blog:
        ...

    async def delete(self, blog_id: str) -> bool:
        """Delete by id. Returns False when nothing matched; never raises for that."""
        ...


class UserStore(Protocol):
    async def find_all(self) -> Sequence[User]:
        ...

    async def find_by_username(self, username: str) -> Optional[User]:
        ...

    async def insert(
        self,
        *,
        username: str,
        name: Optional[str],
        password_hash: str,
        adult: bool,
    ) -> User:
        """Raises DuplicateKeyError when the username is already taken."""
        ...
