"""
Bloglist Backend — SQL User Store
===================================

What:  UserStore implementation over an async SQLAlchemy session.
Who:   Built per request by `bloglist.routes.deps.get_user_store`.

Uniqueness:
    find_by_username gives the service its friendly pre-check. The unique
    index on users.username is the real guarantee: a concurrent insert that
    slips past the pre-check fails at flush with IntegrityError, which is
    re-raised here as DuplicateKeyError.
"""

import logging
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.exceptions import DuplicateKeyError
from bloglist.models.user import User

logger = logging.getLogger(__name__)


class SqlUserStore:
    """User persistence backed by the `users` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> Sequence[User]:
        result = await self.session.execute(select(User).order_by(User.created_at))
        return list(result.scalars().all())

    async def find_by_username(self, username: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def insert(
        self,
        *,
        username: str,
        name: Optional[str],
        password_hash: str,
        adult: bool,
    ) -> User:
        user = User(username=username, name=name, password_hash=password_hash, adult=adult)
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as e:
            logger.warning("Unique constraint hit inserting user '%s'", username)
            raise DuplicateKeyError(
                key="username",
                value=username,
                context={"original_error": type(e).__name__},
            ) from e
        logger.debug("Inserted user %s", user.id)
        return user
