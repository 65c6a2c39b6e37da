"""
Bloglist Backend — User Service
=================================

What:  Validates user payloads, hashes passwords, maps rows to UserView.
Who:   Called by the /api/users route handlers.

Validation order (first failure wins, nothing is written on failure):
    1. password present
    2. username present (not blank) and at least 3 characters
    3. password at least settings.password_min_length characters
    4. username not already taken

The exact messages are part of the API: clients compare them verbatim.
"""

import logging
from typing import List, Optional

from bloglist.config import settings
from bloglist.exceptions import (
    BloglistError,
    DuplicateKeyError,
    StorageError,
    ValidationError,
)
from bloglist.schemas.user import UserCreate, UserView
from bloglist.security import hash_password
from bloglist.stores.base import UserStore

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 3

PASSWORD_MISSING = "password missing"
USERNAME_TOO_SHORT = "username has to be atleast 3 characters long"
USERNAME_TAKEN = "username must be unique"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def password_too_short_message(min_length: int) -> str:
    return f"password has to be atleast {min_length} characters long"


class UserService:
    """
    Business logic for user operations.

    Responsibilities:
        - list_users(): every stored user as a UserView
        - create_user(): validate, hash, persist, return the view
    """

    async def list_users(self, store: UserStore) -> List[UserView]:
        try:
            users = await store.find_all()
        except BloglistError:
            raise
        except Exception as e:
            logger.error("Store error listing users: %s", str(e), exc_info=True)
            raise StorageError(context={"operation": "list_users", "original_error": type(e).__name__})

        return [UserView.model_validate(user) for user in users]

    async def _validate(self, store: UserStore, payload: UserCreate) -> None:
        if payload.password is None:
            raise ValidationError(message=PASSWORD_MISSING, field="password")

        # Whitespace-only counts as missing, as for blog titles and urls
        if _is_blank(payload.username) or len(payload.username) < USERNAME_MIN_LENGTH:
            raise ValidationError(message=USERNAME_TOO_SHORT, field="username")

        if len(payload.password) < settings.password_min_length:
            raise ValidationError(
                message=password_too_short_message(settings.password_min_length),
                field="password",
            )

        existing = await store.find_by_username(payload.username)
        if existing is not None:
            raise ValidationError(message=USERNAME_TAKEN, field="username")

    async def create_user(self, store: UserStore, payload: UserCreate) -> UserView:
        """
        Validate and persist a new user.

        `adult` arrives already defaulted to True by the schema when the key
        was absent; an explicit false is kept.

        Raises:
            ValidationError: any rule above is broken (→ 400 with its message)
            StorageError: the store failed (→ 500)
        """
        try:
            await self._validate(store, payload)
            user = await store.insert(
                username=payload.username,
                name=payload.name,
                password_hash=hash_password(payload.password),
                adult=payload.adult,
            )
        except DuplicateKeyError:
            # Lost the race against a concurrent insert of the same username
            raise ValidationError(message=USERNAME_TAKEN, field="username")
        except BloglistError:
            raise
        except Exception as e:
            logger.error("Store error creating user: %s", str(e), exc_info=True)
            raise StorageError(context={"operation": "create_user", "original_error": type(e).__name__})

        logger.info("User %s created (username=%s)", user.id, user.username)
        return UserView.model_validate(user)


user_service = UserService()
