"""
Bloglist Backend — User Route Handlers
========================================

What:  GET/POST /api/users.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from bloglist.routes.deps import get_user_store
from bloglist.schemas.common import ErrorResponse
from bloglist.schemas.user import UserCreate, UserView
from bloglist.services.user_service import user_service
from bloglist.stores.base import UserStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get(
    "",
    response_model=List[UserView],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all users",
)
async def list_users(store: UserStore = Depends(get_user_store)) -> List[UserView]:
    return await user_service.list_users(store)


@router.post(
    "",
    response_model=UserView,
    responses={
        200: {"description": "User created", "model": UserView},
        400: {"description": "Validation failed", "model": ErrorResponse},
    },
    summary="Create a user",
    description=(
        "Creates a user. `username` must be unique and at least 3 characters; "
        "`password` is required and stored only as a salted hash; `adult` "
        "defaults to true when omitted."
    ),
)
async def create_user(
    payload: UserCreate,
    store: UserStore = Depends(get_user_store),
) -> UserView:
    return await user_service.create_user(store, payload)
