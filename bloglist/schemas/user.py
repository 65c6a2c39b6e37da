"""
Bloglist Backend — User Request/Response Schemas
==================================================

What:  Pydantic models for the user API contract.

Security:
    UserView has no password field at all, so a hash can never be
    serialized into a response by accident.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """
    Payload accepted by POST /api/users.

    `username` and `password` are optional here so that UserService can
    report the exact validation message instead of a generic parse error.
    `adult` defaults to True only when the key is absent, and only a JSON
    boolean is accepted for it (`"no"` or `0` is a malformatted request).
    """

    username: Optional[str] = Field(default=None, description="Unique, at least 3 characters")
    name: Optional[str] = Field(default=None, description="Display name")
    password: Optional[str] = Field(default=None, description="Plaintext password (hashed before storing)")
    adult: bool = Field(default=True, strict=True, description="Defaults to true when omitted")

    model_config = {"extra": "ignore"}


class UserView(BaseModel):
    """Public representation of a stored user."""

    id: uuid.UUID
    username: str
    name: Optional[str] = None
    adult: bool

    model_config = {"from_attributes": True}
