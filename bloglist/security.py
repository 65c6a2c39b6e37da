"""
Bloglist Backend — Password Hashing
=====================================

What:  One-way, salted password hashing for user creation.
How:   passlib CryptContext with pbkdf2_sha256. Every hash embeds its own
       random salt and round count, so equal passwords produce different
       hashes and the scheme can be upgraded later through `deprecated`.
"""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)
