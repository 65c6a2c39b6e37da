"""
Bloglist Backend — SQL Store Tests
====================================

What:  SqlBlogStore and SqlUserStore against a real (SQLite) database.
Why:   The fakes used by the service tests only mimic the contract; these
       tests pin the SQL implementations to it.

What we test:
    ✅ insert assigns an id, find_all returns stored rows
    ✅ delete reports whether a row was removed
    ✅ malformed ids are rejected before any SQL runs
    ✅ the unique index on username surfaces as DuplicateKeyError
"""

import uuid

import pytest

from bloglist.exceptions import DuplicateKeyError, MalformedIdError
from bloglist.models.blog import Blog
from bloglist.stores import SqlBlogStore, SqlUserStore, parse_id
from helpers import blogs_in_db, count_rows, non_existing_id, users_in_db


class TestParseId:

    def test_valid_uuid_string(self):
        raw = "6f1c1b9e-8d0e-4c6a-9a53-0f5f3b1d2c4e"
        assert parse_id(raw) == uuid.UUID(raw)

    @pytest.mark.parametrize("raw", ["5a3d5da59070081a82a3445", "", "not-an-id"])
    def test_malformed_ids(self, raw):
        with pytest.raises(MalformedIdError) as exc_info:
            parse_id(raw)
        assert exc_info.value.raw_id == raw


class TestSqlBlogStore:

    @pytest.mark.asyncio
    async def test_find_all_returns_seeded_blogs(self, seeded_db):
        async with seeded_db() as session:
            blogs = await SqlBlogStore(session).find_all()

        assert len(blogs) == 6
        assert {b.title for b in blogs} >= {"React patterns", "Type wars"}

    @pytest.mark.asyncio
    async def test_insert_assigns_id_and_keeps_fields(self, session_factory):
        async with session_factory() as session:
            blog = await SqlBlogStore(session).insert(
                title="Things I don't know as of 2018",
                author="Dan Abramov",
                url="https://overreacted.io/things-i-dont-know-as-of-2018/",
                likes=0,
            )
            await session.commit()

        assert isinstance(blog.id, uuid.UUID)
        stored = await blogs_in_db(session_factory)
        assert [(b.id, b.title, b.author, b.url, b.likes) for b in stored] == [
            (
                blog.id,
                "Things I don't know as of 2018",
                "Dan Abramov",
                "https://overreacted.io/things-i-dont-know-as-of-2018/",
                0,
            )
        ]

    @pytest.mark.asyncio
    async def test_insert_without_author(self, session_factory):
        async with session_factory() as session:
            blog = await SqlBlogStore(session).insert(title="t", author=None, url="u", likes=1)
            await session.commit()

        assert blog.author is None
        stored = await blogs_in_db(session_factory)
        assert [(b.title, b.author, b.url, b.likes) for b in stored] == [("t", None, "u", 1)]

    @pytest.mark.asyncio
    async def test_delete_existing_returns_true(self, seeded_db):
        target = (await blogs_in_db(seeded_db))[0]

        async with seeded_db() as session:
            deleted = await SqlBlogStore(session).delete(str(target.id))
            await session.commit()

        assert deleted is True
        assert await count_rows(seeded_db, Blog) == 5

    @pytest.mark.asyncio
    async def test_delete_unknown_returns_false(self, seeded_db):
        async with seeded_db() as session:
            deleted = await SqlBlogStore(session).delete(non_existing_id())
            await session.commit()

        assert deleted is False
        assert await count_rows(seeded_db, Blog) == 6

    @pytest.mark.asyncio
    async def test_delete_malformed_id_raises(self, seeded_db):
        async with seeded_db() as session:
            with pytest.raises(MalformedIdError):
                await SqlBlogStore(session).delete("5a3d5da59070081a82a3445")

        assert await count_rows(seeded_db, Blog) == 6


class TestSqlUserStore:

    @pytest.mark.asyncio
    async def test_find_by_username(self, seeded_db):
        async with seeded_db() as session:
            store = SqlUserStore(session)
            root = await store.find_by_username("root")
            nobody = await store.find_by_username("nobody")

        assert root is not None
        assert root.name == "Superuser"
        assert root.adult is True
        assert nobody is None

    @pytest.mark.asyncio
    async def test_insert_and_find_all(self, seeded_db):
        async with seeded_db() as session:
            store = SqlUserStore(session)
            user = await store.insert(username="mluukkai", name="Matti Luukkainen", password_hash="x", adult=False)
            await session.commit()

        assert isinstance(user.id, uuid.UUID)
        usernames = [u.username for u in await users_in_db(seeded_db)]
        assert sorted(usernames) == ["mluukkai", "root"]

    @pytest.mark.asyncio
    async def test_insert_duplicate_username_raises(self, seeded_db):
        async with seeded_db() as session:
            with pytest.raises(DuplicateKeyError) as exc_info:
                await SqlUserStore(session).insert(username="root", name=None, password_hash="x", adult=True)
            await session.rollback()

        assert exc_info.value.key == "username"
        assert exc_info.value.value == "root"
        assert len(await users_in_db(seeded_db)) == 1
