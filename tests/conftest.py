"""
Bloglist Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the whole suite.

Fixture Hierarchy:
    Plain data:
    ├── initial_blogs: the six blogs most tests start from
    └── initial_user: the "root" user payload

    In-memory stores (service unit tests, no database):
    ├── blog_store: FakeBlogStore
    └── user_store: FakeUserStore

    Real database (store and API tests):
    ├── session_factory: async sessions on a fresh SQLite file per test
    ├── seeded_db: session_factory with initial_blogs and root user stored
    └── test_client: HTTPX AsyncClient talking to the app, whose
        get_db_session dependency is pointed at session_factory
"""

import os
import tempfile

# Override settings for testing BEFORE any bloglist import reads them
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="bloglist_test_"), "app.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

import uuid
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from bloglist.database import Base, get_db_session
from bloglist.models.blog import Blog
from bloglist.models.user import User
from bloglist.security import hash_password
from helpers import FakeBlogStore, FakeUserStore


# ══════════════════════════════════════════════════════════════════════════
# Data Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def initial_blogs():
    return [
        {"title": "React patterns", "author": "Michael Chan", "url": "https://reactpatterns.com/", "likes": 7},
        {
            "title": "Go To Statement Considered Harmful",
            "author": "Edsger W. Dijkstra",
            "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
            "likes": 5,
        },
        {
            "title": "Canonical string reduction",
            "author": "Edsger W. Dijkstra",
            "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
            "likes": 12,
        },
        {
            "title": "First class tests",
            "author": "Robert C. Martin",
            "url": "http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll",
            "likes": 10,
        },
        {
            "title": "TDD harms architecture",
            "author": "Robert C. Martin",
            "url": "http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html",
            "likes": 0,
        },
        {
            "title": "Type wars",
            "author": "Robert C. Martin",
            "url": "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html",
            "likes": 2,
        },
    ]


@pytest.fixture
def initial_user():
    return {"username": "root", "name": "Superuser", "password": "sekret"}


@pytest.fixture
def blog_store(initial_blogs):
    return FakeBlogStore([Blog(id=uuid.uuid4(), **b) for b in initial_blogs])


@pytest.fixture
def user_store(initial_user):
    root = User(
        id=uuid.uuid4(),
        username=initial_user["username"],
        name=initial_user["name"],
        password_hash=hash_password(initial_user["password"]),
        adult=True,
    )
    return FakeUserStore([root])


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker, None]:
    """A fresh SQLite database with all tables created, disposed after the test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'bloglist.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def seeded_db(session_factory, initial_blogs, initial_user):
    async with session_factory() as session:
        session.add_all(Blog(**b) for b in initial_blogs)
        session.add(
            User(
                username=initial_user["username"],
                name=initial_user["name"],
                password_hash=hash_password(initial_user["password"]),
            )
        )
        await session.commit()
    return session_factory


@pytest_asyncio.fixture
async def test_client(seeded_db):
    """
    HTTPX AsyncClient routed straight into the app via ASGITransport.

    get_db_session is overridden with the same commit/rollback behaviour as
    the real dependency, bound to the seeded SQLite database.
    """
    from bloglist.main import app

    async def override_get_db_session():
        async with seeded_db() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
