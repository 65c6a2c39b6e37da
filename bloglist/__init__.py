"""
Bloglist Backend — Application Package
========================================

What:  The `bloglist` package: an async FastAPI service for blogs and users.
Who:   Imported by uvicorn (`uvicorn bloglist.main:app`), Alembic and pytest.

Layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, JSON bodies
    ├─────────────────────────────────────┤
    │   Services (Validation & Views)     │  ← BlogService, UserService
    ├─────────────────────────────────────┤
    │        Stores (Persistence)         │  ← BlogStore / UserStore protocols
    ├─────────────────────────────────────┤
    │   Models & Database (SQLAlchemy)    │  ← async sessions, ORM tables
    └─────────────────────────────────────┘

    Services never touch a session directly; they receive a store. Routes
    build the store from the per-request session, and tests swap in fakes.
"""

__version__ = "1.0.0"
