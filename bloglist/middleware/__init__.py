# Middleware package init
"""
Bloglist Backend — Middleware Package
=======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: correlation ID stored in a ContextVar for every log line
    2. Logging: one access line per request, with status and duration
    3. CORS: FastAPI's CORSMiddleware (handles preflight)
"""
