# Routes package init
"""
Bloglist Backend — API Routes Package
=======================================

Route Inventory:
    - blogs.py:   GET    /api/blogs           (list blogs)
                  POST   /api/blogs           (create blog)
                  DELETE /api/blogs/{id}      (delete blog)
    - users.py:   GET    /api/users           (list users)
                  POST   /api/users           (create user)
    - health.py:  GET    /health              (service health check)
    - deps.py:    store dependencies shared by the routers

Routes stay thin: parse the request, call the service with a store, pick
the status code. Validation lives in the services.
"""
