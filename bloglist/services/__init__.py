# Services package init
"""
Bloglist Backend — Services Layer
===================================

What:  Validation and view-mapping logic between routes (HTTP) and stores.

Service Inventory:
    - BlogService: list / create / remove blogs
    - UserService: list / create users (username rules, password hashing)

Services are stateless singletons. Each call receives the store to work
against, which is how tests substitute in-memory fakes for the database.
"""
