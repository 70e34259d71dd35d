"""API Layer - FastAPI routes and error handlers.

Invariants:
    - Routers built by handler objects and included explicitly by main.create_app
    - Routes never contain business logic (delegate to services)
"""
