"""Pydantic Schemas - response contracts for endpoints that are not entities.

Invariants:
    - Entities (User, Product) live in models/; schemas here describe API documents
"""
