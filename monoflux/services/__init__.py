"""Services Layer - data providers over fixed in-memory data.

Invariants:
    - UserService produces single values; ProductService produces async streams
    - Providers own their data; callers never mutate it
"""
