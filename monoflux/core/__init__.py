"""Core Layer - error hierarchy and publisher combinators.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - No IO: combinators only transform what their sources produce
"""
