"""Route Modules - one handler class per cardinality (mono, flux) plus info.

Invariants:
    - Each handler builds its own APIRouter with prefix and tags
    - Handlers receive their provider through the constructor
"""
