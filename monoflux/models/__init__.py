"""Entity Models - immutable pydantic records served by the API.

Invariants:
    - Entities are frozen; handlers observe them, never mutate them
    - One file per entity
"""

from monoflux.models.product import Product
from monoflux.models.user import User

__all__ = ["Product", "User"]
