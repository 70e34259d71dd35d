"""User - single-value entity returned by the mono routes.

Invariants:
    - Frozen: never mutated after construction
    - Created per request; no identity beyond the returned value
"""

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """A user record with placeholder identity values."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
