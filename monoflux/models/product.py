"""Product - multi-value entity emitted by the flux routes.

Invariants:
    - Frozen and hashable: equality and hash cover every field
    - price >= 0, quantity >= 0
"""

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A catalog item held in the fixed in-memory seed."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: float = Field(ge=0)
    quantity: int = Field(ge=0)
