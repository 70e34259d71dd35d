"""User Service - single-value producers (0 or 1 User, or a failure).

Invariants:
    - Every operation resolves to exactly one User or raises
    - The delayed fetch suspends only the awaiting task (asyncio.sleep), never a thread
    - Placeholder identities differ per operation so callers can tell them apart

Design Decisions:
    - Delay injected via constructor (seconds) so the composition root and
      tests control it without patching
"""

import asyncio
import logging

from monoflux.core.errors import InvalidArgumentError
from monoflux.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    """Serves User records built from the requested id and fixed placeholders."""

    def __init__(self, fetch_delay_seconds: float = 1.0):
        if fetch_delay_seconds < 0:
            raise ValueError("fetch_delay_seconds must be >= 0")
        self._fetch_delay_seconds = fetch_delay_seconds

    async def get_user_by_id(self, user_id: int) -> User:
        """Simulated database lookup: resolves after the configured delay."""
        logger.debug(
            "Fetching user with simulated delay of %.3fs", self._fetch_delay_seconds,
            extra={"user_id": user_id},
        )
        await asyncio.sleep(self._fetch_delay_seconds)
        return User(id=user_id, name="John Doe", email="john@example.com")

    async def get_user_by_id_immediate(self, user_id: int) -> User:
        return User(id=user_id, name="Jane Smith", email="jane@example.com")

    async def get_user_by_id_with_error(self, user_id: int) -> User:
        """Resolve a User, or fail with InvalidArgumentError for negative ids."""
        if user_id < 0:
            raise InvalidArgumentError("User ID must be positive", argument="id")
        return User(id=user_id, name="Valid User", email="valid@example.com")
