"""Mono Routes - single-value endpoints (one JSON object or one text body).

Invariants:
    - Every endpoint resolves exactly one provider call
    - user-email falls back to "User not found" when the provider yields nothing
    - user-summary falls back to "Error fetching user" when the provider fails
    - user-validated propagates InvalidArgumentError to the global handler

Design Decisions:
    - Handler object receives UserService through its constructor; the
      composition root decides which instance serves requests
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from monoflux.core.publishers import default_if_empty, map_single, on_error_return
from monoflux.models.user import User
from monoflux.services.user_service import UserService

USER_NOT_FOUND = "User not found"
USER_FETCH_ERROR = "Error fetching user"


def format_user_summary(user: User) -> str:
    return f"User: {user.name} ({user.email})"


class MonoRoutes:
    """GET /api/mono/* handlers backed by a UserService."""

    def __init__(self, user_service: UserService):
        self._users = user_service

    def build_router(self) -> APIRouter:
        router = APIRouter(prefix="/api/mono", tags=["mono"])
        router.add_api_route(
            "/user/{user_id}", self.get_user_by_id, methods=["GET"],
            summary="Get a single user (delayed)",
        )
        router.add_api_route(
            "/user-immediate/{user_id}", self.get_user_by_id_immediate,
            methods=["GET"], summary="Get a single user without delay",
        )
        router.add_api_route(
            "/user-validated/{user_id}", self.get_user_by_id_with_validation,
            methods=["GET"], summary="Get a user, failing for negative ids",
        )
        router.add_api_route(
            "/user-email/{user_id}", self.get_user_email, methods=["GET"],
            response_class=PlainTextResponse, summary="Get a user's email",
        )
        router.add_api_route(
            "/user-summary/{user_id}", self.get_user_summary, methods=["GET"],
            response_class=PlainTextResponse, summary="Get a formatted user summary",
        )
        return router

    async def get_user_by_id(self, user_id: int) -> User:
        return await self._users.get_user_by_id(user_id)

    async def get_user_by_id_immediate(self, user_id: int) -> User:
        return await self._users.get_user_by_id_immediate(user_id)

    async def get_user_by_id_with_validation(self, user_id: int) -> User:
        return await self._users.get_user_by_id_with_error(user_id)

    async def get_user_email(self, user_id: int) -> str:
        """Email of the user, or a literal fallback if no user was produced."""
        email = map_single(self._users.get_user_by_id(user_id), lambda u: u.email)
        return await default_if_empty(email, USER_NOT_FOUND)

    async def get_user_summary(self, user_id: int) -> str | None:
        """Formatted summary, or a literal fallback if the fetch failed.

        An empty fetch yields an empty body.
        """
        summary = map_single(self._users.get_user_by_id(user_id), format_user_summary)
        return await on_error_return(summary, USER_FETCH_ERROR)
