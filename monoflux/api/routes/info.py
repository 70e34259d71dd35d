"""Info Routes - static documents describing the API and the two cardinalities.

Invariants:
    - No provider dependency: payloads are built from settings and static text only
    - /api/info lists every mono and flux route with a one-line description
    - /api/explanation keys: MONO, FLUX, KEY_DIFFERENCES, WHEN_TO_USE_MONO, WHEN_TO_USE_FLUX
"""

from fastapi import APIRouter

from monoflux import __version__
from monoflux.schemas.info import InfoResponse

MONO_ENDPOINTS = {
    "/api/mono/user/{id}": "Get a single user (Mono - single value)",
    "/api/mono/user-immediate/{id}": "Get user immediately (Mono - no delay)",
    "/api/mono/user-validated/{id}": "Get user with validation (Mono - error signal)",
    "/api/mono/user-email/{id}": "Get user email (Mono - transformation)",
    "/api/mono/user-summary/{id}": "Get user summary (Mono - chaining)",
}

FLUX_ENDPOINTS = {
    "/api/flux/products": "Get all products (Flux - multiple values)",
    "/api/flux/products-stream": "Stream products (Flux - NDJSON)",
    "/api/flux/products-by-price": "Filter by price (Flux - with parameter)",
    "/api/flux/products-by-price-stream": "Stream filtered by price (Flux - NDJSON)",
    "/api/flux/low-stock": "Low stock products (Flux - business logic)",
    "/api/flux/product-names": "Get product names (Flux - transformation)",
    "/api/flux/product-names-stream": "Stream product names (Flux - Server-Sent Events)",
    "/api/flux/products-combined": "Combine two filtered streams (Flux - concat + distinct)",
}

EXPLANATION = {
    "MONO": (
        "Mono is a Reactive Streams Publisher that emits 0 or 1 element.\n"
        "- Use case: Single value/response\n"
        "- Examples: Get one user by ID, fetch single configuration, "
        "API call returning one result\n"
        "- Performance: Best for operations with one result\n"
        "- Memory: Minimal - handles only one value\n"
        "- Thread model: Non-blocking, single element subscription"
    ),
    "FLUX": (
        "Flux is a Reactive Streams Publisher that emits 0 to N elements.\n"
        "- Use case: Multiple values/streaming data\n"
        "- Examples: Get all users, stream live data, paginated results\n"
        "- Performance: Optimized for streaming large datasets\n"
        "- Memory: Efficient - processes one item at a time (backpressure)\n"
        "- Thread model: Non-blocking, multiple element subscription "
        "with back-pressure support"
    ),
    "KEY_DIFFERENCES": (
        "1. Cardinality: Mono=0-1, Flux=0-N\n"
        "2. Response: Mono=single JSON object, Flux=JSON array or stream\n"
        "3. Memory: Mono=small, Flux=can handle large datasets\n"
        "4. Use: Mono=single resource, Flux=collections/streams\n"
        "5. Backpressure: Both support it, but Flux is more critical"
    ),
    "WHEN_TO_USE_MONO": (
        "- Finding a user by ID\n"
        "- Getting current configuration\n"
        "- Creating a single resource\n"
        "- Fetching count of items\n"
        "- API calls returning single object"
    ),
    "WHEN_TO_USE_FLUX": (
        "- Fetching all users from database\n"
        "- Streaming data in real-time\n"
        "- Processing large datasets\n"
        "- Server-Sent Events (SSE)\n"
        "- Paginated/filtered results"
    ),
}


class InfoRoutes:
    """GET /api/info and /api/explanation."""

    def __init__(self, application: str, description: str):
        self._application = application
        self._description = description

    def build_router(self) -> APIRouter:
        router = APIRouter(prefix="/api", tags=["info"])
        router.add_api_route("/info", self.get_info, methods=["GET"])
        router.add_api_route("/explanation", self.get_explanation, methods=["GET"])
        return router

    async def get_info(self) -> InfoResponse:
        return InfoResponse(
            application=self._application,
            description=self._description,
            version=__version__,
            mono_endpoints=MONO_ENDPOINTS,
            flux_endpoints=FLUX_ENDPOINTS,
        )

    async def get_explanation(self) -> dict[str, str]:
        return dict(EXPLANATION)
