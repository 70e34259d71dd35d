"""Flux Routes - multi-value endpoints, buffered as JSON arrays or streamed.

Invariants:
    - Buffered and streamed variants of a listing emit the same items in the same order
    - Streamed variants encode each item as it is pulled from the provider
    - maxPrice defaults to Settings.default_max_price, threshold to
      Settings.default_low_stock_threshold
"""

from fastapi import APIRouter, Query
from fastapi.responses import StreamingResponse

from monoflux.api.routes.stream_framing import (
    EVENT_STREAM_MEDIA_TYPE, NDJSON_MEDIA_TYPE, STREAM_HEADERS,
    ndjson_stream, sse_stream,
)
from monoflux.core.publishers import collect
from monoflux.models.product import Product
from monoflux.services.product_service import ProductService


class FluxRoutes:
    """GET /api/flux/* handlers backed by a ProductService."""

    def __init__(
        self,
        product_service: ProductService,
        default_max_price: float = 500.0,
        default_low_stock_threshold: int = 15,
    ):
        self._products = product_service
        self._default_max_price = default_max_price
        self._default_threshold = default_low_stock_threshold

    def build_router(self) -> APIRouter:
        router = APIRouter(prefix="/api/flux", tags=["flux"])
        table = (
            ("/products", self.get_all_products, None),
            ("/products-stream", self.stream_all_products, StreamingResponse),
            ("/products-by-price", self.get_products_by_price, None),
            ("/products-by-price-stream", self.stream_products_by_price, StreamingResponse),
            ("/low-stock", self.get_low_stock_products, None),
            ("/product-names", self.get_product_names, None),
            ("/product-names-stream", self.stream_product_names, StreamingResponse),
            ("/products-combined", self.get_combined_products, None),
        )
        for path, endpoint, response_class in table:
            options = {"response_class": response_class} if response_class else {}
            router.add_api_route(path, endpoint, methods=["GET"], **options)
        return router

    def _max_price(self, max_price: float | None) -> float:
        return self._default_max_price if max_price is None else max_price

    # ─── Buffered (JSON array) ───────────────────────────────────

    async def get_all_products(self) -> list[Product]:
        return await collect(self._products.get_all_products())

    async def get_products_by_price(
        self, max_price: float | None = Query(None, alias="maxPrice"),
    ) -> list[Product]:
        return await collect(
            self._products.get_products_by_max_price(self._max_price(max_price)),
        )

    async def get_low_stock_products(
        self, threshold: int | None = Query(None),
    ) -> list[Product]:
        if threshold is None:
            threshold = self._default_threshold
        return await collect(self._products.get_low_stock_products(threshold))

    async def get_product_names(self) -> list[str]:
        return await collect(self._products.get_product_names())

    async def get_combined_products(self) -> list[Product]:
        """Products priced <= 100 followed by the remaining ones priced <= 500."""
        return await collect(self._products.get_combined_products())

    # ─── Streamed (NDJSON / event stream) ────────────────────────

    async def stream_all_products(self) -> StreamingResponse:
        return StreamingResponse(
            ndjson_stream(self._products.get_all_products(), "products-stream"),
            media_type=NDJSON_MEDIA_TYPE,
            headers=STREAM_HEADERS,
        )

    async def stream_products_by_price(
        self, max_price: float | None = Query(None, alias="maxPrice"),
    ) -> StreamingResponse:
        source = self._products.get_products_by_max_price(self._max_price(max_price))
        return StreamingResponse(
            ndjson_stream(source, "products-by-price-stream"),
            media_type=NDJSON_MEDIA_TYPE,
            headers=STREAM_HEADERS,
        )

    async def stream_product_names(self) -> StreamingResponse:
        return StreamingResponse(
            sse_stream(self._products.get_product_names(), "product-names-stream"),
            media_type=EVENT_STREAM_MEDIA_TYPE,
            headers=STREAM_HEADERS,
        )
